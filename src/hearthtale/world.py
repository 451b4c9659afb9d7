from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional

from hearthtale.characters.base import Character
from hearthtale.characters.variants import CHARACTER_TYPES
from hearthtale.config.loader import EngineConfig
from hearthtale.narration.narrator import Narrator

logger = logging.getLogger(__name__)


class World:
    """
    Registry of every character ever created, keyed by name.

    Characters are never removed; dead ones stay registered. Creating a
    character under an existing name replaces the previous one.
    """

    def __init__(self, narrator: Narrator, config: Optional[EngineConfig] = None) -> None:
        self.narrator = narrator
        self.config = config or EngineConfig()
        self._characters: Dict[str, Character] = {}

    def create_character(self, type_key: str, name: str, hp: int) -> Optional[Character]:
        """Instantiate and register a variant; returns None for an unknown type."""
        cls = CHARACTER_TYPES.get(type_key)
        if cls is None:
            logger.debug("Unknown character type %r for %s", type_key, name)
            return None
        capacities = self.config.capacities_for(type_key).by_kind()
        character = cls(name, hp, self.narrator, capacities=capacities)
        if name in self._characters:
            logger.warning("Character %s already exists; replacing it", name)
        self._characters[name] = character
        return character

    def get(self, name: str) -> Optional[Character]:
        return self._characters.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._characters

    def __iter__(self) -> Iterator[Character]:
        return iter(self._characters.values())

    def __len__(self) -> int:
        return len(self._characters)

    def alive_summaries(self) -> List[str]:
        """``name:type:hp`` for each living character, sorted lexically."""
        return sorted(c.summary() for c in self._characters.values() if c.is_alive())
