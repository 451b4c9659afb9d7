from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Dict, Mapping, Optional

from hearthtale.inventory.container import Container
from hearthtale.items.models import Item, ItemKind
from hearthtale.narration.narrator import Narrator

logger = logging.getLogger(__name__)

CONTAINER_LABELS: Dict[ItemKind, str] = {
    ItemKind.WEAPON: "arsenal",
    ItemKind.POTION: "medical bag",
    ItemKind.SPELL: "spell book",
}


@dataclass(frozen=True)
class CapabilitySet:
    """Which item kinds a character type may carry. Fixed per type."""

    weapon: bool = False
    potion: bool = False
    spell: bool = False

    def allows(self, kind: ItemKind) -> bool:
        return {
            ItemKind.WEAPON: self.weapon,
            ItemKind.POTION: self.potion,
            ItemKind.SPELL: self.spell,
        }[kind]


class Character:
    """
    A named member of the cast with health and one container per carried item kind.

    Subclasses declare ``type_name``, ``capabilities`` and ``default_capacities``;
    role behaviour (attack, cast, drink) comes from the facets in ``roles``.
    Health never drops below zero and death is permanent.
    """

    type_name: ClassVar[str] = "Character"
    capabilities: ClassVar[CapabilitySet] = CapabilitySet()
    default_capacities: ClassVar[Mapping[ItemKind, int]] = {}

    def __init__(
        self,
        name: str,
        hp: int,
        narrator: Narrator,
        capacities: Optional[Mapping[ItemKind, int]] = None,
    ) -> None:
        self.name = name
        self._hp = hp
        self.narrator = narrator
        sizes = dict(self.default_capacities)
        sizes.update(capacities or {})
        self._containers: Dict[ItemKind, Container] = {
            kind: Container(CONTAINER_LABELS[kind], size, narrator)
            for kind, size in sizes.items()
            if kind in self.default_capacities and self.capabilities.allows(kind)
        }
        logger.debug("Created %s %s hp=%d containers=%s", self.type_name, name, hp, sorted(k.value for k in self._containers))

    @property
    def hp(self) -> int:
        return self._hp

    def is_alive(self) -> bool:
        return self._hp > 0

    def summary(self) -> str:
        return f"{self.name}:{self.type_name}:{self._hp}"

    def container(self, kind: ItemKind) -> Optional[Container]:
        return self._containers.get(kind)

    def add_item(self, item: Item) -> bool:
        """Route an item into the container for its kind. Rejections are narrated."""
        kind = getattr(item, "kind", None)
        if isinstance(kind, ItemKind) and not self.capabilities.allows(kind):
            self.narrator.log_event(f"Error caught: {self.name} can't carry {kind.value}s.")
            return False
        container = self._containers.get(kind) if isinstance(kind, ItemKind) else None
        if container is None:
            self.narrator.log_event(f"Error caught: Item type not supported for {self.name}.")
            return False
        return container.insert(item)

    def take_damage(self, amount: int) -> None:
        if not self.is_alive():
            return
        self._hp -= amount
        if self._hp <= 0:
            self._hp = 0
            self.narrator.log_event(f"{self.name} has died.")
            logger.info("%s died", self.name)

    def heal(self, amount: int) -> None:
        # No cap and no aliveness check
        self._hp += amount

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, hp={self._hp})"
