from __future__ import annotations

import logging
from typing import Dict, Generic, List, Optional, TypeVar

from hearthtale.items.models import Item
from hearthtale.narration.narrator import Narrator

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Item)


class Container(Generic[T]):
    """
    Fixed-capacity, name-keyed store for one kind of item.

    - Inserting into a full container is rejected and narrated; nothing is truncated.
    - Inserting a name that is already present replaces the stored item.
    - Listing is in item-name order.
    """

    def __init__(self, label: str, capacity: int, narrator: Narrator) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.label = label
        self._capacity = capacity
        self._narrator = narrator
        self._items: Dict[str, T] = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def insert(self, item: T) -> bool:
        if len(self._items) >= self._capacity:
            self._narrator.log_event(f"Error caught: Container is full. Cannot add {item.name}.")
            logger.debug("%s full (capacity=%d), rejected %s", self.label, self._capacity, item.name)
            return False
        self._items[item.name] = item
        logger.debug("Stored %s in %s (%d/%d)", item.name, self.label, len(self._items), self._capacity)
        return True

    def lookup(self, name: str) -> Optional[T]:
        return self._items.get(name)

    def remove(self, name: str) -> bool:
        if self._items.pop(name, None) is None:
            return False
        logger.debug("Removed %s from %s", name, self.label)
        return True

    def list(self) -> List[T]:
        return [self._items[name] for name in sorted(self._items)]
