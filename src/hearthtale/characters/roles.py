"""Role facets a character type may implement: wielding, casting, drinking.

Facets are mixed into ``Character`` subclasses; the interpreter checks
``isinstance(character, WeaponUser)`` and friends before routing a command.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

from hearthtale.exceptions import ActionError
from hearthtale.items.models import ItemKind

if TYPE_CHECKING:
    from hearthtale.characters.base import Character
    from hearthtale.inventory.container import Container


class WeaponUser(ABC):
    @property
    def arsenal(self) -> "Container":
        return self.container(ItemKind.WEAPON)  # type: ignore[attr-defined]

    @abstractmethod
    def attack(self, target: "Character", weapon_name: str) -> None:
        """Strike target with a weapon from the arsenal."""

    def show_weapons(self) -> List[str]:
        return [weapon.describe() for weapon in self.arsenal.list()]


class SpellUser(ABC):
    @property
    def spell_book(self) -> "Container":
        return self.container(ItemKind.SPELL)  # type: ignore[attr-defined]

    @abstractmethod
    def cast_spell(self, spell_name: str, target: "Character") -> None:
        """Cast a spell from the book; the spell is spent by the attempt."""

    def show_spells(self) -> List[str]:
        return [spell.describe() for spell in self.spell_book.list()]


class PotionUser(ABC):
    @property
    def medical_bag(self) -> "Container":
        return self.container(ItemKind.POTION)  # type: ignore[attr-defined]

    def drink_potion(self, potion_name: str, target: "Character") -> None:
        """Use a potion from the medical bag on target, then discard it.

        Raises ActionError if the drinker is dead or the potion is missing.
        """
        if not self.is_alive():  # type: ignore[attr-defined]
            raise ActionError(f"{self.name} is not alive to drink a potion.")  # type: ignore[attr-defined]
        potion = self.medical_bag.lookup(potion_name)
        if potion is None:
            raise ActionError(f"Potion {potion_name} not found in medical bag.")
        potion.use(self, target)
        self.medical_bag.remove(potion_name)

    def show_potions(self) -> List[str]:
        return [potion.describe() for potion in self.medical_bag.list()]
