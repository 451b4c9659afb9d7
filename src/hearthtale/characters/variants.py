from __future__ import annotations

import logging
from typing import Dict, Type

from hearthtale.characters.base import CapabilitySet, Character
from hearthtale.characters.roles import PotionUser, SpellUser, WeaponUser
from hearthtale.exceptions import ActionError
from hearthtale.items.models import ItemKind

logger = logging.getLogger(__name__)


class Fighter(Character, WeaponUser, PotionUser):
    """Weapons and potions. Every failed attack is a hard failure."""

    type_name = "Fighter"
    capabilities = CapabilitySet(weapon=True, potion=True, spell=False)
    default_capacities = {ItemKind.WEAPON: 3, ItemKind.POTION: 5}

    def attack(self, target: Character, weapon_name: str) -> None:
        if not self.is_alive():
            raise ActionError(f"{self.name} is not alive to perform an attack.")
        if target is None or not target.is_alive():
            raise ActionError("Target is not valid or not alive.")
        weapon = self.arsenal.lookup(weapon_name)
        if weapon is None:
            raise ActionError(f"Weapon {weapon_name} not found in arsenal.")
        weapon.use(self, target)


class Wizard(Character, SpellUser, PotionUser):
    """Spells and potions. Casting spends the spell whatever the outcome."""

    type_name = "Wizard"
    capabilities = CapabilitySet(weapon=False, potion=True, spell=True)
    default_capacities = {ItemKind.POTION: 10, ItemKind.SPELL: 10}

    def cast_spell(self, spell_name: str, target: Character) -> None:
        spell = self.spell_book.lookup(spell_name)
        if spell is None:
            logger.debug("%s has no spell %s", self.name, spell_name)
            return
        spell.use(self, target)
        self.spell_book.remove(spell_name)


class Archer(Character, WeaponUser, SpellUser, PotionUser):
    """Carries everything. Attack and cast problems are narrated, not raised."""

    type_name = "Archer"
    capabilities = CapabilitySet(weapon=True, potion=True, spell=True)
    default_capacities = {ItemKind.WEAPON: 2, ItemKind.POTION: 3, ItemKind.SPELL: 2}

    def attack(self, target: Character, weapon_name: str) -> None:
        if target is None or not target.is_alive():
            self.narrator.log_event(f"Error caught: {self.name} is not alive to perform an attack.")
            return
        weapon = self.arsenal.lookup(weapon_name)
        if weapon is None:
            self.narrator.log_event(f"Error caught: {self.name} doesn't own the weapon {weapon_name}.")
            return
        weapon.use(self, target)

    def cast_spell(self, spell_name: str, target: Character) -> None:
        if not self.is_alive():
            logger.debug("%s is dead and cannot cast %s", self.name, spell_name)
            return
        spell = self.spell_book.lookup(spell_name)
        if spell is None:
            logger.debug("%s has no spell %s", self.name, spell_name)
            return
        spell.use(self, target)
        self.spell_book.remove(spell_name)


CHARACTER_TYPES: Dict[str, Type[Character]] = {
    "fighter": Fighter,
    "wizard": Wizard,
    "archer": Archer,
}
