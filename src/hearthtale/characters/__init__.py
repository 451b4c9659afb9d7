from .base import CapabilitySet, Character
from .roles import PotionUser, SpellUser, WeaponUser
from .variants import CHARACTER_TYPES, Archer, Fighter, Wizard

__all__ = [
    "CHARACTER_TYPES",
    "Archer",
    "CapabilitySet",
    "Character",
    "Fighter",
    "PotionUser",
    "SpellUser",
    "WeaponUser",
    "Wizard",
]
