from .models import Item, ItemKind, Potion, Spell, Weapon

__all__ = ["Item", "ItemKind", "Potion", "Spell", "Weapon"]
