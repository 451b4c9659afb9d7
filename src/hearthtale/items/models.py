from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Optional, Tuple

from hearthtale.exceptions import ItemError

if TYPE_CHECKING:
    from hearthtale.characters.base import Character

logger = logging.getLogger(__name__)


class ItemKind(str, Enum):
    WEAPON = 'weapon'
    POTION = 'potion'
    SPELL = 'spell'


@dataclass(eq=False)
class Item:
    """Base of the closed item union.

    ``kind`` is the tag owning characters use to route an item into the
    matching container. Items compare by identity: names are only unique
    inside one container.
    """

    kind: ClassVar[ItemKind]
    reusable: ClassVar[bool] = True

    name: str
    owner: Optional['Character'] = field(default=None, repr=False)
    last_target: Optional['Character'] = field(default=None, init=False, repr=False)

    def use(self, user: Optional['Character'], target: Optional['Character']) -> None:
        raise NotImplementedError

    def describe(self) -> str:
        raise NotImplementedError


def _require_positive(value: int, label: str) -> int:
    if value <= 0:
        raise ItemError(f'{label} must be positive.')
    return value


@dataclass(eq=False)
class Weapon(Item):
    kind: ClassVar[ItemKind] = ItemKind.WEAPON

    damage: int = 0

    def __post_init__(self) -> None:
        _require_positive(self.damage, 'damageValue')

    def use(self, user: Optional['Character'], target: Optional['Character']) -> None:
        # The wielder's own health is not checked here; callers decide that
        if user is None or target is None:
            return
        target.take_damage(self.damage)
        self.last_target = target
        user.narrator.log_event(
            f'{user.name} attacks {target.name} with {self.name}, dealing {self.damage} damage.'
        )

    def describe(self) -> str:
        return f'Weapon: {self.name} Damage: {self.damage}'


@dataclass(eq=False)
class Potion(Item):
    """Single-use heal. Inert after its first successful use."""

    kind: ClassVar[ItemKind] = ItemKind.POTION
    reusable: ClassVar[bool] = False

    heal_value: int = 0
    active: bool = field(default=True, init=False)

    def __post_init__(self) -> None:
        _require_positive(self.heal_value, 'healValue')

    def use(self, user: Optional['Character'], target: Optional['Character']) -> None:
        if user is None or target is None:
            return
        if not (user.is_alive() and target.is_alive() and self.active):
            logger.debug('Potion %s not usable (active=%s)', self.name, self.active)
            return
        target.heal(self.heal_value)
        self.last_target = target
        user.narrator.log_event(
            f'{user.name} uses {self.name} on {target.name}, healing {self.heal_value} HP.'
        )
        self.active = False

    def describe(self) -> str:
        return f'Potion: {self.name} HealValue: {self.heal_value}'


@dataclass(eq=False)
class Spell(Item):
    """Narrative-only cast limited to the targets named when it was written."""

    kind: ClassVar[ItemKind] = ItemKind.SPELL

    authorized_targets: Tuple['Character', ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        self.authorized_targets = tuple(self.authorized_targets)

    def is_authorized(self, target: 'Character') -> bool:
        return any(t is target for t in self.authorized_targets)

    def use(self, user: Optional['Character'], target: Optional['Character']) -> None:
        if user is None:
            logger.debug('Spell %s used without a caster', self.name)
            return
        narrator = user.narrator
        if not user.is_alive():
            narrator.log_event('Error: User is not alive or does not exist.')
            return
        if target is None or not target.is_alive():
            narrator.log_event('Error: Target is not valid or not alive.')
            return
        if not self.is_authorized(target):
            narrator.log_event(
                f'{user.name} attempted to cast {self.name} on an unauthorized target: {target.name}.'
            )
            return
        self.last_target = target
        narrator.log_event(f'{user.name} casts {self.name} on {target.name}.')

    def describe(self) -> str:
        return f'Spell: {self.name}'


__all__ = [
    'Item',
    'ItemKind',
    'Potion',
    'Spell',
    'Weapon',
]
