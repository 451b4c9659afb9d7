from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from hearthtale.characters.base import Character
from hearthtale.characters.roles import PotionUser, SpellUser, WeaponUser
from hearthtale.commands.tokens import TokenStream
from hearthtale.exceptions import CapabilityError
from hearthtale.items.models import Item, Potion, Spell, Weapon
from hearthtale.narration.console import Console
from hearthtale.world import World

logger = logging.getLogger(__name__)

Handler = Callable[[TokenStream], None]


class CommandInterpreter:
    """
    Parses one command line at a time and applies it to the world.

    Verbs: Create, Attack, Cast, Drink, Dialogue, Show. Unknown verbs and
    names that are not registered are ignored without narration. Hard
    failures (ActionError, ItemError) propagate to the caller.
    """

    def __init__(self, world: World, console: Optional[Console] = None) -> None:
        self.world = world
        self.console = console or Console()
        self._handlers: Dict[str, Handler] = {
            "Create": self._cmd_create,
            "Attack": self._cmd_attack,
            "Cast": self._cmd_cast,
            "Drink": self._cmd_drink,
            "Dialogue": self._cmd_dialogue,
            "Show": self._cmd_show,
        }

    def execute(self, line: str) -> None:
        tokens = TokenStream(line)
        verb = tokens.word()
        handler = self._handlers.get(verb)
        if handler is None:
            logger.debug("Ignoring unrecognised command: %r", line)
            return
        handler(tokens)

    # Create

    def _cmd_create(self, tokens: TokenStream) -> None:
        what = tokens.word()
        if what == "character":
            self._create_character(tokens)
        elif what == "item":
            self._create_item(tokens)

    def _create_character(self, tokens: TokenStream) -> None:
        type_key = tokens.word()
        name = tokens.word()
        hp = tokens.integer()
        # Unknown types register nothing but are still greeted
        self.world.create_character(type_key, name, hp)
        self.console.say(f"A new {type_key} came to town, {name}.")

    def _create_item(self, tokens: TokenStream) -> None:
        kind = tokens.word()
        owner_name = tokens.word()
        item_name = tokens.word()
        item: Optional[Item] = None
        if kind == "weapon":
            damage = tokens.integer()
            owner = self.world.get(owner_name)
            if owner is not None:
                item = Weapon(name=item_name, owner=owner, damage=damage)
        elif kind == "potion":
            heal_value = tokens.integer()
            owner = self.world.get(owner_name)
            if owner is not None:
                item = Potion(name=item_name, owner=owner, heal_value=heal_value)
        elif kind == "spell":
            count = tokens.integer()
            # Names that are not registered yet are dropped from the list
            targets = [self.world.get(n) for n in tokens.words(count)]
            owner = self.world.get(owner_name)
            if owner is not None:
                item = Spell(
                    name=item_name,
                    owner=owner,
                    authorized_targets=tuple(t for t in targets if t is not None),
                )
        else:
            return
        if item is None:
            logger.debug("Item %s skipped: no character named %r", item_name, owner_name)
            return
        item.owner.add_item(item)
        self.console.say(f"{owner_name} just obtained a new {kind} called {item_name}.")

    # Actions

    def _pair(self, tokens: TokenStream):
        first = self.world.get(tokens.word())
        second = self.world.get(tokens.word())
        return first, second, tokens.word()

    def _cmd_attack(self, tokens: TokenStream) -> None:
        attacker, target, weapon_name = self._pair(tokens)
        if attacker is None or target is None:
            return
        self._require(attacker, WeaponUser, "wield weapons").attack(target, weapon_name)
        self.console.say(f"{attacker.name} attacks {target.name} with their {weapon_name}!")

    def _cmd_cast(self, tokens: TokenStream) -> None:
        caster, target, spell_name = self._pair(tokens)
        if caster is None or target is None:
            return
        self._require(caster, SpellUser, "cast spells").cast_spell(spell_name, target)
        self.console.say(f"{caster.name} casts {spell_name} on {target.name}!")

    def _cmd_drink(self, tokens: TokenStream) -> None:
        # The supplier is only named in the flavor text
        supplier_name = tokens.word()
        drinker = self.world.get(tokens.word())
        potion_name = tokens.word()
        if drinker is None:
            return
        self._require(drinker, PotionUser, "drink potions").drink_potion(potion_name, drinker)
        self.console.say(f"{drinker.name} drinks {potion_name} from {supplier_name}.")

    def _cmd_dialogue(self, tokens: TokenStream) -> None:
        speaker = tokens.word()
        count = tokens.integer()
        self.console.say(f"{speaker}: {' '.join(tokens.utterance(count))}")

    # Show

    def _cmd_show(self, tokens: TokenStream) -> None:
        what = tokens.word()
        if what == "characters":
            self.console.say(" ".join(self.world.alive_summaries()))
            return
        listings = {
            "weapons": (WeaponUser, "wield weapons", "show_weapons"),
            "potions": (PotionUser, "drink potions", "show_potions"),
            "spells": (SpellUser, "cast spells", "show_spells"),
        }
        if what not in listings:
            return
        character = self.world.get(tokens.word())
        if character is None:
            return
        facet, ability, method = listings[what]
        for line in getattr(self._require(character, facet, ability), method)():
            self.console.say(line)

    @staticmethod
    def _require(character: Character, facet: type, ability: str):
        if not isinstance(character, facet):
            raise CapabilityError(f"{character.type_name} {character.name} cannot {ability}.")
        return character
