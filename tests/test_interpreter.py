import pytest

from hearthtale.characters import Archer, Fighter, Wizard
from hearthtale.commands.tokens import TokenStream
from hearthtale.exceptions import ActionError, CapabilityError, ItemError


def run(interpreter, *lines):
    for line in lines:
        interpreter.execute(line)


def console_lines(stream):
    return stream.getvalue().splitlines()


def test_token_stream_defaults_when_exhausted():
    tokens = TokenStream("Create character fighter")
    assert tokens.word() == "Create"
    assert tokens.word() == "character"
    assert tokens.word() == "fighter"
    assert tokens.word() == ""
    assert tokens.integer() == 0
    assert tokens.failed


def test_token_stream_bad_integer_fails_later_reads():
    tokens = TokenStream("abc Bob")
    assert tokens.integer() == 0
    assert tokens.word() == ""


def test_token_stream_words_stops_at_end():
    tokens = TokenStream("hello there")
    assert tokens.words(5) == ["hello", "there"]
    assert TokenStream("a b c").words(-1) == []


def test_create_character_registers_and_greets(interpreter, world, console_stream):
    run(interpreter, "Create character fighter Bob 100", "Create character wizard Mia 30", "Create character archer Tim 20")

    assert isinstance(world.get("Bob"), Fighter)
    assert isinstance(world.get("Mia"), Wizard)
    assert isinstance(world.get("Tim"), Archer)
    assert console_lines(console_stream) == [
        "A new fighter came to town, Bob.",
        "A new wizard came to town, Mia.",
        "A new archer came to town, Tim.",
    ]


def test_create_unknown_type_registers_nothing_but_greets(interpreter, world, console_stream):
    run(interpreter, "Create character bard Lou 10")
    assert "Lou" not in world
    assert console_lines(console_stream) == ["A new bard came to town, Lou."]


def test_create_character_with_missing_hp_defaults_to_zero(interpreter, world):
    run(interpreter, "Create character fighter Bob")
    assert world.get("Bob").hp == 0
    assert world.alive_summaries() == []


def test_duplicate_name_overwrites(interpreter, world):
    run(interpreter, "Create character fighter Bob 100", "Create character archer Bob 7")
    assert isinstance(world.get("Bob"), Archer)
    assert len(world) == 1
    assert world.alive_summaries() == ["Bob:Archer:7"]


def test_show_characters_lists_alive_sorted(interpreter, console_stream):
    run(
        interpreter,
        "Create character wizard Mia 30",
        "Create character fighter Bob 100",
        "Create character archer Zed 0",
        "Show characters",
    )
    assert console_lines(console_stream)[-1] == "Bob:Fighter:100 Mia:Wizard:30"


def test_create_items_and_show_listings(interpreter, console_stream):
    run(
        interpreter,
        "Create character archer Tim 20",
        "Create character fighter Bob 100",
        "Create item weapon Tim Crossbow 6",
        "Create item weapon Tim Bow 4",
        "Create item potion Tim Tonic 3",
        "Create item spell Tim Bolt 2 Bob Nobody",
    )
    assert console_lines(console_stream)[2:] == [
        "Tim just obtained a new weapon called Crossbow.",
        "Tim just obtained a new weapon called Bow.",
        "Tim just obtained a new potion called Tonic.",
        "Tim just obtained a new spell called Bolt.",
    ]

    console_stream.truncate(0)
    console_stream.seek(0)
    run(interpreter, "Show weapons Tim", "Show potions Tim", "Show spells Tim")
    assert console_lines(console_stream) == [
        "Weapon: Bow Damage: 4",
        "Weapon: Crossbow Damage: 6",
        "Potion: Tonic HealValue: 3",
        "Spell: Bolt",
    ]


def test_spell_targets_resolved_at_creation(interpreter, world, narrator):
    run(
        interpreter,
        "Create character wizard Mia 30",
        "Create item spell Mia Bolt 2 Ann Mia",
        "Create character fighter Ann 50",
        "Cast Mia Ann Bolt",
    )
    # Ann did not exist when the spell was written
    assert narrator.events() == ["Mia attempted to cast Bolt on an unauthorized target: Ann."]
    assert world.get("Ann").hp == 50


def test_item_for_unknown_owner_is_ignored(interpreter, narrator, console_stream):
    run(interpreter, "Create item weapon Nobody Sword 10", "Create item potion Nobody Elixir -5")
    assert narrator.events() == []
    assert console_stream.getvalue() == ""


def test_item_with_non_positive_value_is_hard_failure(interpreter, world):
    run(interpreter, "Create character fighter Bob 100")
    with pytest.raises(ItemError):
        interpreter.execute("Create item weapon Bob Stick 0")
    with pytest.raises(ItemError):
        interpreter.execute("Create item potion Bob Water")
    assert len(world.get("Bob").arsenal) == 0


def test_capability_violation_on_create_is_narrated(interpreter, narrator, console_stream):
    run(interpreter, "Create character fighter Bob 100", "Create item spell Bob Bolt 0")
    assert narrator.events() == ["Error caught: Bob can't carry spells."]
    assert console_lines(console_stream)[-1] == "Bob just obtained a new spell called Bolt."


def test_attack_flavor_text(interpreter, console_stream):
    run(
        interpreter,
        "Create character fighter Bob 100",
        "Create item weapon Bob Sword 10",
        "Create character fighter Ann 50",
        "Attack Bob Ann Sword",
    )
    assert console_lines(console_stream)[-1] == "Bob attacks Ann with their Sword!"


def test_fighter_attack_failure_propagates_without_flavor(interpreter, console_stream):
    run(interpreter, "Create character fighter Bob 100", "Create character fighter Ann 50")
    with pytest.raises(ActionError):
        interpreter.execute("Attack Bob Ann Sword")
    assert "attacks" not in console_stream.getvalue()


def test_attack_by_character_without_weapons_is_capability_error(interpreter):
    run(interpreter, "Create character wizard Mia 30", "Create character fighter Bob 100")
    with pytest.raises(CapabilityError, match="Wizard Mia cannot wield weapons."):
        interpreter.execute("Attack Mia Bob Staff")


def test_cast_by_fighter_is_capability_error(interpreter):
    run(interpreter, "Create character fighter Bob 100")
    with pytest.raises(CapabilityError):
        interpreter.execute("Cast Bob Bob Bolt")
    with pytest.raises(CapabilityError):
        interpreter.execute("Show spells Bob")


def test_cast_narrates_and_prints(interpreter, narrator, console_stream, world):
    run(
        interpreter,
        "Create character wizard Mia 30",
        "Create character fighter Bob 100",
        "Create item spell Mia Bolt 1 Bob",
        "Cast Mia Bob Bolt",
    )
    assert narrator.events() == ["Mia casts Bolt on Bob."]
    assert console_lines(console_stream)[-1] == "Mia casts Bolt on Bob!"
    assert "Bolt" not in world.get("Mia").spell_book
    assert world.get("Bob").hp == 100


def test_drink_uses_drinkers_own_bag(interpreter, world, console_stream):
    run(
        interpreter,
        "Create character fighter Bob 100",
        "Create character archer Tim 20",
        "Create item potion Bob Elixir 5",
        "Create item potion Tim Tonic 5",
        "Drink Bob Tim Tonic",
    )
    assert world.get("Tim").hp == 25
    assert "Elixir" in world.get("Bob").medical_bag
    assert console_lines(console_stream)[-1] == "Tim drinks Tonic from Bob."
    with pytest.raises(ActionError):
        interpreter.execute("Drink Tim Tim Elixir")


def test_drink_for_unknown_drinker_is_ignored(interpreter, narrator):
    run(interpreter, "Drink Bob Ghost Elixir")
    assert narrator.events() == []


def test_dialogue_joins_exact_word_count(interpreter, narrator, console_stream):
    run(
        interpreter,
        "Dialogue Bob 3 Hello there friend and more",
        "Dialogue Ann 4 Too short",
        "Dialogue Zed 0",
    )
    assert console_lines(console_stream) == [
        "Bob: Hello there friend",
        "Ann: Too short short short",
        "Zed: ",
    ]
    assert narrator.events() == []


def test_unknown_verbs_and_blank_lines_are_ignored(interpreter, narrator, console_stream):
    run(interpreter, "", "   ", "Dance Bob", "create character fighter Bob 10", "Show", "Show capes Bob")
    assert narrator.events() == []
    assert console_stream.getvalue() == ""


def test_show_for_unknown_character_is_ignored(interpreter, console_stream):
    run(interpreter, "Show weapons Nobody")
    assert console_stream.getvalue() == ""


def test_token_stream_utterance_repeats_last_word():
    assert TokenStream("Too short").utterance(4) == ["Too", "short", "short", "short"]
    assert TokenStream("").utterance(2) == ["", ""]
    assert TokenStream("one two three").utterance(2) == ["one", "two"]
    assert TokenStream("x").utterance(-3) == []


def test_dialogue_with_no_words_pads_with_blanks(interpreter, console_stream):
    run(interpreter, "Dialogue Ann 3")
    assert console_lines(console_stream) == ["Ann:   "]
