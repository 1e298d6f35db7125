import io

import pytest

from tavernquest.barbarian import Barbarian
from tavernquest.character import Race
from tavernquest.mage import Mage
from tavernquest.ranger import Arrows, Ranger
from tavernquest.scoundrel import Scoundrel
from tavernquest.tavern import Tavern

HEADER = (
    "Name,Race,Subclass,Level,Vitality,Armor,Enemy,Main,Offhand,"
    "School/Faction,Summoning,Affinity,Disguise,Enraged\n"
)
ROWS = [
    "BONK,HUMAN,BARBARIAN,5,11,5,1,MACE,ANOTHERMACE,NONE,0,NONE,0,1\n",
    "SPYNACH,ELF,MAGE,4,6,4,0,WAND,NONE,ILLUSION,1,NONE,0,0\n",
    "MARROW,UNDEAD,RANGER,6,9,4,0,WOOD 30;FIRE 5,NONE,NONE,1,FIRE;POISON,0,0\n",
    "FLEA,DWARF,SCOUNDREL,4,6,4,1,ADAMANT,NONE,CUTPURSE,0,NONE,1,0\n",
]


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "characters.csv"
    path.write_text(HEADER + "".join(ROWS), encoding="utf-8")
    return path


@pytest.fixture
def tavern(csv_path):
    return Tavern.from_csv(csv_path)


def by_name(tavern, name):
    return next(guest for guest in tavern if guest.name == name)


def test_from_csv_builds_documented_characters(tavern):
    assert len(tavern) == len(ROWS)
    assert by_name(tavern, "BONK").describe() == (
        "BONK is a Level 5 HUMAN BARBARIAN.\nVitality: 11\nArmor: 5\n"
        "They are an enemy.\nMain Weapon: MACE\nOffhand Weapon: ANOTHERMACE\n"
        "Enraged: TRUE\n\n"
    )
    assert by_name(tavern, "SPYNACH").describe() == (
        "SPYNACH is a Level 4 ELF MAGE.\nVitality: 6\nArmor: 4\n"
        "They are not an enemy.\nSchool of Magic: ILLUSION\nWeapon: WAND\n"
        "They can summon an Incarnate.\n\n"
    )
    assert by_name(tavern, "FLEA").describe() == (
        "FLEA is a Level 4 DWARF SCOUNDREL.\nVitality: 6\nArmor: 4\n"
        "They are an enemy.\nDagger: ADAMANT\nFaction: CUTPURSE\nDisguise: TRUE\n\n"
    )


def test_from_csv_parses_ranger_arrows_and_affinities(tavern):
    marrow = by_name(tavern, "MARROW")
    assert isinstance(marrow, Ranger)
    assert marrow.arrows == [Arrows("WOOD", 30), Arrows("FIRE", 5)]
    assert marrow.affinities == ["FIRE", "POISON"]
    assert marrow.has_companion is True


def test_from_csv_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Tavern.from_csv(tmp_path / "absent.csv")


def test_from_csv_short_row_is_an_error(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text(HEADER + "BONK,HUMAN,BARBARIAN\n", encoding="utf-8")
    with pytest.raises(ValueError):
        Tavern.from_csv(path)


def test_counters_match_contents(tavern):
    assert tavern.level_sum == sum(guest.level for guest in tavern)
    assert tavern.enemy_count == sum(1 for guest in tavern if guest.enemy)


def test_average_level_rounds_to_nearest(tavern):
    assert tavern.average_level() == 5


def test_enemy_percentage(tavern):
    assert tavern.enemy_percentage() == 50.0


def test_empty_tavern_statistics():
    tavern = Tavern()
    assert tavern.average_level() == 0
    assert tavern.enemy_percentage() == 0.0
    assert tavern.is_empty()


def test_tally_race(tavern):
    assert tavern.tally_race("HUMAN") == 1
    assert tavern.tally_race(Race.UNDEAD) == 1
    assert tavern.tally_race("LIZARD") == 0


def test_report(tavern):
    assert tavern.report() == (
        "Humans: 1\nElves: 1\nDwarves: 1\nLizards: 0\nUndead: 1\n\n"
        "The average level is: 5\n50% are enemies.\n"
    )


def test_enter_and_exit_update_counters():
    tavern = Tavern()
    villain = Barbarian("Bread", "HUMAN", 6, 10, 4, True)
    friend = Mage("Rice", "ELF", 9, 3, 7, False)
    assert tavern.enter(villain) is True
    assert tavern.enter(friend) is True
    assert tavern.level_sum == villain.level + friend.level
    assert tavern.enemy_count == 1
    assert tavern.exit(villain) is True
    assert tavern.level_sum == friend.level
    assert tavern.enemy_count == 0
    assert tavern.exit(villain) is False
    assert list(tavern) == [friend]


def test_exit_uses_identity_not_equality():
    tavern = Tavern()
    first = Scoundrel("Naan", "HUMAN", level=1)
    twin = Scoundrel("Naan", "HUMAN", level=1)
    assert first == twin
    tavern.enter(first)
    assert twin not in tavern
    assert tavern.exit(twin) is False
    assert first in tavern


def test_full_tavern_refuses_entry():
    tavern = Tavern()
    guests = [Mage(f"Guest", "HUMAN", level=1) for _ in range(tavern.capacity)]
    assert all(tavern.enter(guest) for guest in guests)
    latecomer = Mage("Late", "ELF", level=3)
    assert tavern.enter(latecomer) is False
    assert tavern.level_sum == tavern.capacity
    assert latecomer not in tavern


def test_display_characters_writes_every_description(tavern):
    out = io.StringIO()
    tavern.display_characters(out)
    assert out.getvalue() == "".join(guest.describe() for guest in tavern)


def test_display_race_filters(tavern):
    out = io.StringIO()
    tavern.display_race("ELF", out)
    assert out.getvalue() == by_name(tavern, "SPYNACH").describe()


def test_tainted_stew_affects_everyone(tavern):
    marrow = by_name(tavern, "MARROW")
    before = marrow.vitality
    tavern.tainted_stew()
    bonk = by_name(tavern, "BONK")
    assert bonk.vitality == 1
    assert bonk.enraged is False
    assert bonk.main_weapon == "BUCKET"
    assert marrow.vitality == before + 3
    assert by_name(tavern, "FLEA").vitality == 1 + 3