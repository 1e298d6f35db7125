"""The tavern: a bag of characters with running statistics."""

from __future__ import annotations

import math
import sys
from pathlib import Path
from typing import TextIO

from .bag import Bag
from .barbarian import Barbarian
from .character import Character, Race
from .mage import Mage
from .ranger import Ranger
from .scoundrel import Scoundrel

_FIELD_COUNT = 14

_REPORT_RACES = (
    ("Humans", Race.HUMAN),
    ("Elves", Race.ELF),
    ("Dwarves", Race.DWARF),
    ("Lizards", Race.LIZARD),
    ("Undead", Race.UNDEAD),
)


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def _flag(text: str) -> bool:
    return int(text) != 0


class Tavern(Bag[Character]):
    """A bag of characters that keeps the level sum and enemy count.

    Characters are tracked by identity: two distinct but equal characters
    are different guests.
    """

    def __init__(self) -> None:
        super().__init__()
        self.level_sum = 0
        self.enemy_count = 0

    @classmethod
    def from_csv(cls, path: str | Path) -> Tavern:
        """Build a tavern from a CSV file whose first line is a header.

        Columns: name, race, subclass, level, vitality, armor, enemy, main,
        offhand, school/faction, summoning, affinity, disguise, enraged.
        Ranger arrows are ``TYPE QTY`` pairs and affinities are names, both
        separated by semicolons. Rows of unknown subclass are ignored.
        """
        tavern = cls()
        with open(path, encoding="utf-8") as handle:
            next(handle, None)
            for line_number, line in enumerate(handle, start=2):
                line = line.rstrip("\r\n")
                if not line.strip():
                    continue
                fields = line.split(",")
                if len(fields) < _FIELD_COUNT:
                    raise ValueError(
                        f"line {line_number}: expected {_FIELD_COUNT} fields, got {len(fields)}"
                    )
                character = _character_from_fields(fields)
                if character is not None:
                    tavern.enter(character)
        return tavern

    def __contains__(self, item: object) -> bool:
        return any(guest is item for guest in self._items)

    def count(self, item: Character) -> int:
        return sum(1 for guest in self._items if guest is item)

    def remove(self, item: Character) -> bool:
        for index, guest in enumerate(self._items):
            if guest is item:
                last = self._items.pop()
                if index < len(self._items):
                    self._items[index] = last
                return True
        return False

    def enter(self, character: Character) -> bool:
        """Seat ``character``; return False if the tavern is full."""
        if not self.add(character):
            return False
        self.level_sum += character.level
        if character.enemy:
            self.enemy_count += 1
        return True

    def exit(self, character: Character) -> bool:
        """Remove ``character``; return False if they are not inside."""
        if not self.remove(character):
            return False
        self.level_sum -= character.level
        if character.enemy:
            self.enemy_count -= 1
        return True

    def average_level(self) -> int:
        """The average level, rounded to the nearest integer (halves round up)."""
        if self.level_sum <= 0 or not self._items:
            return 0
        return int(_round_half_up(self.level_sum / len(self._items)))

    def enemy_percentage(self) -> float:
        """The share of enemies as a percentage rounded to two decimals; 0.0 when empty."""
        if not self._items:
            return 0.0
        share = self.enemy_count / len(self._items)
        return _round_half_up(share * 10000) / 100

    def tally_race(self, race: str | Race) -> int:
        """Count the characters of ``race``."""
        return sum(1 for guest in self._items if guest.race == race)

    def report(self) -> str:
        """Return the race tallies, average level and enemy percentage."""
        tallies = "\n".join(f"{label}: {self.tally_race(race)}" for label, race in _REPORT_RACES)
        return (
            tallies
            + f"\n\nThe average level is: {self.average_level()}"
            + f"\n{self.enemy_percentage():g}% are enemies.\n"
        )

    def display_characters(self, file: TextIO | None = None) -> None:
        """Write every character's description to ``file``."""
        for guest in self._items:
            guest.display(file or sys.stdout)

    def display_race(self, race: str | Race, file: TextIO | None = None) -> None:
        """Write the description of every character of ``race`` to ``file``."""
        for guest in self._items:
            if guest.race == race:
                guest.display(file or sys.stdout)

    def tainted_stew(self) -> None:
        """Serve the tainted stew to everyone in the tavern."""
        for guest in self._items:
            guest.eat_tainted_stew()


def _character_from_fields(fields: list[str]) -> Character | None:
    name, race, subclass = fields[0], fields[1], fields[2]
    level, vitality, armor = int(fields[3]), int(fields[4]), int(fields[5])
    enemy = _flag(fields[6])
    main, offhand, school_or_faction = fields[7], fields[8], fields[9]
    summoning = _flag(fields[10])
    affinity = fields[11]
    disguise = _flag(fields[12])
    enraged = _flag(fields[13])

    if subclass == "BARBARIAN":
        return Barbarian(name, race, vitality, armor, level, enemy, main, offhand, enraged)
    if subclass == "MAGE":
        return Mage(name, race, vitality, armor, level, enemy, school_or_faction, main, summoning)
    if subclass == "SCOUNDREL":
        return Scoundrel(
            name, race, vitality, armor, level, enemy, main, school_or_faction, disguise
        )
    if subclass == "RANGER":
        ranger = Ranger(name, race, vitality, armor, level, enemy)
        for entry in main.split(";"):
            parts = entry.split()
            if len(parts) < 2:
                continue
            try:
                quantity = int(parts[1])
            except ValueError:
                continue
            ranger.add_arrows(parts[0], quantity)
        for single in affinity.split(";"):
            ranger.add_affinity(single)
        ranger.has_companion = summoning
        return ranger
    return None