"""The base character shared by every tavern-goer."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO


class Race(str, Enum):
    """The races a character may belong to."""

    NONE = "NONE"
    HUMAN = "HUMAN"
    ELF = "ELF"
    DWARF = "DWARF"
    LIZARD = "LIZARD"
    UNDEAD = "UNDEAD"

    def __str__(self) -> str:
        return self.value


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def upper_letters(text: str) -> str:
    """Upper-case the ASCII letters of ``text``, leaving other characters alone."""
    return "".join(c.upper() if _is_letter(c) else c for c in text)


class Character:
    """A named character with a race, vitality, armor and level.

    Two characters are equal when they share name, race, level and enemy flag.
    """

    class_title = ""

    def __init__(
        self,
        name: str = "NAMELESS",
        race: str | Race = Race.NONE,
        vitality: int = 0,
        armor: int = 0,
        level: int = 0,
        enemy: bool = False,
    ) -> None:
        self.name = name
        self.race = race
        self._vitality = max(vitality, 0)
        self._armor = max(armor, 0)
        self._level = max(level, 0)
        self.enemy = bool(enemy)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        letters = "".join(c.upper() for c in value if _is_letter(c))
        self._name = letters or "NAMELESS"

    @property
    def race(self) -> Race:
        return self._race

    @race.setter
    def race(self, value: str | Race) -> None:
        try:
            self._race = Race(value)
        except ValueError:
            self._race = Race.NONE

    @property
    def vitality(self) -> int:
        return self._vitality

    @vitality.setter
    def vitality(self, value: int) -> None:
        if value >= 0:
            self._vitality = value

    @property
    def armor(self) -> int:
        return self._armor

    @armor.setter
    def armor(self, value: int) -> None:
        if value >= 0:
            self._armor = value

    @property
    def level(self) -> int:
        return self._level

    @level.setter
    def level(self, value: int) -> None:
        if value >= 0:
            self._level = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Character):
            return NotImplemented
        return (
            self.name == other.name
            and self.race == other.race
            and self.level == other.level
            and self.enemy == other.enemy
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, race={self.race.value!r}, "
            f"level={self.level})"
        )

    def _header(self) -> str:
        title = f" {self.class_title}" if self.class_title else ""
        standing = "an enemy." if self.enemy else "not an enemy."
        return (
            f"{self.name} is a Level {self.level} {self.race.value}{title}."
            f"\nVitality: {self.vitality}"
            f"\nArmor: {self.armor}"
            f"\nThey are {standing}"
        )

    def describe(self) -> str:
        """Return the character's details as display text."""
        return self._header() + "\n"

    def display(self, file: TextIO | None = None) -> None:
        """Write the description to ``file`` (standard output by default)."""
        (file or sys.stdout).write(self.describe())

    def eat_tainted_stew(self) -> None:
        """Undead gain 3 vitality; everyone else drops to 1 vitality."""
        if self.race is Race.UNDEAD:
            self.vitality += 3
        else:
            self.vitality = 1