"""The scoundrel: a character with a dagger, a faction and perhaps a disguise."""

from __future__ import annotations

import random
from enum import Enum
from typing import Protocol

from .character import Character, Race, upper_letters

FACTIONS = frozenset({"NONE", "CUTPURSE", "SHADOWBLADE", "SILVERTONGUE"})

RECOVERY_CHANCE = 0.70


class Dagger(str, Enum):
    """The materials a scoundrel's dagger may be made of."""

    WOOD = "WOOD"
    BRONZE = "BRONZE"
    IRON = "IRON"
    STEEL = "STEEL"
    MITHRIL = "MITHRIL"
    ADAMANT = "ADAMANT"
    RUNE = "RUNE"

    def __str__(self) -> str:
        return self.value


class _RandomSource(Protocol):
    def random(self) -> float: ...


class Scoundrel(Character):
    """A character belonging to a faction, armed with a dagger."""

    class_title = "SCOUNDREL"

    def __init__(
        self,
        name: str = "NAMELESS",
        race: str | Race = Race.NONE,
        vitality: int = 0,
        armor: int = 0,
        level: int = 0,
        enemy: bool = False,
        dagger: str | Dagger = Dagger.WOOD,
        faction: str = "NONE",
        has_disguise: bool = False,
        rng: _RandomSource | None = None,
    ) -> None:
        super().__init__(name, race, vitality, armor, level, enemy)
        self._dagger = Dagger.WOOD
        self._faction = "NONE"
        self.has_disguise = bool(has_disguise)
        self._rng: _RandomSource = rng if rng is not None else random.Random()
        self.set_dagger(dagger)
        self.set_faction(faction)

    @property
    def dagger(self) -> Dagger:
        return self._dagger

    @property
    def faction(self) -> str:
        return self._faction

    def set_dagger(self, dagger: str | Dagger) -> None:
        """Set the dagger; an unknown material gives a wooden dagger."""
        try:
            self._dagger = Dagger(upper_letters(str(dagger)))
        except ValueError:
            self._dagger = Dagger.WOOD

    def set_faction(self, faction: str) -> bool:
        """Set the faction; return False if it is not a known faction."""
        candidate = upper_letters(faction)
        if candidate not in FACTIONS:
            return False
        self._faction = candidate
        return True

    def describe(self) -> str:
        return (
            self._header()
            + f"\nDagger: {self.dagger.value}"
            + f"\nFaction: {self.faction}"
            + f"\nDisguise: {'TRUE' if self.has_disguise else 'FALSE'}"
            + "\n\n"
        )

    def eat_tainted_stew(self) -> None:
        """Undead gain 3 vitality; others drop to 1 and act by faction.

        A cutpurse steals a potion for 3 points. A silvertongue has the stew
        redone: with 70% chance they recover 4 points, otherwise they stay at
        1 and their dagger is replaced with a wooden one.
        """
        lucky = self._rng.random() < RECOVERY_CHANCE
        if self.race is Race.UNDEAD:
            self.vitality += 3
            return
        self.vitality = 1
        if self.faction == "CUTPURSE":
            self.vitality += 3
        elif self.faction == "SILVERTONGUE":
            if lucky:
                self.vitality += 4
            else:
                self.vitality = 1
                self._dagger = Dagger.WOOD