"""The mage: a character with a school of magic and a casting weapon."""

from __future__ import annotations

from .character import Character, Race, upper_letters

SCHOOLS = frozenset({"ELEMENTAL", "NECROMANCY", "ILLUSION"})
CASTING_WEAPONS = frozenset({"WAND", "STAFF"})

_HEALING = {"WAND": 2, "STAFF": 3}


class Mage(Character):
    """A character who studies a school of magic and may summon an incarnate."""

    class_title = "MAGE"

    def __init__(
        self,
        name: str = "NAMELESS",
        race: str | Race = Race.NONE,
        vitality: int = 0,
        armor: int = 0,
        level: int = 0,
        enemy: bool = False,
        school: str = "NONE",
        weapon: str = "NONE",
        can_summon_incarnate: bool = False,
    ) -> None:
        super().__init__(name, race, vitality, armor, level, enemy)
        self._school = "NONE"
        self._weapon = "NONE"
        self.can_summon_incarnate = bool(can_summon_incarnate)
        self.set_school(school)
        self.set_casting_weapon(weapon)

    @property
    def school(self) -> str:
        return self._school

    @property
    def casting_weapon(self) -> str:
        return self._weapon

    def set_school(self, school: str) -> bool:
        """Set the school of magic; return False if it is not a known school."""
        candidate = upper_letters(school)
        if candidate not in SCHOOLS:
            return False
        self._school = candidate
        return True

    def set_casting_weapon(self, weapon: str) -> bool:
        """Set the casting weapon; return False unless it is a wand or a staff."""
        candidate = upper_letters(weapon)
        if candidate not in CASTING_WEAPONS:
            return False
        self._weapon = candidate
        return True

    def describe(self) -> str:
        ability = "can" if self.can_summon_incarnate else "cannot"
        return (
            self._header()
            + f"\nSchool of Magic: {self.school}"
            + f"\nWeapon: {self.casting_weapon}"
            + f"\nThey {ability} summon an Incarnate."
            + "\n\n"
        )

    def eat_tainted_stew(self) -> None:
        """Undead gain 3 vitality; others drop to 1 and then heal.

        A wand heals 2 points, a staff 3, and an incarnate 1 more.
        """
        if self.race is Race.UNDEAD:
            self.vitality += 3
            return
        self.vitality = 1
        self.vitality += _HEALING.get(self.casting_weapon, 0)
        if self.can_summon_incarnate:
            self.vitality += 1