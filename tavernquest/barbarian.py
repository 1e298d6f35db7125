"""The barbarian: a character with two weapons and a temper."""

from __future__ import annotations

from .character import Character, Race

_NO_WEAPON = "NONE"


def _letters_only(text: str) -> bool:
    return all(c.isascii() and c.isalpha() for c in text)


class Barbarian(Character):
    """A character wielding a main and an offhand weapon, possibly enraged."""

    class_title = "BARBARIAN"

    def __init__(
        self,
        name: str = "NAMELESS",
        race: str | Race = Race.NONE,
        vitality: int = 0,
        armor: int = 0,
        level: int = 0,
        enemy: bool = False,
        main_weapon: str = _NO_WEAPON,
        secondary_weapon: str = _NO_WEAPON,
        enraged: bool = False,
    ) -> None:
        super().__init__(name, race, vitality, armor, level, enemy)
        self._main_weapon = _NO_WEAPON
        self._secondary_weapon = _NO_WEAPON
        self.enraged = bool(enraged)
        self.set_main_weapon(main_weapon)
        self.set_secondary_weapon(secondary_weapon)

    @property
    def main_weapon(self) -> str:
        return self._main_weapon

    @property
    def secondary_weapon(self) -> str:
        return self._secondary_weapon

    def set_main_weapon(self, weapon: str) -> bool:
        """Set the main weapon in upper case; return False if it holds non-letters."""
        if not _letters_only(weapon):
            return False
        self._main_weapon = weapon.upper()
        return True

    def set_secondary_weapon(self, weapon: str) -> bool:
        """Set the offhand weapon in upper case; return False if it holds non-letters."""
        if not _letters_only(weapon):
            return False
        self._secondary_weapon = weapon.upper()
        return True

    def toggle_enrage(self) -> None:
        """Flip the enraged flag."""
        self.enraged = not self.enraged

    def describe(self) -> str:
        return (
            self._header()
            + f"\nMain Weapon: {self.main_weapon}"
            + f"\nOffhand Weapon: {self.secondary_weapon}"
            + f"\nEnraged: {'TRUE' if self.enraged else 'FALSE'}"
            + "\n\n"
        )

    def eat_tainted_stew(self) -> None:
        """Undead gain 3 vitality; others drop to 1, toggle rage and lose a weapon.

        Becoming enraged replaces the offhand weapon with a TABLE; calming down
        replaces the main weapon with a BUCKET.
        """
        if self.race is Race.UNDEAD:
            self.vitality += 3
            return
        self.vitality = 1
        self.toggle_enrage()
        if self.enraged:
            self.set_secondary_weapon("TABLE")
        else:
            self.set_main_weapon("BUCKET")