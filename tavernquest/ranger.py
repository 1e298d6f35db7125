"""The ranger: a character with a quiver of arrows and elemental affinities."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable

from .character import Character, Race, upper_letters

ARROW_TYPES = frozenset({"WOOD", "FIRE", "WATER", "POISON", "BLOOD"})
AFFINITIES = frozenset({"FIRE", "WATER", "POISON", "BLOOD"})


@dataclass
class Arrows:
    """A stack of arrows of one type."""

    type: str
    quantity: int


class Ranger(Character):
    """A character carrying arrows, with affinities and perhaps an animal companion."""

    class_title = "RANGER"

    def __init__(
        self,
        name: str = "NAMELESS",
        race: str | Race = Race.NONE,
        vitality: int = 0,
        armor: int = 0,
        level: int = 0,
        enemy: bool = False,
        arrows: Iterable[Arrows] = (),
        affinities: Iterable[str] = (),
        has_companion: bool = False,
    ) -> None:
        super().__init__(name, race, vitality, armor, level, enemy)
        self._arrows: list[Arrows] = []
        self._affinities: list[str] = []
        self.has_companion = bool(has_companion)
        for stack in arrows:
            self.add_arrows(stack.type, stack.quantity)
        for affinity in affinities:
            self.add_affinity(affinity)

    @property
    def arrows(self) -> list[Arrows]:
        """A copy of the ranger's arrow stacks, in the order they were first added."""
        return [replace(stack) for stack in self._arrows]

    @property
    def affinities(self) -> list[str]:
        """A copy of the ranger's affinities, in the order they were added."""
        return list(self._affinities)

    def add_arrows(self, arrow_type: str, quantity: int) -> bool:
        """Add ``quantity`` arrows of ``arrow_type``.

        Returns False for an unknown type or a non-positive quantity.
        """
        kind = upper_letters(arrow_type)
        if kind not in ARROW_TYPES or quantity < 1:
            return False
        for stack in self._arrows:
            if stack.type == kind:
                stack.quantity += quantity
                return True
        self._arrows.append(Arrows(kind, quantity))
        return True

    def fire_arrow(self, arrow_type: str) -> bool:
        """Spend one arrow of ``arrow_type``; return False if none is left."""
        kind = upper_letters(arrow_type)
        for stack in self._arrows:
            if stack.type == kind and stack.quantity > 0:
                stack.quantity -= 1
                return True
        return False

    def add_affinity(self, affinity: str) -> bool:
        """Add a known affinity; return False if unknown or already present."""
        candidate = upper_letters(affinity)
        if candidate not in AFFINITIES or candidate in self._affinities:
            return False
        self._affinities.append(candidate)
        return True

    def describe(self) -> str:
        arrow_lines = "".join(f"\n{stack.type}: {stack.quantity}" for stack in self._arrows)
        return (
            self._header()
            + f"\nAnimal Companion: {'TRUE' if self.has_companion else 'FALSE'}"
            + "\nArrows:"
            + arrow_lines
            + "\nAffinities: "
            + ", ".join(self._affinities)
            + "\n\n"
        )

    def eat_tainted_stew(self) -> None:
        """Undead gain 3 vitality; others lose health and may be comforted.

        A poison-affine ranger has their vitality halved (rounded down), any
        other drops to 1. An animal companion then restores 1 point.
        """
        if self.race is Race.UNDEAD:
            self.vitality += 3
            return
        if "POISON" in self._affinities:
            self.vitality = self.vitality // 2
        else:
            self.vitality = 1
        if self.has_companion:
            self.vitality += 1