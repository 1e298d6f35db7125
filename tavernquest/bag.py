"""A fixed-capacity, unordered collection of items."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 100


class Bag(Generic[T]):
    """An unordered collection that holds at most ``capacity`` items.

    Removing an item moves the last item into the freed slot, so the order
    of the remaining items is not preserved.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def is_empty(self) -> bool:
        """Return True when the bag holds no items."""
        return not self._items

    def add(self, item: T) -> bool:
        """Add ``item``; return False if the bag is already full."""
        if self.is_full:
            return False
        self._items.append(item)
        return True

    def remove(self, item: T) -> bool:
        """Remove one occurrence of ``item``; return False if it is absent.

        The last item takes the place of the removed one.
        """
        try:
            index = self._items.index(item)
        except ValueError:
            return False
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
        return True

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def count(self, item: T) -> int:
        """Return how many times ``item`` occurs in the bag."""
        return self._items.count(item)

    def to_list(self) -> list[T]:
        """Return the items as a new list."""
        return list(self._items)

    def _extend(self, items: Iterable[T], *, unique: bool) -> None:
        for item in items:
            if self.is_full:
                break
            if unique and item in self._items:
                continue
            self._items.append(item)

    def __iadd__(self, other: Bag[T]) -> Bag[T]:
        """Append every item of ``other``, duplicates included, while room lasts."""
        self._extend(other.to_list(), unique=False)
        return self

    def __itruediv__(self, other: Bag[T]) -> Bag[T]:
        """Append the items of ``other`` not already present, while room lasts."""
        self._extend(other.to_list(), unique=True)
        return self