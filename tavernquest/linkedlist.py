"""A doubly linked list addressed by position."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """One link of a doubly linked chain."""

    __slots__ = ("item", "previous", "next")

    def __init__(
        self,
        item: T,
        previous: Optional[Node[T]] = None,
        next: Optional[Node[T]] = None,
    ) -> None:
        self.item = item
        self.previous = previous
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.item!r})"


class DoublyLinkedList(Generic[T]):
    """A sequence stored as a chain of nodes linked in both directions.

    Positions count from 0. Inserting past the end appends.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._first: Optional[Node[T]] = None
        self._last: Optional[Node[T]] = None
        self._count = 0
        for item in items:
            self.insert(self._count, item)

    @property
    def head(self) -> Optional[Node[T]]:
        """The first node, or None when the list is empty."""
        return self._first

    @property
    def tail(self) -> Optional[Node[T]]:
        """The last node, or None when the list is empty."""
        return self._last

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        node = self._first
        while node is not None:
            yield node.item
            node = node.next

    def __getitem__(self, position: int) -> T:
        node = self.node_at(position)
        if node is None:
            raise IndexError(f"position {position} out of range")
        return node.item

    def __copy__(self) -> DoublyLinkedList[T]:
        clone = type(self).__new__(type(self))
        DoublyLinkedList.__init__(clone, self)
        return clone

    def __str__(self) -> str:
        return " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def is_empty(self) -> bool:
        """Return True when the list holds no items."""
        return self._count == 0

    def insert(self, position: int, item: T) -> bool:
        """Insert ``item`` so that it ends up at ``position``.

        A position at or past the end appends. Always returns True.
        """
        if position < 0:
            raise IndexError("position must not be negative")
        new_node = Node(item)
        at = self.node_at(position)
        if self._first is None:
            self._first = self._last = new_node
        elif at is self._first:
            new_node.next = self._first
            self._first.previous = new_node
            self._first = new_node
        elif at is None:
            assert self._last is not None
            new_node.previous = self._last
            self._last.next = new_node
            self._last = new_node
        else:
            before = at.previous
            assert before is not None
            new_node.previous = before
            new_node.next = at
            before.next = new_node
            at.previous = new_node
        self._count += 1
        return True

    def remove(self, position: int) -> bool:
        """Remove the item at ``position``; return False if there is none."""
        node = self.node_at(position)
        if node is None:
            return False
        before, after = node.previous, node.next
        if before is None:
            self._first = after
        else:
            before.next = after
        if after is None:
            self._last = before
        else:
            after.previous = before
        node.previous = node.next = None
        self._count -= 1
        return True

    def node_at(self, position: int) -> Optional[Node[T]]:
        """Return the node at ``position``, or None if it is out of range."""
        if not 0 <= position < self._count:
            return None
        node = self._first
        for _ in range(position):
            assert node is not None
            node = node.next
        return node

    def clear(self) -> None:
        """Remove every item."""
        node = self._first
        while node is not None:
            following = node.next
            node.previous = node.next = None
            node = following
        self._first = self._last = None
        self._count = 0

    def swap(self, i: int, j: int) -> None:
        """Exchange the items at ``i`` and ``j``; do nothing if either is out of range."""
        a, b = self.node_at(i), self.node_at(j)
        if a is None or b is None:
            return
        a.item, b.item = b.item, a.item

    def swap_nodes(self, i: int, j: int) -> None:
        """Exchange the nodes at ``i`` and ``j`` by relinking the chain.

        Does nothing if the positions are equal or either is out of range.
        """
        if i == j:
            return
        if i > j:
            i, j = j, i
        a, b = self.node_at(i), self.node_at(j)
        if a is None or b is None:
            return
        if a.next is b:
            before, after = a.previous, b.next
            b.previous, b.next = before, a
            a.previous, a.next = b, after
            left, right = b, a
        else:
            a_prev, a_next = a.previous, a.next
            b_prev, b_next = b.previous, b.next
            a.previous, a.next = b_prev, b_next
            b.previous, b.next = a_prev, a_next
            assert a_next is not None and b_prev is not None
            a_next.previous = b
            b_prev.next = a
            before, after = a_prev, b_next
            left, right = b, a
        if before is None:
            self._first = left
        else:
            before.next = left
        if after is None:
            self._last = right
        else:
            after.previous = right