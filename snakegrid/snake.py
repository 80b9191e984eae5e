"""The snake: a chain of links led by its head."""

from __future__ import annotations

from snakegrid.linked_list import DoubleLinkedList
from snakegrid.model import Input, Position, SnakeSettings


class Snake:
    """A snake laid out horizontally to the left of its start position."""

    MIN_SIZE = 4

    def __init__(self, settings: SnakeSettings) -> None:
        if settings.default_size < self.MIN_SIZE:
            raise ValueError(f"Snake length is too small: {settings.default_size}")
        start = settings.start_position
        self._links = DoubleLinkedList()
        for i in range(settings.default_size):
            self._links.add_tail(Position(start.x - i, start.y))
        self._last_input = Input.DEFAULT

    @property
    def links(self) -> DoubleLinkedList:
        """The links from head to tail."""
        return self._links

    @property
    def head(self) -> Position:
        """Position of the head link."""
        assert self._links.head is not None
        return self._links.head.value

    def move(self, direction: Input) -> None:
        """Advance one cell; a direction opposite to the current one is ignored."""
        if not self._last_input.opposite(direction):
            self._last_input = direction
        head, tail = self._links.head, self._links.tail
        assert head is not None and tail is not None
        tail.value = head.value
        self._links.move_tail_after_head()
        head.value = head.value + self._last_input

    def increase(self) -> None:
        """Grow by one link at the tail."""
        assert self._links.tail is not None
        self._links.add_tail(self._links.tail.value)