"""Direction ways: either a single direction or a tie between two."""

from __future__ import annotations

from typing import Any, Callable, Generic, Protocol, Tuple, TypeVar, Union

__all__ = ["DirectionWay"]


class _Rotatable(Protocol):
    def __neg__(self) -> Any: ...

    def clockwise(self) -> Any: ...

    def counter_clockwise(self) -> Any: ...


T = TypeVar("T")
U = TypeVar("U")


class DirectionWay(Generic[T]):
    """A single direction, or a tie between two directions.

    Comparing a way with a plain direction tells whether the way
    contains that direction.
    """

    __slots__ = ("_items",)

    def __init__(self, items: Union[Tuple[T], Tuple[T, T]]) -> None:
        items = tuple(items)
        if len(items) not in (1, 2):
            raise ValueError("a direction way holds one or two directions")
        self._items = items

    @classmethod
    def single(cls, value: T) -> "DirectionWay[T]":
        """Build a way made of one direction."""
        return cls((value,))

    @classmethod
    def tie(cls, first: T, second: T) -> "DirectionWay[T]":
        """Build a way tied between two directions."""
        return cls((first, second))

    @classmethod
    def way_from(
        cls, is_neg: bool, eq_left: bool, eq_right: bool, direction: _Rotatable
    ) -> "DirectionWay[Any]":
        """Build a way from a base direction and tie flags.

        The direction is negated first when ``is_neg`` is set. A left tie
        pairs it with its counter clockwise neighbour, a right tie with its
        clockwise neighbour; the left tie wins when both are set.
        """
        if is_neg:
            direction = -direction
        if eq_left:
            return cls.tie(direction, direction.counter_clockwise())
        if eq_right:
            return cls.tie(direction, direction.clockwise())
        return cls.single(direction)

    @property
    def items(self) -> Tuple[T, ...]:
        """The one or two directions of the way."""
        return self._items

    def is_tie(self) -> bool:
        """Whether the way is a tie between two directions."""
        return len(self._items) == 2

    def unwrap(self) -> T:
        """Return the single direction, or the first one of a tie."""
        return self._items[0]

    def contains(self, direction: T) -> bool:
        """Whether ``direction`` is part of the way."""
        return any(item == direction for item in self._items)

    def map(self, func: Callable[[T], U]) -> "DirectionWay[U]":
        """Return a way of the same shape with ``func`` applied to each item."""
        return DirectionWay(tuple(func(item) for item in self._items))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DirectionWay):
            return self._items == other._items
        return self.contains(other)  # type: ignore[arg-type]

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        return iter(self._items)

    def __repr__(self) -> str:
        if self.is_tie():
            first, second = self._items
            return f"DirectionWay.tie({first!r}, {second!r})"
        return f"DirectionWay.single({self._items[0]!r})"