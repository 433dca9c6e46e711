"""Conversions between axial coordinates and doubled or offset coordinates.

Axial coordinates are given and returned as ``(x, y)`` pairs of ints;
doubled and offset coordinates as ``(column, row)`` pairs.
"""

from __future__ import annotations

import enum
from typing import Tuple

__all__ = [
    "DoubledHexMode",
    "OffsetHexMode",
    "to_doubled_coordinates",
    "from_doubled_coordinates",
    "to_offset_coordinates",
    "from_offset_coordinates",
]

Pair = Tuple[int, int]


class DoubledHexMode(enum.Enum):
    """Layout mode for doubled coordinates."""

    #: Doubles column values
    DOUBLED_WIDTH = "doubled_width"
    #: Doubles row values
    DOUBLED_HEIGHT = "doubled_height"


class OffsetHexMode(enum.Enum):
    """Layout mode for offset coordinates."""

    #: Vertical layout, shoves even columns down
    EVEN_COLUMNS = "even_columns"
    #: Vertical layout, shoves odd columns down
    ODD_COLUMNS = "odd_columns"
    #: Horizontal layout, shoves even rows right
    EVEN_ROWS = "even_rows"
    #: Horizontal layout, shoves odd rows right
    ODD_ROWS = "odd_rows"


def to_doubled_coordinates(
    coord: Pair, mode: DoubledHexMode = DoubledHexMode.DOUBLED_WIDTH
) -> Pair:
    """Convert axial ``coord`` to doubled ``(column, row)`` coordinates."""
    x, y = coord
    if mode is DoubledHexMode.DOUBLED_WIDTH:
        return (2 * x + y, y)
    if mode is DoubledHexMode.DOUBLED_HEIGHT:
        return (x, 2 * y + x)
    raise ValueError(f"unknown doubled mode: {mode!r}")


def from_doubled_coordinates(
    doubled: Pair, mode: DoubledHexMode = DoubledHexMode.DOUBLED_WIDTH
) -> Pair:
    """Convert doubled ``(column, row)`` coordinates to axial ``(x, y)``."""
    col, row = doubled
    if mode is DoubledHexMode.DOUBLED_WIDTH:
        return (_div(col - row, 2), row)
    if mode is DoubledHexMode.DOUBLED_HEIGHT:
        return (col, _div(row - col, 2))
    raise ValueError(f"unknown doubled mode: {mode!r}")


def to_offset_coordinates(
    coord: Pair, mode: OffsetHexMode = OffsetHexMode.ODD_ROWS
) -> Pair:
    """Convert axial ``coord`` to offset ``(column, row)`` coordinates."""
    x, y = coord
    if mode is OffsetHexMode.EVEN_COLUMNS:
        return (x, y + _div(x + (x & 1), 2))
    if mode is OffsetHexMode.ODD_COLUMNS:
        return (x, y + _div(x - (x & 1), 2))
    if mode is OffsetHexMode.EVEN_ROWS:
        return (x + _div(y + (y & 1), 2), y)
    if mode is OffsetHexMode.ODD_ROWS:
        return (x + _div(y - (y & 1), 2), y)
    raise ValueError(f"unknown offset mode: {mode!r}")


def from_offset_coordinates(
    offset: Pair, mode: OffsetHexMode = OffsetHexMode.ODD_ROWS
) -> Pair:
    """Convert offset ``(column, row)`` coordinates to axial ``(x, y)``."""
    col, row = offset
    if mode is OffsetHexMode.EVEN_COLUMNS:
        return (col, row - _div(col + (col & 1), 2))
    if mode is OffsetHexMode.ODD_COLUMNS:
        return (col, row - _div(col - (col & 1), 2))
    if mode is OffsetHexMode.EVEN_ROWS:
        return (col - _div(row + (row & 1), 2), row)
    if mode is OffsetHexMode.ODD_ROWS:
        return (col - _div(row - (row & 1), 2), row)
    raise ValueError(f"unknown offset mode: {mode!r}")


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q