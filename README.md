# hexkit

Directions, angles and coordinate conversions for hexagonal grids that use
axial coordinates. Axial coordinates are plain `(x, y)` tuples of ints.

## Installation

```
pip install hexkit
```

## Modules

### `hexkit.edge_direction`

- `EdgeDirection`: an enum of the six neighbour (edge) directions, with
  values 0 to 5 in clockwise order. Canonical members are `X`, `Y`,
  `NEG_X_Y`, `NEG_X`, `NEG_Y` and `X_NEG_Y`; flat and pointy names such as
  `FLAT_TOP`, `FLAT_BOTTOM_RIGHT`, `POINTY_LEFT` or `POINTY_NORTH_EAST` are
  aliases of these. Iterating the enum (or `EdgeDirection.iter()`) yields the
  six directions in clockwise order.
- `NEIGHBORS_COORDS`: the axial offsets of the six neighbours, indexed by
  direction.

### `hexkit.vertex_direction`

- `VertexDirection`: an enum of the six diagonal (vertex) directions, with
  canonical members `X`, `NEG_Z`, `Y`, `NEG_X`, `Z` and `NEG_Y` and flat and
  pointy aliases such as `FLAT_RIGHT` or `POINTY_TOP`.
- `DIAGONAL_COORDS`: the axial offsets of the six diagonal neighbours,
  indexed by direction.

Both direction enums offer:

- `index` (0 to 5) and `into_hex()` for the axial offset.
- Rotation: `clockwise()`, `counter_clockwise()`, `rotate_cw(n)`,
  `rotate_ccw(n)`, and the operators `>>` (clockwise) and `<<` (counter
  clockwise). `-direction` gives the opposite direction.
- `direction * n` (or `n * direction`) gives the axial offset scaled by the
  integer `n`.
- Angles: `angle(orientation)`, `angle_degrees(orientation)`,
  `angle_flat()`, `angle_pointy()`, `angle_flat_degrees()`,
  `angle_pointy_degrees()`, `unit_vector(orientation)`, `angle_to(other)`,
  `angle_degrees_to(other)`, and the static `angle_between(a, b)` and
  `angle_degrees_between(a, b)`.
- From an angle: `from_angle(angle, orientation)`,
  `from_angle_degrees(angle, orientation)` and their `from_flat_*` and
  `from_pointy_*` variants. Any angle is accepted; it is wrapped into one
  turn first.
- Between the two kinds: `EdgeDirection.vertex_ccw()`, `vertex_cw()`
  (also `diagonal_ccw()`, `diagonal_cw()`) and `vertex_directions()`;
  `VertexDirection.edge_ccw()`, `edge_cw()` (also `direction_ccw()`,
  `direction_cw()`) and `edge_directions()`.

### `hexkit.angles`

- `HexOrientation`: `FLAT` or `POINTY`. Pointy hexagons are turned 30
  degrees clockwise from flat ones.
- The constants `DIRECTION_ANGLE_RAD`, `DIRECTION_ANGLE_DEGREES`,
  `DIRECTION_ANGLE_OFFSET_RAD` and `DIRECTION_ANGLE_OFFSET_DEGREES`.

An orientation that is not a `HexOrientation` member raises `ValueError`.

### `hexkit.way`

- `DirectionWay`: a single direction (`DirectionWay.single(d)`) or a tie
  between two (`DirectionWay.tie(a, b)`). It compares equal to any direction
  it contains, and to another way with the same items. `unwrap()` returns the
  single direction or the first of a tie, `contains(d)`, `is_tie()`, `items`
  and `map(func)` are also offered. `DirectionWay.way_from(is_neg, eq_left,
  eq_right, direction)` builds a way from a base direction and tie flags.

### `hexkit.conversions`

- `to_doubled_coordinates(coord, mode)` and
  `from_doubled_coordinates(doubled, mode)`, with `DoubledHexMode`
  (`DOUBLED_WIDTH`, the default, or `DOUBLED_HEIGHT`).
- `to_offset_coordinates(coord, mode)` and
  `from_offset_coordinates(offset, mode)`, with `OffsetHexMode`
  (`EVEN_COLUMNS`, `ODD_COLUMNS`, `EVEN_ROWS`, or `ODD_ROWS`, the default).

Doubled and offset coordinates are `(column, row)` tuples.

## Example

```python
from hexkit.angles import HexOrientation
from hexkit.edge_direction import EdgeDirection
from hexkit.conversions import (
    OffsetHexMode,
    to_offset_coordinates,
    from_offset_coordinates,
)

top = EdgeDirection.FLAT_TOP
assert -top == EdgeDirection.FLAT_BOTTOM
assert top >> 1 == EdgeDirection.FLAT_TOP_RIGHT
assert top << 1 == EdgeDirection.FLAT_TOP_LEFT
assert top * 3 == (0, -3)

assert EdgeDirection.from_angle_degrees(35.0, HexOrientation.FLAT) == EdgeDirection.FLAT_BOTTOM_RIGHT

offset = to_offset_coordinates((3, -2), OffsetHexMode.ODD_ROWS)
assert offset == (2, -2)
assert from_offset_coordinates(offset, OffsetHexMode.ODD_ROWS) == (3, -2)
```

## What it does not do

hexkit has no coordinate class of its own: coordinates are tuples, and there
is no distance, ring, line or range arithmetic on them. It has no world-space
layout (converting between hexagons and pixel positions), no mesh building,
no map storage and no pathfinding or field-of-view algorithms.

## Running the tests

```
pip install -e ".[test]"
pytest
```