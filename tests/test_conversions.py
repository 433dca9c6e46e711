import pytest

from hexkit.conversions import (
    DoubledHexMode,
    OffsetHexMode,
    from_doubled_coordinates,
    from_offset_coordinates,
    to_doubled_coordinates,
    to_offset_coordinates,
)


def _hex_range(radius):
    for x in range(-radius, radius + 1):
        for y in range(max(-radius, -x - radius), min(radius, -x + radius) + 1):
            yield (x, y)


RANGE_20 = list(_hex_range(20))


@pytest.mark.parametrize("mode", list(DoubledHexMode))
def test_doubled_coordinates_are_distinct(mode):
    # 3 * r * (r + 1) + 1 coordinates for radius 20, each mapped to its own cell
    converted = {to_doubled_coordinates(coord, mode) for coord in RANGE_20}
    assert len(converted) == 1261


@pytest.mark.parametrize("mode", list(DoubledHexMode))
def test_doubled_coordinates_round_trip(mode):
    for coord in RANGE_20:
        doubled = to_doubled_coordinates(coord, mode)
        assert from_doubled_coordinates(doubled, mode) == coord


@pytest.mark.parametrize(
    "mode",
    [
        OffsetHexMode.ODD_ROWS,
        OffsetHexMode.ODD_COLUMNS,
        OffsetHexMode.EVEN_COLUMNS,
        OffsetHexMode.EVEN_ROWS,
    ],
)
def test_offset_coordinates_round_trip(mode):
    for coord in RANGE_20:
        offset = to_offset_coordinates(coord, mode)
        assert from_offset_coordinates(offset, mode) == coord


def test_origin_maps_to_origin():
    for mode in DoubledHexMode:
        assert to_doubled_coordinates((0, 0), mode) == (0, 0)
    for mode in OffsetHexMode:
        assert to_offset_coordinates((0, 0), mode) == (0, 0)


def test_doubled_width_keeps_row_and_parity():
    for coord in RANGE_20:
        col, row = to_doubled_coordinates(coord, DoubledHexMode.DOUBLED_WIDTH)
        assert row == coord[1]
        assert (col - row) % 2 == 0


def test_doubled_height_keeps_column_and_parity():
    for coord in RANGE_20:
        col, row = to_doubled_coordinates(coord, DoubledHexMode.DOUBLED_HEIGHT)
        assert col == coord[0]
        assert (row - col) % 2 == 0


def test_offset_columns_keep_column_rows_keep_row():
    for coord in RANGE_20:
        for mode in (OffsetHexMode.EVEN_COLUMNS, OffsetHexMode.ODD_COLUMNS):
            assert to_offset_coordinates(coord, mode)[0] == coord[0]
        for mode in (OffsetHexMode.EVEN_ROWS, OffsetHexMode.ODD_ROWS):
            assert to_offset_coordinates(coord, mode)[1] == coord[1]


def test_default_modes():
    coord = (3, -5)
    assert to_doubled_coordinates(coord) == to_doubled_coordinates(
        coord, DoubledHexMode.DOUBLED_WIDTH
    )
    assert to_offset_coordinates(coord) == to_offset_coordinates(
        coord, OffsetHexMode.ODD_ROWS
    )


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        to_doubled_coordinates((1, 1), "nope")
    with pytest.raises(ValueError):
        from_offset_coordinates((1, 1), "nope")