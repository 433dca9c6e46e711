from dataclasses import dataclass

import pytest

from hexkit.way import DirectionWay


@dataclass(frozen=True)
class _Dir:
    index: int

    def __neg__(self):
        return _Dir((self.index + 3) % 6)

    def clockwise(self):
        return _Dir((self.index + 1) % 6)

    def counter_clockwise(self):
        return _Dir((self.index + 5) % 6)


def test_single_unwrap_and_contains():
    way = DirectionWay.single(_Dir(2))
    assert way.unwrap() == _Dir(2)
    assert way.contains(_Dir(2))
    assert not way.contains(_Dir(3))
    assert way.is_tie() is False


def test_tie_unwrap_returns_first():
    way = DirectionWay.tie(_Dir(4), _Dir(5))
    assert way.unwrap() == _Dir(4)
    assert way.is_tie() is True
    assert way.contains(_Dir(5))
    assert not way.contains(_Dir(0))


def test_equality_with_direction_means_contains():
    way = DirectionWay.tie(_Dir(1), _Dir(0))
    assert way == _Dir(1)
    assert way == _Dir(0)
    assert not (way == _Dir(3))


def test_equality_between_ways():
    assert DirectionWay.single(_Dir(1)) == DirectionWay.single(_Dir(1))
    assert DirectionWay.tie(_Dir(1), _Dir(2)) == DirectionWay.tie(_Dir(1), _Dir(2))
    assert not (DirectionWay.single(_Dir(1)) == DirectionWay.tie(_Dir(1), _Dir(2)))


def test_map_keeps_shape():
    tie = DirectionWay.tie(_Dir(1), _Dir(2)).map(lambda d: d.index)
    assert tie.is_tie()
    assert tie.items == (1, 2)
    single = DirectionWay.single(_Dir(3)).map(lambda d: d.index)
    assert not single.is_tie()
    assert single.unwrap() == 3


@pytest.mark.parametrize("index", range(6))
def test_way_from_without_ties(index):
    d = _Dir(index)
    assert DirectionWay.way_from(False, False, False, d) == DirectionWay.single(d)
    assert DirectionWay.way_from(True, False, False, d) == DirectionWay.single(-d)


@pytest.mark.parametrize("index", range(6))
def test_way_from_left_tie(index):
    d = _Dir(index)
    way = DirectionWay.way_from(False, True, False, d)
    assert way == DirectionWay.tie(d, d.counter_clockwise())
    # left tie wins when both flags are set
    assert DirectionWay.way_from(False, True, True, d) == way


@pytest.mark.parametrize("index", range(6))
def test_way_from_right_tie_negated(index):
    d = _Dir(index)
    way = DirectionWay.way_from(True, False, True, d)
    assert way == DirectionWay.tie(-d, (-d).clockwise())


def test_invalid_item_count():
    with pytest.raises(ValueError):
        DirectionWay(())
    with pytest.raises(ValueError):
        DirectionWay((_Dir(0), _Dir(1), _Dir(2)))