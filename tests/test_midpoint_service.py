import pytest

from enigmaar.chartpoints import ChartPoint
from enigmaar.midpoint_service import MidpointService
from enigmaar.models import Midpoint, MpDial, OccupiedMidpoint, SinglePosition


class FakeCalculator:
    def __init__(self, result=None):
        self.calls = []
        self.result = result if result is not None else []

    def calc_midpoints(self, points):
        self.calls.append(("midpoints", points))
        return self.result

    def calc_occupied_midpoints(self, points, dial, orb):
        self.calls.append(("occupied", points, dial, orb))
        return self.result


def _positions(*pairs):
    return [SinglePosition(ChartPoint(i), pos) for i, pos in pairs]


def test_midpoint_position_too_large():
    calc = FakeCalculator()
    positions = _positions((2, 12.0), (3, 400.0), (5, 220.5))
    with pytest.raises(ValueError, match="between 0.0"):
        MidpointService(calc).midpoints(positions)
    assert calc.calls == []


def test_midpoint_position_too_small():
    calc = FakeCalculator()
    positions = _positions((2, 12.0), (3, -4.0), (5, 220.5))
    with pytest.raises(ValueError, match="between 0.0"):
        MidpointService(calc).midpoints(positions)
    assert calc.calls == []


def test_midpoint_too_few_items():
    calc = FakeCalculator()
    with pytest.raises(ValueError, match="not enough points"):
        MidpointService(calc).midpoints(_positions((2, 12.0)))
    assert calc.calls == []


def test_midpoints_valid_request_is_delegated():
    positions = _positions((2, 12.0), (3, 40.0))
    expected = [Midpoint(positions[0], positions[1], 26.0)]
    calc = FakeCalculator(expected)
    assert MidpointService(calc).midpoints(positions) == expected
    assert calc.calls == [("midpoints", positions)]


def test_occupied_position_too_large():
    calc = FakeCalculator()
    positions = _positions((1, 100.0), (2, 50.5), (4, 200.1), (7, 525.0), (8, 255.3))
    with pytest.raises(ValueError, match="between 0.0"):
        MidpointService(calc).occupied_midpoints(positions, MpDial.DIAL_360, 1.0)
    assert calc.calls == []


def test_occupied_position_too_small():
    calc = FakeCalculator()
    positions = _positions((1, 100.0), (2, 50.5), (4, 200.1), (7, -25.0), (8, 255.3))
    with pytest.raises(ValueError, match="between 0.0"):
        MidpointService(calc).occupied_midpoints(positions, MpDial.DIAL_360, 1.0)
    assert calc.calls == []


def test_occupied_too_few_items():
    calc = FakeCalculator()
    positions = _positions((1, 100.0), (2, 50.5))
    with pytest.raises(ValueError, match="not enough points"):
        MidpointService(calc).occupied_midpoints(positions, MpDial.DIAL_360, 1.0)
    assert calc.calls == []


@pytest.mark.parametrize("orb", [-1.0, 12.0, 0.0])
def test_occupied_orb_out_of_range(orb):
    calc = FakeCalculator()
    positions = _positions((1, 100.0), (2, 50.5), (4, 200.1), (7, 225.0), (8, 255.3))
    with pytest.raises(ValueError, match="orb"):
        MidpointService(calc).occupied_midpoints(positions, MpDial.DIAL_360, orb)
    assert calc.calls == []


def test_occupied_valid_request_is_delegated():
    positions = _positions((1, 100.0), (2, 50.5), (4, 200.1), (7, 225.0), (8, 255.3))
    expected = [OccupiedMidpoint(positions[0], positions[1], positions[2], 0.5, 50.0)]
    calc = FakeCalculator(expected)
    result = MidpointService(calc).occupied_midpoints(positions, MpDial.DIAL_90, 10.0)
    assert result == expected
    assert calc.calls == [("occupied", positions, MpDial.DIAL_90, 10.0)]