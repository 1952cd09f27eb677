import pytest

from enigmaar.chartpoints import ChartPoint
from enigmaar.harmonic_service import HarmonicService
from enigmaar.models import SinglePosition


class FakeCalculator:
    def __init__(self, result=None):
        self.calls = []
        self.result = result if result is not None else []

    def calc_harmonics(self, positions, harmonic_nr):
        self.calls.append((positions, harmonic_nr))
        return self.result


def _positions(*pairs):
    return [SinglePosition(ChartPoint(i), pos) for i, pos in pairs]


VALID = _positions((1, 100.0), (4, 2.0), (8, 3.3))


@pytest.mark.parametrize("harm_nr", [220_000.0, 0.5])
def test_harmonic_number_out_of_range(harm_nr):
    calc = FakeCalculator()
    with pytest.raises(ValueError, match="harmonic number"):
        HarmonicService(calc).harmonics(VALID, harm_nr)
    assert calc.calls == []


def test_empty_input():
    calc = FakeCalculator()
    with pytest.raises(ValueError, match="no data found"):
        HarmonicService(calc).harmonics([], 2.0)
    assert calc.calls == []


def test_position_too_large():
    positions = _positions((1, 100.0), (4, 380.0), (8, 3.3))
    calc = FakeCalculator()
    with pytest.raises(ValueError, match="380"):
        HarmonicService(calc).harmonics(positions, 2.0)
    assert calc.calls == []


def test_position_too_small():
    positions = _positions((1, -100.0), (4, 80.0), (8, 3.3))
    calc = FakeCalculator()
    with pytest.raises(ValueError, match="outside range"):
        HarmonicService(calc).harmonics(positions, 2.0)
    assert calc.calls == []


def test_position_of_360_is_rejected():
    positions = _positions((1, 360.0))
    with pytest.raises(ValueError):
        HarmonicService(FakeCalculator()).harmonics(positions, 2.0)


@pytest.mark.parametrize("harm_nr", [1.0, 100_000.0])
def test_boundary_harmonic_numbers_are_delegated(harm_nr):
    expected = [SinglePosition(ChartPoint(1), 200.0)]
    calc = FakeCalculator(expected)
    result = HarmonicService(calc).harmonics(VALID, harm_nr)
    assert result == expected
    assert calc.calls == [(VALID, harm_nr)]