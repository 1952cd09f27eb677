import pytest

from enigmaar.aspect_service import AspectService
from enigmaar.aspects import Aspect
from enigmaar.chartpoints import ChartPoint
from enigmaar.models import ActualAspect, ConfigAspect, ConfigPoint, SinglePosition

BASE_ORB = 10.0


class FakeCalculator:
    def __init__(self, result=None):
        self.calls = []
        self.result = result if result is not None else []

    def calc_aspects(self, points, aspects, cfg_points, cfg_aspects, base_orb):
        self.calls.append((points, aspects, cfg_points, cfg_aspects, base_orb))
        return self.result


def _points(*positions):
    return [SinglePosition(ChartPoint(i), pos) for i, pos in enumerate(positions)]


STANDARD_POSITIONS = (100.0, 164.0, 110.0, 90.0, 269.0, 175.0, 339.5)

CFG_POINTS = [
    ConfigPoint(ChartPoint(0), 100, "\ue200"),
    ConfigPoint(ChartPoint(1), 100, "\ue201"),
    ConfigPoint(ChartPoint(2), 80, "\ue202"),
    ConfigPoint(ChartPoint(3), 80, "\ue203"),
    ConfigPoint(ChartPoint(4), 80, "\ue204"),
    ConfigPoint(ChartPoint(5), 60, "\ue205"),
    ConfigPoint(ChartPoint(6), 60, "\ue206"),
]

ASPECTS = [Aspect(0), Aspect(1), Aspect(2), Aspect(3), Aspect(5)]

CFG_ASPECTS = [
    ConfigAspect(Aspect(0), 100, "\ue700"),
    ConfigAspect(Aspect(1), 100, "\ue710"),
    ConfigAspect(Aspect(2), 80, "\ue720"),
    ConfigAspect(Aspect(3), 80, "\ue730"),
    ConfigAspect(Aspect(4), 20, "\ue810"),
    ConfigAspect(Aspect(5), 60, "\ue700"),
]


def _run(points, aspects, cfg_points, cfg_aspects):
    calc = FakeCalculator()
    service = AspectService(calc)
    return calc, service, lambda: service.aspects(points, aspects, cfg_points, cfg_aspects, BASE_ORB)


def test_not_enough_points():
    calc, _, call = _run(_points(100.0), ASPECTS, CFG_POINTS, CFG_ASPECTS)
    with pytest.raises(ValueError, match="not enough points"):
        call()
    assert calc.calls == []


def test_no_aspects():
    calc, _, call = _run(_points(*STANDARD_POSITIONS), [], CFG_POINTS, CFG_ASPECTS)
    with pytest.raises(ValueError, match="not enough aspects"):
        call()
    assert calc.calls == []


def test_not_enough_config_points():
    calc, _, call = _run(_points(*STANDARD_POSITIONS), ASPECTS, CFG_POINTS[:1], CFG_ASPECTS)
    with pytest.raises(ValueError, match="not enough configured points"):
        call()
    assert calc.calls == []


def test_no_config_aspects():
    calc, _, call = _run(_points(*STANDARD_POSITIONS), ASPECTS, CFG_POINTS, [])
    with pytest.raises(ValueError, match="not enough configured aspects"):
        call()
    assert calc.calls == []


def test_missing_config_point():
    cfg_points = [cfg for cfg in CFG_POINTS if cfg.actual_point != 2]
    calc, _, call = _run(_points(*STANDARD_POSITIONS), ASPECTS, cfg_points, CFG_ASPECTS)
    with pytest.raises(ValueError, match="point 2 not found"):
        call()
    assert calc.calls == []


def test_missing_config_aspect():
    cfg_aspects = [cfg for cfg in CFG_ASPECTS if cfg.actual_aspect != 2]
    calc, _, call = _run(_points(*STANDARD_POSITIONS), ASPECTS, CFG_POINTS, cfg_aspects)
    with pytest.raises(ValueError, match="aspect 2 not found"):
        call()
    assert calc.calls == []


def test_position_too_large():
    positions = (100.0, 164.0, 410.0, 90.0, 269.0, 175.0, 339.5)
    calc, _, call = _run(_points(*positions), ASPECTS, CFG_POINTS, CFG_ASPECTS)
    with pytest.raises(ValueError, match="out of range"):
        call()
    assert calc.calls == []


def test_position_too_small():
    positions = (100.0, 164.0, 110.0, 90.0, -269.0, 175.0, 339.5)
    calc, _, call = _run(_points(*positions), ASPECTS, CFG_POINTS, CFG_ASPECTS)
    with pytest.raises(ValueError, match="out of range"):
        call()
    assert calc.calls == []


def test_valid_request_is_delegated():
    points = _points(*STANDARD_POSITIONS)
    expected = [ActualAspect(points[0], points[2], Aspect.CONJUNCTION, 10.0, 0)]
    calc = FakeCalculator(expected)
    result = AspectService(calc).aspects(points, ASPECTS, CFG_POINTS, CFG_ASPECTS, BASE_ORB)
    assert result == expected
    assert calc.calls == [(points, ASPECTS, CFG_POINTS, CFG_ASPECTS, BASE_ORB)]


def test_longitude_of_360_is_accepted():
    points = _points(0.0, 360.0)
    calc = FakeCalculator(["ok"])
    result = AspectService(calc).aspects(points, ASPECTS, CFG_POINTS, CFG_ASPECTS, BASE_ORB)
    assert result == ["ok"]
    assert len(calc.calls) == 1