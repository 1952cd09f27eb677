"""Validation and dispatch of aspect calculations."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from .aspects import Aspect
from .models import ActualAspect, ConfigAspect, ConfigPoint, SinglePosition
from .references import MAX_LONGITUDE, MIN_LONGITUDE

_log = logging.getLogger(__name__)

MIN_POINTS_FOR_CALC_ASP = 2
MIN_ASPECTS_FOR_CALC_ASP = 1


class AspectsCalculator(Protocol):
    """Calculates the aspects actually formed between positions."""

    def calc_aspects(
        self,
        points: Sequence[SinglePosition],
        aspects: Sequence[Aspect],
        cfg_points: Sequence[ConfigPoint],
        cfg_aspects: Sequence[ConfigAspect],
        base_orb: float,
    ) -> list[ActualAspect]: ...


class AspectService:
    """Checks aspect requests and hands valid ones to a calculator."""

    def __init__(self, calculator: AspectsCalculator) -> None:
        self._calculator = calculator

    def aspects(
        self,
        points: Sequence[SinglePosition],
        aspects: Sequence[Aspect],
        cfg_points: Sequence[ConfigPoint],
        cfg_aspects: Sequence[ConfigAspect],
        base_orb: float,
    ) -> list[ActualAspect]:
        """Return the aspects between ``points``; raise ValueError on invalid input.

        Every point must be configured in ``cfg_points``, every aspect in
        ``cfg_aspects``, and every position must lie between 0.0 and 360.0.
        """
        _log.info("received request")
        if len(points) < MIN_POINTS_FOR_CALC_ASP:
            _log.error("not enough points")
            raise ValueError("not enough points")
        if len(cfg_points) < MIN_POINTS_FOR_CALC_ASP:
            _log.error("not enough configured points")
            raise ValueError("not enough configured points")
        if len(aspects) < MIN_ASPECTS_FOR_CALC_ASP:
            _log.error("not enough aspects")
            raise ValueError("not enough aspects")
        if len(cfg_aspects) < MIN_ASPECTS_FOR_CALC_ASP:
            _log.error("not enough configured aspects")
            raise ValueError("not enough configured aspects")

        configured_points = {cfg.actual_point for cfg in cfg_points}
        for point in points:
            if point.id not in configured_points:
                _log.error("point %d not found in configured points", point.id)
                raise ValueError(f"point {int(point.id)} not found in configured points")

        configured_aspects = {cfg.actual_aspect for cfg in cfg_aspects}
        for aspect in aspects:
            if aspect not in configured_aspects:
                _log.error("aspect %d not found in configured aspects", aspect)
                raise ValueError(f"aspect {int(aspect)} not found in configured aspects")

        for point in points:
            if point.position > MAX_LONGITUDE or point.position < MIN_LONGITUDE:
                _log.error("point is out of range, longitude %s", point.position)
                raise ValueError(
                    f"point {int(point.id)} is out of range, longitude is {point.position:f} "
                    f"and should be >= {MIN_LONGITUDE:f} and < {MAX_LONGITUDE:f}"
                )

        _log.info("completed validation of aspect request")
        return self._calculator.calc_aspects(points, aspects, cfg_points, cfg_aspects, base_orb)