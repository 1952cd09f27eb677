"""Validation and dispatch of midpoint calculations."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from .models import Midpoint, MpDial, OccupiedMidpoint, SinglePosition

_log = logging.getLogger(__name__)

MIN_ITEMS_FOR_MP = 2
MIN_ITEMS_FOR_CALC_MP = 3
MIN_ORB_FOR_MP = 0.0
MAX_ORB_FOR_MP = 10.0
MIN_POS_FOR_MP = 0.0
MAX_POS_FOR_MP = 360.0


class MidpointsCalculator(Protocol):
    """Calculates midpoints and occupied midpoints."""

    def calc_midpoints(self, points: Sequence[SinglePosition]) -> list[Midpoint]: ...

    def calc_occupied_midpoints(
        self, points: Sequence[SinglePosition], dial: MpDial, orb: float
    ) -> list[OccupiedMidpoint]: ...


def _check_positions(points: Sequence[SinglePosition]) -> None:
    for point in points:
        if point.position < MIN_POS_FOR_MP or point.position >= MAX_POS_FOR_MP:
            _log.error("position out of range")
            raise ValueError("positions must be between 0.0 and <360.0")


class MidpointService:
    """Checks midpoint requests and hands valid ones to a calculator."""

    def __init__(self, calculator: MidpointsCalculator) -> None:
        self._calculator = calculator

    def midpoints(self, points: Sequence[SinglePosition]) -> list[Midpoint]:
        """Return all midpoints; raise ValueError on invalid input.

        Needs at least two points, each at least 0.0 and below 360.0.
        """
        _log.info("Started calculation of midpoints")
        if len(points) < MIN_ITEMS_FOR_MP:
            _log.error("Not enough points")
            raise ValueError("not enough points")
        _check_positions(points)
        return self._calculator.calc_midpoints(points)

    def occupied_midpoints(
        self, points: Sequence[SinglePosition], dial: MpDial, orb: float
    ) -> list[OccupiedMidpoint]:
        """Return occupied midpoints in ``dial``; raise ValueError on invalid input.

        Needs at least three points, each at least 0.0 and below 360.0, and an
        orb greater than 0.0 and at most 10.0.
        """
        _log.info("Started calculation of occupied midpoints")
        if len(points) < MIN_ITEMS_FOR_CALC_MP:
            _log.error("Not enough points")
            raise ValueError("not enough points")
        if orb <= MIN_ORB_FOR_MP or orb > MAX_ORB_FOR_MP:
            _log.error("Orb out of range")
            raise ValueError("orb must be between 0.0 and 10.0")
        _check_positions(points)
        _log.info("Occupied midpoint request validated")
        return self._calculator.calc_occupied_midpoints(points, dial, orb)