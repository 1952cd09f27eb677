"""Validation and dispatch of midpoint calculations in declination."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from .models import OccupiedMidpoint, SinglePosition

_log = logging.getLogger(__name__)

MIN_ORB_FOR_DMP = 0.0
MAX_ORB_FOR_DMP = 10.0
MIN_ITEMS_FOR_DMP = 3
MIN_DECL_FOR_DMP = -180.0
MAX_DECL_FOR_DMP = 180.0


class DeclMidpointsCalculator(Protocol):
    """Calculates occupied midpoints in declination."""

    def calc_decl_midpoints(
        self, positions: Sequence[SinglePosition], orb: float
    ) -> list[OccupiedMidpoint]: ...


class DeclinationMidpointService:
    """Checks declination midpoint requests and hands valid ones to a calculator."""

    def __init__(self, calculator: DeclMidpointsCalculator) -> None:
        self._calculator = calculator

    def declination_midpoints(
        self, positions: Sequence[SinglePosition], orb: float
    ) -> list[OccupiedMidpoint]:
        """Return occupied declination midpoints; raise ValueError on invalid input.

        Needs at least three positions, each strictly between -180.0 and 180.0,
        and an orb greater than 0.0 and at most 10.0.
        """
        _log.info("Starting calculation of declination midpoints")
        if len(positions) < MIN_ITEMS_FOR_DMP:
            _log.error("not enough positions")
            raise ValueError("not enough positions")
        if orb <= MIN_ORB_FOR_DMP or orb > MAX_ORB_FOR_DMP:
            _log.error("Orb is out of range")
            raise ValueError("orb is out of range, must be between 0.0 and 10.0")
        for pos in positions:
            if pos.position <= MIN_DECL_FOR_DMP or pos.position >= MAX_DECL_FOR_DMP:
                _log.error("Declination out of range")
                raise ValueError(
                    "declination out of range, must be between -180.0 and 180.0 (exclusive)"
                )
        _log.info("Declination midpoint request validated")
        return self._calculator.calc_decl_midpoints(positions, orb)