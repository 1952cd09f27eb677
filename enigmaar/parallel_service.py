"""Validation and dispatch of parallel and contraparallel calculations."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from .models import MatchedParallel, SinglePosition

_log = logging.getLogger(__name__)

MAX_DECL = 180.0
MIN_POSITIONS = 2


class ParallelsCalculator(Protocol):
    """Calculates parallels and contraparallels in declination."""

    def calc_parallels(
        self, positions: Sequence[SinglePosition], orb: float
    ) -> list[MatchedParallel]: ...


class ParallelService:
    """Checks parallel requests and hands valid ones to a calculator."""

    def __init__(self, calculator: ParallelsCalculator) -> None:
        self._calculator = calculator

    def parallels(
        self, positions: Sequence[SinglePosition], orb: float
    ) -> list[MatchedParallel]:
        """Return parallels and contraparallels; raise ValueError on invalid input.

        Needs at least two declinations, each with an absolute value below 180.0,
        and an orb greater than 0.0 and below 10.0.
        """
        _log.info("Started calculation of parallels")
        if len(positions) < MIN_POSITIONS:
            _log.error("Not enough positions")
            raise ValueError("parallels failed, not enough data")
        if orb <= 0.0 or orb >= 10.0:
            _log.error("Orb out of range")
            raise ValueError("parallels failed, orb not > 0.0 or not < 10.0")
        if any(abs(pos.position) >= MAX_DECL for pos in positions):
            _log.error("Declination out of range")
            raise ValueError("parallels failed, found declination >= 180.0")
        _log.info("Parallel request validated")
        return self._calculator.calc_parallels(positions, orb)