"""Validation and dispatch of harmonic calculations."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from .models import SinglePosition

_log = logging.getLogger(__name__)

MIN_HARMONIC = 1
MAX_HARMONIC = 100_000


class HarmonicsCalculator(Protocol):
    """Calculates harmonic positions."""

    def calc_harmonics(
        self, positions: Sequence[SinglePosition], harmonic_nr: float
    ) -> list[SinglePosition]: ...


class HarmonicService:
    """Checks harmonic requests and hands valid ones to a calculator."""

    def __init__(self, calculator: HarmonicsCalculator) -> None:
        self._calculator = calculator

    def harmonics(
        self, positions: Sequence[SinglePosition], harmonic_nr: float
    ) -> list[SinglePosition]:
        """Return harmonic positions; raise ValueError on invalid input.

        The harmonic number must lie between 1 and 100,000, and every position
        must be at least 0.0 and below 360.0.
        """
        _log.info("Starting calculation of harmonics")
        if harmonic_nr < MIN_HARMONIC or harmonic_nr > MAX_HARMONIC:
            _log.error("Harmonic number out of range")
            raise ValueError(
                f"harmonics failed, harmonic number should be >= {MIN_HARMONIC} and "
                f"<= {MAX_HARMONIC}, but was {harmonic_nr:f}"
            )
        if not positions:
            _log.error("no data found")
            raise ValueError("harmonics failed, no data found")
        for pos in positions:
            if pos.position < 0.0 or pos.position >= 360.0:
                _log.error("position out of range")
                raise ValueError(
                    f"harmonics failed, encountered position {pos.position:f}, "
                    "this is outside range: >= 0.0 and < 360.0"
                )
        _log.info("Harmonic request validated")
        return self._calculator.calc_harmonics(positions, harmonic_nr)