"""Validation and dispatch of longitude equivalent calculations."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from .models import DoublePosition, SinglePosition
from .references import MAX_DECLINATION, MAX_LONGITUDE, MIN_DECLINATION, MIN_LONGITUDE

_log = logging.getLogger(__name__)

MIN_OBLIQUITY = 22.0
MAX_OBLIQUITY = 25.0


class LongEquivCalculator(Protocol):
    """Calculates longitude equivalents from longitude and declination."""

    def calc_equivalents(
        self, positions: Sequence[DoublePosition], obliquity: float
    ) -> list[SinglePosition]: ...


class LongEquivService:
    """Checks longitude equivalent requests and hands valid ones to a calculator."""

    def __init__(self, calculator: LongEquivCalculator) -> None:
        self._calculator = calculator

    def long_equivs(
        self, positions: Sequence[DoublePosition], obliquity: float
    ) -> list[SinglePosition]:
        """Return longitude equivalents; raise ValueError on invalid input.

        Each position holds the longitude in ``position1`` and the declination in
        ``position2``. The obliquity must lie between 22.0 and 25.0.
        """
        _log.info("Started calculation of longitude equivalents")
        if not positions:
            _log.error("No positions found")
            raise ValueError("long equivs could not proceed: received no positions")
        if obliquity < MIN_OBLIQUITY or obliquity > MAX_OBLIQUITY:
            _log.error("Obliquity out of range")
            raise ValueError(
                f"long equivs could not proceed: obliquity is out of range, value was "
                f"{obliquity:f} and should be between {MIN_OBLIQUITY:f} and {MAX_OBLIQUITY:f}"
            )
        for pos in positions:
            longitude, declination = pos.position1, pos.position2
            if declination < MIN_DECLINATION or declination > MAX_DECLINATION:
                _log.error("Declination out of range")
                raise ValueError(
                    f"long equivs could not proceed: found declination that is out of range, "
                    f"value was {declination:f} and should be between "
                    f"{MIN_DECLINATION:f} and {MAX_DECLINATION:f}"
                )
            if longitude < MIN_LONGITUDE or longitude > MAX_LONGITUDE:
                _log.error("Longitude out of range")
                raise ValueError(
                    f"long equivs could not proceed: found longitude that is out of range, "
                    f"value was {longitude:f} and should be between "
                    f"{MIN_LONGITUDE:f} and {MAX_LONGITUDE:f}"
                )
        _log.info("Longitude equivalent request validated")
        return self._calculator.calc_equivalents(positions, obliquity)