"""Conversions between calendar dates and julian day numbers."""

from __future__ import annotations

import logging
from typing import Protocol

from .models import DateTime
from .references import Calendar

_log = logging.getLogger(__name__)


class JulDayCalculator(Protocol):
    """Calculates a julian day number from a date and time."""

    def calc_jd(self, year: int, month: int, day: int, ut: float, greg: bool) -> float: ...


class RevJulDayCalculator(Protocol):
    """Calculates a date and time from a julian day number."""

    def calc_rev_jd(self, jd: float, greg: bool) -> tuple[int, int, int, float]: ...


class JulDayService:
    """Provides julian day numbers for dates."""

    def __init__(self, calculator: JulDayCalculator) -> None:
        self._calculator = calculator

    def jul_day(self, request: DateTime) -> float:
        """Return the julian day number for the given date and UT."""
        _log.info("Starting calculation of JD")
        jd = self._calculator.calc_jd(
            request.year, request.month, request.day, request.ut, request.greg
        )
        _log.info("Completed calculation of JD")
        return jd


class RevJulDayService:
    """Provides dates for julian day numbers."""

    def __init__(self, calculator: RevJulDayCalculator) -> None:
        self._calculator = calculator

    def rev_jul_day(self, jd: float, calendar: Calendar) -> tuple[int, int, int, float]:
        """Return year, month, day and UT for ``jd``.

        Only the Gregorian calendar is treated as Gregorian; every other
        calendar is treated as Julian.
        """
        _log.info("Starting calculation of date/time from JD")
        result = self._calculator.calc_rev_jd(jd, calendar == Calendar.GREGORIAN)
        _log.info("Completed calculation of date/time from JD")
        return result