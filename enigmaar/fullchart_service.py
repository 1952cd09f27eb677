"""Validation and dispatch of full chart calculations."""

from __future__ import annotations

import logging
from typing import Protocol

from .models import FullChartRequest, FullChartResponse
from .references import (
    MAX_GEO_LAT,
    MAX_GEO_LONG,
    MAX_JD_GENERAL,
    MIN_GEO_LAT,
    MIN_GEO_LONG,
    MIN_JD_GENERAL,
)

_log = logging.getLogger(__name__)


class FullChartCalculator(Protocol):
    """Calculates a complete chart."""

    def calc_full_chart(self, request: FullChartRequest) -> FullChartResponse: ...


class FullChartService:
    """Checks full chart requests and hands valid ones to a calculator."""

    def __init__(self, calculator: FullChartCalculator) -> None:
        self._calculator = calculator

    def calc_full_chart(self, request: FullChartRequest) -> FullChartResponse:
        """Return the calculated chart; raise ValueError on invalid input.

        Needs at least one point, a julian day within the general range and
        geographic coordinates within their ranges (bounds inclusive).
        """
        _log.info("Start calculation of full chart")
        if not request.points:
            _log.error("points is empty")
            raise ValueError("points is empty")
        if request.jd < MIN_JD_GENERAL or request.jd > MAX_JD_GENERAL:
            _log.error("jd is out of range")
            raise ValueError("jd is out of range")
        if request.geo_long < MIN_GEO_LONG or request.geo_long > MAX_GEO_LONG:
            _log.error("geoLong is out of range")
            raise ValueError("geoLong is out of range")
        if request.geo_lat < MIN_GEO_LAT or request.geo_lat > MAX_GEO_LAT:
            _log.error("geoLat is out of range")
            raise ValueError("geoLat is out of range")
        _log.info("Full chart request validated")
        return self._calculator.calc_full_chart(request)