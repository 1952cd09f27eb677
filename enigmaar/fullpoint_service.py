"""Validation and dispatch of point position and point range calculations."""

from __future__ import annotations

import logging
from typing import Protocol

from .models import PointPositionsRequest, PointPosResult, PointRangeRequest, PointRangeResult
from .references import (
    MAX_ARMC,
    MAX_GEO_LAT,
    MAX_GEO_LONG,
    MAX_JD_GENERAL,
    MAX_OBLIQUITY,
    MIN_ARMC,
    MIN_GEO_LAT,
    MIN_GEO_LONG,
    MIN_JD_GENERAL,
    MIN_OBLIQUITY,
)

_log = logging.getLogger(__name__)


class PointPosCalculator(Protocol):
    """Calculates all positions and speeds for points."""

    def calc_point_pos(self, request: PointPositionsRequest) -> list[PointPosResult]: ...


class PointRangeCalculator(Protocol):
    """Calculates a position or speed over a range of julian days."""

    def calc_point_range(self, request: PointRangeRequest) -> list[PointRangeResult]: ...


class FullPointService:
    """Checks point position requests and hands valid ones to a calculator."""

    def __init__(self, calculator: PointPosCalculator) -> None:
        self._calculator = calculator

    def full_positions(self, request: PointPositionsRequest) -> list[PointPosResult]:
        """Return positions for all requested points; raise ValueError on invalid input.

        The julian day and geographic latitude must lie strictly inside their
        ranges, the geographic longitude within its range (inclusive), the armc at
        least 0.0 and below 360.0, and the obliquity at least 20.0 and below 30.0.
        """
        if not request.points:
            _log.error("No points found")
            raise ValueError("points must have at least one point")
        if request.jd_ut <= MIN_JD_GENERAL or request.jd_ut >= MAX_JD_GENERAL:
            _log.error("Jd out of range")
            raise ValueError(f"jdUt {request.jd_ut:f} is out of range")
        if request.geo_long < MIN_GEO_LONG or request.geo_long > MAX_GEO_LONG:
            _log.error("GeoLong out of range")
            raise ValueError(f"geoLong {request.geo_long:f} is out of range")
        if request.geo_lat <= MIN_GEO_LAT or request.geo_lat >= MAX_GEO_LAT:
            _log.error("GeoLat out of range")
            raise ValueError(f"geoLat {request.geo_lat:f} is out of range")
        if request.armc < MIN_ARMC or request.armc >= MAX_ARMC:
            _log.error("Armc out of range")
            raise ValueError(f"armc {request.armc:f} is out of range")
        if request.obliquity < MIN_OBLIQUITY or request.obliquity >= MAX_OBLIQUITY:
            _log.error("Obliquity out of range")
            raise ValueError(f"obliquity {request.obliquity:f} is out of range")
        try:
            positions = self._calculator.calc_point_pos(request)
        except Exception:
            _log.exception("Error calculating full points for request %s", request)
            raise
        _log.info("Completed calculation of full points")
        return positions


class PointRangeService:
    """Hands point range requests to a calculator."""

    def __init__(self, calculator: PointRangeCalculator) -> None:
        self._calculator = calculator

    def define_point_range(self, request: PointRangeRequest) -> list[PointRangeResult]:
        """Return the values for the requested range of julian days."""
        return self._calculator.calc_point_range(request)