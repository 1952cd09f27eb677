"""Validation and dispatch of control group creation for research."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from .models import StandardInputItem
from .references import (
    MAX_GEO_LAT,
    MAX_GEO_LONG,
    MAX_MULTIPLICATION_CGROUPS,
    MIN_GEO_LAT,
    MIN_GEO_LONG,
    MIN_MULTIPLICATION_CGROUPS,
    MIN_SIZE_CGROUPS,
)

_log = logging.getLogger(__name__)


class ControlGroupCreator(Protocol):
    """Creates a control group from research input."""

    def create_control_group(
        self, input_items: Sequence[StandardInputItem], multiplicity: int
    ) -> list[StandardInputItem]: ...


def _ids_are_unique(input_items: Sequence[StandardInputItem]) -> bool:
    ids = [item.id for item in input_items]
    return len(ids) == len(set(ids))


class CGroupService:
    """Checks control group requests and hands valid ones to a creator."""

    def __init__(self, creator: ControlGroupCreator) -> None:
        self._creator = creator

    def create_control_group(
        self, input_items: Sequence[StandardInputItem], multiplicity: int
    ) -> list[StandardInputItem]:
        """Return a control group; raise ValueError on invalid input.

        Needs at least two items with unique ids, a multiplicity between 1 and
        1000, latitudes strictly between -90.0 and 90.0 and longitudes above
        -180.0 and at most 180.0.
        """
        if len(input_items) < MIN_SIZE_CGROUPS:
            _log.error("input items < min size for control groups")
            raise ValueError("not enough inputItems")
        if multiplicity < MIN_MULTIPLICATION_CGROUPS or multiplicity > MAX_MULTIPLICATION_CGROUPS:
            _log.error("multiplicity out of range")
            raise ValueError("multiplicity out of range")
        if not _ids_are_unique(input_items):
            _log.error("input items not unique")
            raise ValueError("inputItems not unique")
        for item in input_items:
            if item.geo_latitude >= MAX_GEO_LAT or item.geo_latitude <= MIN_GEO_LAT:
                _log.error("geoLatitude out of range")
                raise ValueError("geoLatitude out of range")
        for item in input_items:
            if item.geo_longitude > MAX_GEO_LONG or item.geo_longitude <= MIN_GEO_LONG:
                _log.error("geoLongitude out of range")
                raise ValueError("geoLongitude out of range")
        return self._creator.create_control_group(input_items, multiplicity)