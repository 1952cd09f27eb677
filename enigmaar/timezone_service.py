"""Lookup of the actual time zone for a date and zone indication."""

from __future__ import annotations

import logging
from typing import Protocol

from .models import DateTimeHms

_log = logging.getLogger(__name__)

MIN_TZ_INDICATION_LENGTH = 5


class TimeZoneHandler(Protocol):
    """Looks up zone abbreviations and offsets in a time zone database."""

    def actual_time_zone(
        self, date_time: DateTimeHms, tz_indication: str
    ) -> tuple[str, int]: ...


class TimeZoneService:
    """Checks time zone requests and hands valid ones to a handler."""

    def __init__(self, handler: TimeZoneHandler) -> None:
        self._handler = handler

    def actual_time_zone(self, date_time: DateTimeHms, tz_indication: str) -> tuple[str, int]:
        """Return the zone abbreviation and its offset in seconds.

        Raise ValueError when the indication is shorter than 5 characters.
        """
        if len(tz_indication) < MIN_TZ_INDICATION_LENGTH:
            _log.error("Received invalid tzIndication: %s", tz_indication)
            raise ValueError("invalid tzIndication")
        return self._handler.actual_time_zone(date_time, tz_indication)