"""Access to countries and cities."""

from __future__ import annotations

import logging
from typing import Protocol

from .models import City, Country

_log = logging.getLogger(__name__)

COUNTRY_CODE_LENGTH = 2


class LocationHandler(Protocol):
    """Provides countries and the cities within a country."""

    def countries(self) -> list[Country]: ...

    def cities(self, country_code: str) -> list[City]: ...


class LocationService:
    """Checks location requests and hands valid ones to a handler."""

    def __init__(self, handler: LocationHandler) -> None:
        self._handler = handler

    def countries(self) -> list[Country]:
        """Return all available countries."""
        return self._handler.countries()

    def cities(self, country_code: str) -> list[City]:
        """Return the cities of a country; raise ValueError unless the code has 2 characters."""
        _log.info("received request for cities")
        if len(country_code) != COUNTRY_CODE_LENGTH:
            _log.error("country code did not contain 2 characters")
            raise ValueError("wrong country code, should be 2 characters")
        return self._handler.cities(country_code)