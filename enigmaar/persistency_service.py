"""Access to files and stored charts."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from .models import PersistableChart, PersistableDateLocation

_log = logging.getLogger(__name__)


class PersistencyStore(Protocol):
    """Reads and writes text files and stores charts."""

    def read_text_lines(self, path: str) -> list[str]: ...

    def write_text_lines(self, path: str, lines: Sequence[str]) -> None: ...

    def save_chart_data(
        self, chart: PersistableChart, date_location: PersistableDateLocation
    ) -> tuple[int, int]: ...


class PersistencyService:
    """Gives access to files and stored charts through a store."""

    def __init__(self, store: PersistencyStore) -> None:
        self._store = store

    def read_lines(self, path: str) -> list[str]:
        """Return the lines read from the file at ``path``."""
        return self._store.read_text_lines(path)

    def write_lines(self, path: str, lines: Sequence[str]) -> None:
        """Create a new file at ``path`` and write ``lines`` to it."""
        _log.info("Writing lines")
        self._store.write_text_lines(path, lines)

    def write_chart(
        self, chart: PersistableChart, date_location: PersistableDateLocation
    ) -> tuple[int, int]:
        """Store a chart with its date and location; return the ids assigned to both."""
        _log.info("Writing chart")
        return self._store.save_chart_data(chart, date_location)