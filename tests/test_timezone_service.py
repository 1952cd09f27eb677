import pytest

from enigmaar.models import DateTimeHms
from enigmaar.timezone_service import TimeZoneService


class FakeHandler:
    def __init__(self):
        self.calls = []

    def actual_time_zone(self, date_time, tz_indication):
        self.calls.append((date_time, tz_indication))
        return "CET", 3600


DATE_TIME = DateTimeHms(
    year=2024, month=1, day=23, hour=20, min=4, sec=50, greg=True, dst=0, tzone=0
)


def test_invalid_indication_raises():
    handler = FakeHandler()
    service = TimeZoneService(handler)
    with pytest.raises(ValueError, match="invalid tzIndication"):
        service.actual_time_zone(DATE_TIME, "abc")
    assert handler.calls == []


def test_valid_indication_is_passed_to_handler():
    handler = FakeHandler()
    service = TimeZoneService(handler)
    name, offset = service.actual_time_zone(DATE_TIME, "Europe/Amsterdam")
    assert (name, offset) == ("CET", 3600)
    assert handler.calls == [(DATE_TIME, "Europe/Amsterdam")]


def test_handler_error_propagates():
    class FailingHandler:
        def actual_time_zone(self, date_time, tz_indication):
            raise LookupError("unknown zone")

    service = TimeZoneService(FailingHandler())
    with pytest.raises(LookupError, match="unknown zone"):
        service.actual_time_zone(DATE_TIME, "Nowhere/Zone")