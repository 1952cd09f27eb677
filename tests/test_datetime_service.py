import pytest

from enigmaar.datetime_service import JulDayService, RevJulDayService
from enigmaar.models import DateTime
from enigmaar.references import Calendar

JD = 2460437.3541666665


class FakeJulDayCalculator:
    def __init__(self):
        self.calls = []

    def calc_jd(self, year, month, day, ut, greg):
        self.calls.append((year, month, day, ut, greg))
        return JD


class FakeRevJulDayCalculator:
    def __init__(self):
        self.calls = []

    def calc_rev_jd(self, jd, greg):
        self.calls.append((jd, greg))
        return 2024, 5, 6, 20.5


def test_jul_day_passes_date_fields():
    calculator = FakeJulDayCalculator()
    service = JulDayService(calculator)
    result = service.jul_day(DateTime(year=2024, month=5, day=6, ut=20.5, greg=True))
    assert result == JD
    assert calculator.calls == [(2024, 5, 6, 20.5, True)]


def test_jul_day_passes_julian_flag():
    calculator = FakeJulDayCalculator()
    JulDayService(calculator).jul_day(DateTime(year=1500, month=3, day=1, ut=0.0, greg=False))
    assert calculator.calls == [(1500, 3, 1, 0.0, False)]


def test_rev_jul_day_returns_calculated_date():
    calculator = FakeRevJulDayCalculator()
    service = RevJulDayService(calculator)
    assert service.rev_jul_day(JD, Calendar.GREGORIAN) == (2024, 5, 6, 20.5)
    assert calculator.calls == [(JD, True)]


@pytest.mark.parametrize(
    "calendar, greg",
    [
        (Calendar.GREGORIAN, True),
        (Calendar.JULIAN_CE, False),
        (Calendar.JULIAN_BCE, False),
        (Calendar.ASTRONOMICAL, False),
    ],
)
def test_rev_jul_day_calendar_selects_flag(calendar, greg):
    calculator = FakeRevJulDayCalculator()
    RevJulDayService(calculator).rev_jul_day(JD, calendar)
    assert calculator.calls == [(JD, greg)]