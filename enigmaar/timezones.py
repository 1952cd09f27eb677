"""Standard time zones and their offsets from UT."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TimeZone(IntEnum):
    """Supported time zones; LMT stands for local mean time."""

    UT = 0
    CET = 1
    EET = 2
    EAT = 3
    IRST = 4
    AMT = 5
    AFT = 6
    PKT = 7
    IST = 8
    IOT = 9
    MMT = 10
    ICT = 11
    WST = 12
    JST = 13
    ACST = 14
    AEST = 15
    LHST = 16
    NCT = 17
    NZST = 18
    SST = 19
    HAST = 20
    MART = 21
    AKST = 22
    PST = 23
    MST = 24
    CST = 25
    EST = 26
    AST = 27
    NST = 28
    BRT = 29
    GST = 30
    AZOT = 31
    LMT = 32


@dataclass(frozen=True)
class TimeZoneData:
    """A time zone with its text id and offset from UT in hours."""

    key: TimeZone
    text_id: str
    offset: float


_OFFSETS = {
    TimeZone.UT: 0.0,
    TimeZone.CET: 1.0,
    TimeZone.EET: 2.0,
    TimeZone.EAT: 3.0,
    TimeZone.IRST: 3.0,
    TimeZone.AMT: 4.0,
    TimeZone.AFT: 4.0,
    TimeZone.PKT: 5.0,
    TimeZone.IST: 5.0,
    TimeZone.IOT: 6.0,
    TimeZone.MMT: 6.0,
    TimeZone.ICT: 7.0,
    TimeZone.WST: 8.0,
    TimeZone.JST: 9.0,
    TimeZone.ACST: 9.0,
    TimeZone.AEST: 10.0,
    TimeZone.LHST: 10.0,
    TimeZone.NCT: 11.0,
    TimeZone.NZST: 12.0,
    TimeZone.SST: -11.0,
    TimeZone.HAST: -10.0,
    TimeZone.MART: -9.0,
    TimeZone.AKST: -9.0,
    TimeZone.PST: -8.0,
    TimeZone.MST: -7.0,
    TimeZone.CST: -6.0,
    TimeZone.EST: -5.0,
    TimeZone.AST: -4.0,
    TimeZone.NST: -3.0,
    TimeZone.BRT: -3.0,
    TimeZone.GST: -2.0,
    TimeZone.AZOT: -1.0,
    TimeZone.LMT: 0.0,
}

_ALL_TIME_ZONES = tuple(
    TimeZoneData(zone, f"r_tz_{zone.name.lower()}", offset) for zone, offset in _OFFSETS.items()
)

_BY_KEY = {item.key: item for item in _ALL_TIME_ZONES}


def all_time_zones() -> list[TimeZoneData]:
    """Return all time zones with their data."""
    return list(_ALL_TIME_ZONES)


def time_zone_data(zone: TimeZone | int) -> TimeZoneData:
    """Return the data for one time zone; raise ValueError for an unknown zone."""
    return _BY_KEY[TimeZone(zone)]