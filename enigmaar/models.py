"""Requests, results and value types exchanged between the services."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .aspects import Aspect
from .ayanamshas import Ayanamsha
from .chartpoints import ChartPoint
from .housesystems import HouseSystem
from .references import (
    Calendar,
    ChartCat,
    CoordinateSystem,
    ObserverPosition,
    ProjectionType,
    Rating,
)
from .timezones import TimeZone


class MpDial(IntEnum):
    """Dials used for midpoint analysis."""

    DIAL_360 = 0
    DIAL_90 = 1
    DIAL_45 = 2
    DIAL_22_5 = 3


@dataclass(frozen=True)
class MpDialData:
    """A midpoint dial and its size in degrees."""

    key: MpDial
    dial_size: float


_ALL_MP_DIALS = (
    MpDialData(MpDial.DIAL_360, 360.0),
    MpDialData(MpDial.DIAL_90, 90.0),
    MpDialData(MpDial.DIAL_45, 45.0),
    MpDialData(MpDial.DIAL_22_5, 80.0),
)


def all_mp_dials() -> list[MpDialData]:
    """Return all midpoint dials with their sizes."""
    return list(_ALL_MP_DIALS)


@dataclass(frozen=True)
class ConfigAspect:
    """Configuration of an aspect: orb factor and glyph."""

    actual_aspect: Aspect
    orb_factor: float = 0.0
    glyph: str = ""


@dataclass(frozen=True)
class ConfigPoint:
    """Configuration of a chart point: orb factor and glyph."""

    actual_point: ChartPoint
    orb_factor: float = 0.0
    glyph: str = ""


@dataclass(frozen=True)
class SinglePosition:
    """A single coordinate value for a chart point."""

    id: ChartPoint
    position: float


@dataclass(frozen=True)
class DoublePosition:
    """Two coordinate values for a chart point, e.g. longitude and declination."""

    id: ChartPoint
    position1: float
    position2: float


@dataclass(frozen=True)
class OccupiedMidpoint:
    """An occupied midpoint with its actual orb and exactness."""

    base_midpoint_pos1: SinglePosition
    base_midpoint_pos2: SinglePosition
    focus_point: SinglePosition
    actual_orb: float
    exactness: float


@dataclass(frozen=True)
class Midpoint:
    """A midpoint of two points, regardless of whether it is occupied."""

    point1: SinglePosition
    point2: SinglePosition
    midpoint_pos: float


@dataclass(frozen=True)
class MatchedParallel:
    """Two positions forming a parallel (``parallel`` true) or a contraparallel."""

    pos1: SinglePosition
    pos2: SinglePosition
    orb: float
    parallel: bool


@dataclass(frozen=True)
class ActualAspect:
    """An aspect actually formed between two positions."""

    pos1: SinglePosition
    pos2: SinglePosition
    actual_aspect: Aspect
    actual_orb: float
    exactness: int


@dataclass(frozen=True)
class DateTime:
    """A date with time in UT as decimal hours."""

    year: int
    month: int
    day: int
    ut: float = 0.0
    greg: bool = False


@dataclass(frozen=True)
class DateTimeHms:
    """A date with time in hours, minutes and seconds, plus DST and zone offset."""

    year: int
    month: int
    day: int
    hour: int = 0
    min: int = 0
    sec: int = 0
    greg: bool = False
    dst: float = 0.0
    tzone: float = 0.0


@dataclass(frozen=True)
class StandardInputItem:
    """One item of research input: an identified chart with location and date/time."""

    id: str
    name: str
    geo_longitude: float
    geo_latitude: float
    date_time: DateTimeHms


@dataclass
class PointPositionsRequest:
    """Request for all positions of one or more points."""

    points: list[ChartPoint] = field(default_factory=list)
    jd_ut: float = 0.0
    geo_long: float = 0.0
    geo_lat: float = 0.0
    armc: float = 0.0
    obliquity: float = 0.0
    coord: CoordinateSystem = CoordinateSystem.ECLIPTICAL
    obs_pos: ObserverPosition = ObserverPosition.GEOCENTRIC
    proj_type: ProjectionType = ProjectionType.TWO_D
    ayanamsha: Ayanamsha = Ayanamsha.NONE


@dataclass(frozen=True)
class PointPosResult:
    """Calculated positions and speeds of a single point."""

    point: ChartPoint
    lon_pos: float = 0.0
    lon_speed: float = 0.0
    lat_pos: float = 0.0
    lat_speed: float = 0.0
    ra_pos: float = 0.0
    ra_speed: float = 0.0
    decl_pos: float = 0.0
    decl_speed: float = 0.0
    radv_pos: float = 0.0
    radv_speed: float = 0.0
    azim_pos: float = 0.0
    altit_pos: float = 0.0


@dataclass
class PointRangeRequest:
    """Request for a range of positions or speeds of a point.

    ``interval`` is in days. ``main_value`` selects longitude/right ascension over
    latitude/declination; ``position`` selects position over speed. An ayanamsha of
    NONE means a tropical zodiac.
    """

    point: ChartPoint
    jd_start: float
    jd_end: float
    interval: float
    coord: CoordinateSystem = CoordinateSystem.ECLIPTICAL
    main_value: bool = True
    position: bool = True
    obs_pos: ObserverPosition = ObserverPosition.GEOCENTRIC
    ayanamsha: Ayanamsha = Ayanamsha.NONE


@dataclass(frozen=True)
class PointRangeResult:
    """A position or speed at a given julian day."""

    jd: float
    value: float


@dataclass
class HousePosRequest:
    """Request for cusps and other mundane points."""

    house_sys: HouseSystem
    jd_ut: float
    geo_long: float
    geo_lat: float


@dataclass(frozen=True)
class HousePosResult:
    """Calculated position of a single cusp or other mundane point."""

    lon_pos: float = 0.0
    ra_pos: float = 0.0
    decl_pos: float = 0.0
    azim_pos: float = 0.0
    altit_pos: float = 0.0


@dataclass
class FullChartRequest:
    """Request for a complete chart with point positions and mundane positions."""

    points: list[ChartPoint] = field(default_factory=list)
    house_sys: HouseSystem = HouseSystem.NONE
    ayanamsha: Ayanamsha = Ayanamsha.NONE
    coord_sys: CoordinateSystem = CoordinateSystem.ECLIPTICAL
    obs_pos: ObserverPosition = ObserverPosition.GEOCENTRIC
    proj_type: ProjectionType = ProjectionType.TWO_D
    jd: float = 0.0
    obliquity: float = 0.0
    geo_long: float = 0.0
    geo_lat: float = 0.0


@dataclass
class FullChartResponse:
    """Calculated positions for a complete chart.

    Cusps are used from index 1; index 0 is an empty placeholder.
    """

    points: list[PointPosResult] = field(default_factory=list)
    mc: HousePosResult = field(default_factory=HousePosResult)
    asc: HousePosResult = field(default_factory=HousePosResult)
    vertex: HousePosResult = field(default_factory=HousePosResult)
    east_point: HousePosResult = field(default_factory=HousePosResult)
    cusps: list[HousePosResult] = field(default_factory=list)


@dataclass
class FullChartMeta:
    """Descriptive chart data that is shown to the user but not used in calculations."""

    name: str = ""
    description: str = ""
    category: ChartCat = ChartCat.UNKNOWN
    rating: Rating = Rating.UNKNOWN
    source: str = ""
    location_name: str = ""
    geo_lat: str = ""
    geo_long: str = ""
    date: str = ""
    calendar: Calendar = Calendar.GREGORIAN
    time: str = ""
    time_zone: TimeZone = TimeZone.UT
    dst: bool = False
    geo_long_lmt: str = ""


@dataclass
class PersistableChart:
    """Chart data as stored."""

    id: int = 0
    name: str = ""
    description: str = ""
    category: str = ""


@dataclass
class PersistableDateLocation:
    """Date and location of a chart as stored."""

    id: int = 0
    chart_id: int = 0
    source: str = ""
    name_location: str = ""
    rating: str = ""
    geo_long: float = 0.0
    geo_lat: float = 0.0
    date_text: str = ""
    time_text: str = ""
    jd: float = 0.0


@dataclass(frozen=True)
class Country:
    """A country and its code."""

    code: str
    name: str


@dataclass(frozen=True)
class City:
    """A city with its coordinates and time zone indication."""

    country: str
    name: str
    geo_lat: str
    geo_long: str
    region: str = ""
    elevation: str = ""
    indication_tz: str = ""