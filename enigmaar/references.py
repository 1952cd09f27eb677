"""Reference enumerations and global limits used throughout the calculations."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntEnum

# Min and max values
MIN_JD_GENERAL = -2946707.5  # -12999/08/02
MAX_JD_GENERAL = 7865293.5  # 16799/12/30
MIN_JD_CHIRON = 1967598.5  # 0675/01/01
MAX_JD_CHIRON = 3419437.5  # 4650/01/01
MIN_JD_PHOLUS = 641716.5  # -2958/01/01
MAX_JD_PHOLUS = 4390615.5  # 7308/12/30
MIN_JD_CERES_VESTA = -2946707.5  # -12999/08/02
MAX_JD_CERES_VESTA = 5224242.5  # 9591/05/23
MIN_JD_MINOR_POINTS = 626157.5  # -3000/03/18
MAX_JD_MINOR_POINTS = 5224242.5  # 9591/05/23
MIN_LONGITUDE = 0.0
MAX_LONGITUDE = 360.0
MIN_ARMC = 0.0
MAX_ARMC = 360.0
MIN_DECLINATION = -180.0
MAX_DECLINATION = 180.0
MIN_OBLIQUITY = 20.0
MAX_OBLIQUITY = 30.0
MIN_GEO_LONG = -180.0
MAX_GEO_LONG = 180.0
MIN_GEO_LAT = -90.0
MAX_GEO_LAT = 90.0
MIN_MULTIPLICATION_CGROUPS = 1
MAX_MULTIPLICATION_CGROUPS = 1000
MIN_SIZE_CGROUPS = 2

# Length of the tropical year in days.
TROPICAL_YEAR_IN_DAYS = 365.242199074

# Ephemeris flags
SEFLG_SWIEPH = 2
SEFLG_HELIOC = 8
SEFLG_SPEED = 256
SEFLG_EQUATORIAL = 2048
SEFLG_TOPOC = 32768
SEFLG_SIDEREAL = 65536

PATH_SEP = os.sep


@dataclass(frozen=True)
class ReferenceText:
    """A reference value together with the id of its descriptive text."""

    key: IntEnum
    text_id: str


class CoordinateSystem(IntEnum):
    """The set of coordinates used."""

    ECLIPTICAL = 0
    EQUATORIAL = 1
    HORIZONTAL = 2


class ObserverPosition(IntEnum):
    """The central position for the calculations."""

    GEOCENTRIC = 0
    TOPOCENTRIC = 1
    HELIOCENTRIC = 2


class ProjectionType(IntEnum):
    """Standard 2D projection or oblique longitude."""

    TWO_D = 0
    OBLIQUE = 1


class Rating(IntEnum):
    """Reliability rating of chart data."""

    UNKNOWN = 0
    AA = 1
    A = 2
    B = 3
    C = 4
    DD = 5
    X = 6
    XX = 7


class ChartCat(IntEnum):
    """Category of a chart."""

    UNKNOWN = 0
    FEMALE = 1
    MALE = 2
    EVENT = 3
    HORARY = 4
    ELECTION = 5
    OTHER = 6


class Calendar(IntEnum):
    """Calendar used for a date."""

    GREGORIAN = 0
    JULIAN_CE = 1
    JULIAN_BCE = 2
    ASTRONOMICAL = 3


class CalculationCat(IntEnum):
    """How the position of a point is calculated."""

    SE = 0
    ELEMENTS = 1
    FORMULA = 2
    MUNDANE = 3
    LOTS = 4
    ZODIAC_FIXED = 5


class PointCat(IntEnum):
    """Category of a chart point."""

    COMMON = 0
    ANGLE = 1
    CUSP = 2
    ZODIAC = 3
    LOT = 4
    FIX_STAR = 5


class WheelType(IntEnum):
    """Layout of a chart wheel."""

    SIGNS_EQUAL = 0
    HOUSES_EQUAL = 1
    PLANETS_OUTSIDE = 2
    SIMPLE_CIRCLE = 3


def _texts(enum_cls: type[IntEnum], prefix: str, suffixes: list[str]) -> list[ReferenceText]:
    return [ReferenceText(member, prefix + suffix) for member, suffix in zip(enum_cls, suffixes)]


def all_coordinate_systems() -> list[ReferenceText]:
    """Return all coordinate systems with their text ids."""
    return _texts(CoordinateSystem, "r_cs_", ["ecliptical", "equatorial", "horizontal"])


def all_observer_positions() -> list[ReferenceText]:
    """Return all observer positions with their text ids."""
    return _texts(ObserverPosition, "r_op_", ["geocentric", "topocentric", "heliocentric"])


def all_projection_types() -> list[ReferenceText]:
    """Return all projection types with their text ids."""
    return _texts(ProjectionType, "r_pt_", ["2d", "oblique"])


def all_ratings() -> list[ReferenceText]:
    """Return all ratings with their text ids."""
    return _texts(Rating, "r_rr_", ["unknown", "aa", "a", "b", "c", "dd", "x", "xx"])


def all_chart_cats() -> list[ReferenceText]:
    """Return all chart categories with their text ids."""
    return _texts(
        ChartCat, "r_cc_", ["unknown", "female", "male", "event", "horary", "election", "other"]
    )


def all_calendars() -> list[ReferenceText]:
    """Return all calendars with their text ids."""
    return _texts(Calendar, "r_cal_", ["gregorian", "julian_ce", "julian_bce", "astronomical"])


def all_wheel_types() -> list[ReferenceText]:
    """Return all wheel types with their text ids."""
    return _texts(
        WheelType, "r_wh_", ["signs_equal", "houses_equal", "planets_outside", "simple_circle"]
    )