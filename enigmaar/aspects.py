"""Aspects and their angular distances."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Aspect(IntEnum):
    """Supported aspects."""

    CONJUNCTION = 0
    OPPOSITION = 1
    TRINE = 2
    SQUARE = 3
    SEPTILE = 4
    SEXTILE = 5
    QUINTILE = 6
    SEMI_SEXTILE = 7
    SEMI_SQUARE = 8
    SEMI_QUINTILE = 9
    BI_QUINTILE = 10
    INCONJUNCT = 11
    SESQUI_QUADRATE = 12
    TRI_DECILE = 13
    BI_SEPTILE = 14
    TRI_SEPTILE = 15
    NOVILE = 16
    BI_NOVILE = 17
    QUADRA_NOVILE = 18
    UNDECILE = 19
    CENTILE = 20
    VIGINTILE = 21


@dataclass(frozen=True)
class AspectData:
    """An aspect with its text id and angular distance in degrees."""

    key: Aspect
    text_id: str
    distance: float


_ALL_ASPECTS = (
    AspectData(Aspect.CONJUNCTION, "r_as_conjunction", 0.0),
    AspectData(Aspect.OPPOSITION, "r_as_opposition", 180.0),
    AspectData(Aspect.TRINE, "r_as_trine", 120.0),
    AspectData(Aspect.SQUARE, "r_as_square", 90.0),
    AspectData(Aspect.SEPTILE, "r_as_septile", 51.42857143),
    AspectData(Aspect.SEXTILE, "r_as_sextile", 60.0),
    AspectData(Aspect.QUINTILE, "r_as_quintile", 72.0),
    AspectData(Aspect.SEMI_SEXTILE, "r_as_semi_sextile", 30.0),
    AspectData(Aspect.SEMI_SQUARE, "r_as_semi_square", 45.0),
    AspectData(Aspect.SEMI_QUINTILE, "r_as_semi_quintile", 36.0),
    AspectData(Aspect.BI_QUINTILE, "r_as_biquintile", 144.0),
    AspectData(Aspect.INCONJUNCT, "r_as_inconjunct", 150.0),
    AspectData(Aspect.SESQUI_QUADRATE, "r_as_sesquadrate", 135.0),
    AspectData(Aspect.TRI_DECILE, "r_as_tridecile", 108.0),
    AspectData(Aspect.BI_SEPTILE, "r_as_biseptile", 102.85714286),
    AspectData(Aspect.TRI_SEPTILE, "r_as_triseptile", 154.28571429),
    AspectData(Aspect.NOVILE, "r_as_novile", 40.0),
    AspectData(Aspect.BI_NOVILE, "r_as_binovile", 80.0),
    AspectData(Aspect.QUADRA_NOVILE, "r_as_quadranovile", 160.0),
    AspectData(Aspect.UNDECILE, "r_as_undecile", 33.0),
    AspectData(Aspect.CENTILE, "r_as_centile", 100.0),
    AspectData(Aspect.VIGINTILE, "r_as_vigintile", 18.0),
)

_BY_KEY = {item.key: item for item in _ALL_ASPECTS}


def all_aspects() -> list[AspectData]:
    """Return all aspects with their data."""
    return list(_ALL_ASPECTS)


def aspect_data(aspect: Aspect | int) -> AspectData:
    """Return the data for one aspect; raise ValueError for an unknown aspect."""
    return _BY_KEY[Aspect(aspect)]