"""Chart points: planets, hypothetical bodies, minor planets and mundane points."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .references import CalculationCat, PointCat


class ChartPoint(IntEnum):
    """Every point that can be placed in a chart."""

    SUN = 0
    MOON = 1
    MERCURY = 2
    VENUS = 3
    MARS = 4
    JUPITER = 5
    SATURN = 6
    URANUS = 7
    NEPTUNE = 8
    PLUTO = 9
    NODE_MEAN = 10
    NODE_TRUE = 11
    APOGEE_MEAN = 12
    APOGEE_CORRECTED = 13
    EARTH = 14
    CHIRON = 15
    PHOLUS = 16
    CERES = 17
    PALLAS = 18
    JUNO = 19
    VESTA = 20
    APOGEE_INTERPOLATED = 21
    CUPIDO_URA = 22
    HADES_URA = 23
    ZEUS_URA = 24
    KRONOS_URA = 25
    APOLLON_URA = 26
    ADMETOS_URA = 27
    VULCANUS_URA = 28
    POSEIDON_URA = 29
    ISIS = 30
    PERSEPHONE_RAM = 31
    HERMES_RAM = 32
    DEMETER_RAM = 33
    ERIS = 34
    NESSUS = 35
    HUYA = 36
    VARUNA = 37
    IXION = 38
    QUAOAR = 39
    HAUMEA = 40
    ORCUS = 41
    MAKEMAKE = 42
    SEDNA = 43
    HYGIEIA = 44
    ASTRAEA = 45
    APOGEE_DUVAL = 46
    PERSEPHONE_CARTERET = 47
    VULCANUS_CARTERET = 48
    ASCENDANT = 49
    MC = 50
    EAST_POINT = 51
    VERTEX = 52
    ECL_NUT = 53


@dataclass(frozen=True)
class ChartPointData:
    """Calculation and presentation data for a chart point.

    ``calc_id`` is the id used by the calculation backend, -1 when there is none.
    """

    key: ChartPoint
    text_id: str
    calc_id: int
    calc_cat: CalculationCat
    point_cat: PointCat
    glyph: str
    alt_glyphs: tuple[str, ...] = ()


_P = ChartPoint
_SE = CalculationCat.SE
_ELEM = CalculationCat.ELEMENTS
_FORM = CalculationCat.FORMULA
_MUND = CalculationCat.MUNDANE
_COMMON = PointCat.COMMON
_ANGLE = PointCat.ANGLE

_ALL_CHART_POINTS = (
    ChartPointData(_P.SUN, "r_cp_sun", 0, _SE, _COMMON, "\ue200", ("\ue300",)),
    ChartPointData(_P.MOON, "r_cp_moon", 1, _SE, _COMMON, "\ue201"),
    ChartPointData(_P.MERCURY, "r_cp_mercury", 2, _SE, _COMMON, "\ue202", ("\ue301",)),
    ChartPointData(_P.VENUS, "r_cp_venus", 3, _SE, _COMMON, "\ue203"),
    ChartPointData(_P.MARS, "r_cp_mars", 4, _SE, _COMMON, "\ue205", ("\ue302",)),
    ChartPointData(_P.JUPITER, "r_cp_jupiter", 5, _SE, _COMMON, "\ue206", ("\ue303",)),
    ChartPointData(_P.SATURN, "r_cp_saturn", 6, _SE, _COMMON, "\ue207", ("\ue304",)),
    ChartPointData(_P.URANUS, "r_cp_uranus", 7, _SE, _COMMON, "\ue208", ("\ue305", "\ue306")),
    ChartPointData(_P.NEPTUNE, "r_cp_neptune", 8, _SE, _COMMON, "\ue209", ("\ue307",)),
    ChartPointData(
        _P.PLUTO,
        "r_cp_pluto",
        9,
        _SE,
        _COMMON,
        "\ue210",
        ("\ue308", "\ue309", "\ue310", "\ue311", "\ue312"),
    ),
    ChartPointData(_P.NODE_MEAN, "r_cp_node_mean", 10, _SE, _COMMON, "\ue523", ("\ue520",)),
    ChartPointData(_P.NODE_TRUE, "r_cp_node_true", 11, _SE, _COMMON, "\ue525", ("\ue520",)),
    ChartPointData(_P.APOGEE_MEAN, "r_cp_apogee_mean", 12, _SE, _COMMON, "\ue530"),
    ChartPointData(_P.APOGEE_CORRECTED, "r_cp_apogee_corrected", 13, _SE, _COMMON, "\ue531"),
    ChartPointData(_P.EARTH, "r_cp_earth", 14, _SE, _COMMON, "\ue204"),
    ChartPointData(_P.CHIRON, "r_cp_chiron", 15, _SE, _COMMON, "\ue400", ("\ue450",)),
    ChartPointData(_P.PHOLUS, "r_cp_pholus", 16, _SE, _COMMON, "\ue402"),
    ChartPointData(_P.CERES, "r_cp_ceres", 17, _SE, _COMMON, "\ue411"),
    ChartPointData(_P.PALLAS, "r_cp_pallas", 18, _SE, _COMMON, "\ue412"),
    ChartPointData(_P.JUNO, "r_cp_juno", 19, _SE, _COMMON, "\ue413"),
    ChartPointData(_P.VESTA, "r_cp_vesta", 20, _SE, _COMMON, "\ue414"),
    ChartPointData(
        _P.APOGEE_INTERPOLATED, "r_cp_apogee_interpolated", 21, _SE, _COMMON, "\ue530"
    ),
    ChartPointData(_P.CUPIDO_URA, "r_cp_cupido_ura", 40, _SE, _COMMON, "\ue600"),
    ChartPointData(_P.HADES_URA, "r_cp_hades_ura", 41, _SE, _COMMON, "\ue601"),
    ChartPointData(_P.ZEUS_URA, "r_cp_zeus_ura", 42, _SE, _COMMON, "\ue602"),
    ChartPointData(_P.KRONOS_URA, "r_cp_kronos_ura", 43, _SE, _COMMON, "\ue603"),
    ChartPointData(_P.APOLLON_URA, "r_cp_apollon_ura", 44, _SE, _COMMON, "\ue604"),
    ChartPointData(_P.ADMETOS_URA, "r_cp_admetos_ura", 45, _SE, _COMMON, "\ue605"),
    ChartPointData(_P.VULCANUS_URA, "r_cp_vulcanus_ura", 46, _SE, _COMMON, "\ue606"),
    ChartPointData(_P.POSEIDON_URA, "r_cp_poseidon_ura", 47, _SE, _COMMON, "\ue607"),
    ChartPointData(_P.ISIS, "r_cp_isis", 48, _SE, _COMMON, "\ue611"),
    ChartPointData(_P.PERSEPHONE_RAM, "r_cp_persephone_ram", 2000, _ELEM, _COMMON, "\ue608"),
    ChartPointData(_P.HERMES_RAM, "r_cp_hermes_ram", 2001, _ELEM, _COMMON, "\ue609"),
    ChartPointData(_P.DEMETER_RAM, "r_cp_demeter_ram", 2002, _ELEM, _COMMON, "\ue610"),
    ChartPointData(
        _P.ERIS,
        "r_cp_eris",
        1009001,
        _SE,
        _COMMON,
        "\ue507",
        ("\ue451", "\ue452", "\ue453", "\ue454", "\ue455", "\ue456"),
    ),
    ChartPointData(_P.NESSUS, "r_cp_nessus", 17066, _SE, _COMMON, "\ue401"),
    ChartPointData(_P.HUYA, "r_cp_huya", 48628, _SE, _COMMON, "\ue417"),
    ChartPointData(_P.VARUNA, "r_cp_varuna", 30000, _SE, _COMMON, "\ue403"),
    ChartPointData(_P.IXION, "r_cp_ixion", 38978, _SE, _COMMON, "\ue404"),
    ChartPointData(_P.QUAOAR, "r_cp_quaoar", 60000, _SE, _COMMON, "\ue405"),
    ChartPointData(_P.HAUMEA, "r_cp_haumea", 146108, _SE, _COMMON, "\ue406"),
    ChartPointData(_P.ORCUS, "r_cp_orcus", 100482, _SE, _COMMON, "\ue409"),
    ChartPointData(_P.MAKEMAKE, "r_cp_makemake", 146472, _SE, _COMMON, "\ue410"),
    ChartPointData(_P.SEDNA, "r_cp_sedna", 100377, _SE, _COMMON, "\ue408"),
    ChartPointData(_P.HYGIEIA, "r_cp_hygieia", 10010, _SE, _COMMON, "\ue415", ("\ue457",)),
    ChartPointData(_P.ASTRAEA, "r_cp_astraea", 10005, _SE, _COMMON, "\ue416"),
    ChartPointData(_P.APOGEE_DUVAL, "r_cp_apogee_duval", 2015, _FORM, _COMMON, "\ue530"),
    ChartPointData(
        _P.PERSEPHONE_CARTERET, "r_cp_persephone_carteret", 2003, _FORM, _COMMON, "\ue612"
    ),
    ChartPointData(
        _P.VULCANUS_CARTERET, "r_cp_vulcanus_carteret", 2004, _FORM, _COMMON, "\ue613"
    ),
    ChartPointData(_P.ASCENDANT, "r_cp_ascendant", 1001, _MUND, _ANGLE, "\ue600", ("\ue550",)),
    ChartPointData(_P.MC, "r_cp_mc", 1002, _MUND, _ANGLE, "\ue501", ("\ue551",)),
    ChartPointData(_P.EAST_POINT, "r_cp_eastpoint", 1003, _MUND, _ANGLE, "\ue502"),
    ChartPointData(_P.VERTEX, "r_cp_vertex", 1004, _MUND, _ANGLE, "\ue503"),
    ChartPointData(_P.ECL_NUT, "", -1, _SE, _COMMON, "\\"),
)
del _P, _SE, _ELEM, _FORM, _MUND, _COMMON, _ANGLE

_BY_KEY = {item.key: item for item in _ALL_CHART_POINTS}


def all_chart_points() -> list[ChartPointData]:
    """Return all chart points with their data."""
    return list(_ALL_CHART_POINTS)


def chart_point_data(point: ChartPoint | int) -> ChartPointData:
    """Return the data for one chart point; raise ValueError for an unknown point."""
    return _BY_KEY[ChartPoint(point)]