"""House systems and their properties."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class HouseSystem(IntEnum):
    """Supported house systems."""

    NONE = 0
    PLACIDUS = 1
    KOCH = 2
    PORPHYRI = 3
    REGIOMONTANUS = 4
    CAMPANUS = 5
    ALCABITIUS = 6
    TOPOCENTRIC = 7
    KRUSINSKI = 8
    APC = 9
    MORIN = 10
    WHOLE_SIGN = 11
    EQUAL_ASC = 12
    EQUAL_MC = 13
    EQUAL_ARIES = 14
    VEHLOW = 15
    AXIAL = 16
    HORIZON = 17
    CARTER = 18
    GAUQUELIN = 19
    SUN_SHINE = 20
    SUN_SHINE_TREINDL = 21
    PULLEN_SD = 22
    PULLEN_SR = 23
    SRIPATI = 24


@dataclass(frozen=True)
class HouseSystemData:
    """Properties of a house system, including its ephemeris code and number of houses."""

    key: HouseSystem
    text_id: str
    se_supported: bool
    code: str
    number: int
    counter_clockwise: bool
    quadrant: bool


_H = HouseSystem
_ALL_HOUSE_SYSTEMS = (
    HouseSystemData(_H.NONE, "r_hs_none", False, "W", 0, False, False),
    HouseSystemData(_H.PLACIDUS, "r_hs_placidus", True, "P", 12, True, True),
    HouseSystemData(_H.KOCH, "r_hs_koch", True, "K", 12, True, True),
    HouseSystemData(_H.PORPHYRI, "r_hs_porphyri", True, "O", 12, True, True),
    HouseSystemData(_H.REGIOMONTANUS, "r_hs_regiomontanus", True, "R", 12, True, True),
    HouseSystemData(_H.CAMPANUS, "r_hs_campanus", True, "C", 12, True, True),
    HouseSystemData(_H.ALCABITIUS, "r_hs_alcabitius", True, "B", 12, True, True),
    HouseSystemData(_H.TOPOCENTRIC, "r_hs_topocentric", True, "T", 12, True, True),
    HouseSystemData(_H.KRUSINSKI, "r_hs_krusinski", True, "U", 12, True, True),
    HouseSystemData(_H.APC, "r_hs_apc", True, "Y", 12, True, True),
    HouseSystemData(_H.MORIN, "r_hs_morin", True, "M", 12, True, False),
    HouseSystemData(_H.WHOLE_SIGN, "r_hs_wholesign", True, "W", 12, True, True),
    HouseSystemData(_H.EQUAL_ASC, "r_hs_equalasc", True, "A", 12, True, False),
    HouseSystemData(_H.EQUAL_MC, "r_hs_equalmc", True, "D", 12, True, False),
    HouseSystemData(_H.EQUAL_ARIES, "r_hs_equalaries", True, "N", 12, True, False),
    HouseSystemData(_H.VEHLOW, "r_hs_vehlow", True, "V", 12, True, False),
    HouseSystemData(_H.AXIAL, "r_hs_axial", True, "X", 12, True, False),
    HouseSystemData(_H.HORIZON, "r_hs_horizon", True, "H", 12, True, False),
    HouseSystemData(_H.CARTER, "r_hs_carter", True, "F", 12, True, False),
    HouseSystemData(_H.GAUQUELIN, "r_hs_gauquelin", True, "G", 36, True, False),
    HouseSystemData(_H.SUN_SHINE, "r_hs_sunshine", True, "i", 12, True, False),
    HouseSystemData(_H.SUN_SHINE_TREINDL, "r_hs_sunshine_treindl", True, "I", 12, True, False),
    HouseSystemData(_H.PULLEN_SD, "r_hs_pullen_sd", True, "L", 12, True, True),
    HouseSystemData(_H.PULLEN_SR, "r_hs_pullen_sr", True, "Q", 12, True, True),
    HouseSystemData(_H.SRIPATI, "r_hs_sripati", True, "S", 12, True, False),
)
del _H

_BY_KEY = {item.key: item for item in _ALL_HOUSE_SYSTEMS}


def all_house_systems() -> list[HouseSystemData]:
    """Return all house systems with their data."""
    return list(_ALL_HOUSE_SYSTEMS)


def house_system_data(system: HouseSystem | int) -> HouseSystemData:
    """Return the data for one house system; raise ValueError for an unknown one."""
    return _BY_KEY[HouseSystem(system)]