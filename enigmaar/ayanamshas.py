"""Ayanamshas for sidereal zodiac calculations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Ayanamsha(IntEnum):
    """Supported ayanamshas; NONE means a tropical zodiac."""

    NONE = 0
    FAGAN = 1
    LAHIRI = 2
    DE_LUCE = 3
    RAMAN = 4
    USHA_SHASHI = 5
    KRISHNAMURTI = 6
    DJWHAL_KHUL = 7
    YUKTESHWAR = 8
    BHASIN = 9
    KUGLER1 = 10
    KUGLER2 = 11
    KUGLER3 = 12
    HUBER = 13
    ETA_PISCIUM = 14
    ALDEBARAN_15_TAU = 15
    HIPPARCHUS = 16
    SASSANIAN = 17
    GALACT_CTR_0_SAG = 18
    J2000 = 19
    J1900 = 20
    B1950 = 21
    SURYA_SIDDHANTA = 22
    SURYA_SIDDHANTA_MEAN_SUN = 23
    ARYABHATA = 24
    ARYABHATA_MEAN_SUN = 25
    SS_REVATI = 26
    SS_CITRA = 27
    TRUE_CITRA = 28
    TRUE_REVATI = 29
    TRUE_PUSHYA = 30
    GALACTIC_CTR_BRAND = 31
    GALACTIC_EQ_IAU1958 = 32
    GALACTIC_EQ = 33
    GALACTIC_EQ_MID_MULA = 34
    SKYDRAM = 35
    TRUE_MULA = 36
    DHRUVA = 37
    ARYABHATA_522 = 38
    BRITTON = 39
    GALACTIC_CTR_0_CAP = 40


@dataclass(frozen=True)
class AyanamshaData:
    """An ayanamsha with its text id and the id used by the ephemeris (-1: none)."""

    key: Ayanamsha
    text_id: str
    calc_id: int


_A = Ayanamsha
_ALL_AYANAMSHAS = (
    AyanamshaData(_A.NONE, "r_ay_none", -1),
    AyanamshaData(_A.FAGAN, "r_ay_fagan", 0),
    AyanamshaData(_A.LAHIRI, "r_ay_lahiri", 1),
    AyanamshaData(_A.DE_LUCE, "r_ay_deluce", 2),
    AyanamshaData(_A.RAMAN, "r_ay_raman", 3),
    AyanamshaData(_A.USHA_SHASHI, "r_ay_shashi", 4),
    AyanamshaData(_A.KRISHNAMURTI, "r_ay_krishnamurti", 5),
    AyanamshaData(_A.DJWHAL_KHUL, "r_ay_djwhalkhul", 6),
    AyanamshaData(_A.YUKTESHWAR, "r_ay_yukteshwar", 7),
    AyanamshaData(_A.BHASIN, "r_ay_bhasin", 8),
    AyanamshaData(_A.KUGLER1, "r_ay_kugler1", 9),
    AyanamshaData(_A.KUGLER2, "r_ay_kugler2", 10),
    AyanamshaData(_A.KUGLER3, "r_ay_kugler3", 11),
    AyanamshaData(_A.HUBER, "r_ay_huber", 12),
    AyanamshaData(_A.ETA_PISCIUM, "r_ay_etapiscium", 13),
    AyanamshaData(_A.ALDEBARAN_15_TAU, "r_ay_aldebaran15tau", 14),
    AyanamshaData(_A.HIPPARCHUS, "r_ay_hipparchus", 15),
    AyanamshaData(_A.SASSANIAN, "r_ay_sassanian", 16),
    AyanamshaData(_A.GALACT_CTR_0_SAG, "r_ay_galactctr0sag", 17),
    AyanamshaData(_A.J2000, "r_ay_j2000", 18),
    AyanamshaData(_A.J1900, "r_ay_j2000", 19),
    AyanamshaData(_A.B1950, "r_ay_b1950", 20),
    AyanamshaData(_A.SURYA_SIDDHANTA, "r_ay_surya_siddhanta", 21),
    AyanamshaData(_A.SURYA_SIDDHANTA_MEAN_SUN, "r_ay_surya_siddhantameansun", 22),
    AyanamshaData(_A.ARYABHATA, "r_ay_aryabhata", 23),
    AyanamshaData(_A.ARYABHATA_MEAN_SUN, "r_ay_aryabhatameansun", 24),
    AyanamshaData(_A.SS_REVATI, "r_ay_ssrevati", 25),
    AyanamshaData(_A.SS_CITRA, "r_ay_sscitra", 26),
    AyanamshaData(_A.TRUE_CITRA, "r_ay_truecitra", 27),
    AyanamshaData(_A.TRUE_REVATI, "r_ay_truerevati", 28),
    AyanamshaData(_A.TRUE_PUSHYA, "r_ay_truepushya", 29),
    AyanamshaData(_A.GALACTIC_CTR_BRAND, "r_ay_galactctr_brand", 30),
    AyanamshaData(_A.GALACTIC_EQ_IAU1958, "r_ay_galactctr_eqiau1958", 31),
    AyanamshaData(_A.GALACTIC_EQ, "r_ay_galactic_eq", 32),
    AyanamshaData(_A.GALACTIC_EQ_MID_MULA, "r_ay_galacticeqmidmula", 33),
    AyanamshaData(_A.SKYDRAM, "r_ay_skydram", 34),
    AyanamshaData(_A.TRUE_MULA, "r_ay_truemula", 35),
    AyanamshaData(_A.DHRUVA, "r_ay_dhruva", 36),
    AyanamshaData(_A.ARYABHATA_522, "r_ay_aryabhata", 37),
    AyanamshaData(_A.BRITTON, "r_ay_britton", 38),
    AyanamshaData(_A.GALACTIC_CTR_0_CAP, "r_ay_galacticctr0cap", 39),
)
del _A

_BY_KEY = {item.key: item for item in _ALL_AYANAMSHAS}


def all_ayanamshas() -> list[AyanamshaData]:
    """Return all ayanamshas with their data."""
    return list(_ALL_AYANAMSHAS)


def ayanamsha_data(ayanamsha: Ayanamsha | int) -> AyanamshaData:
    """Return the data for one ayanamsha; raise ValueError for an unknown one."""
    return _BY_KEY[Ayanamsha(ayanamsha)]