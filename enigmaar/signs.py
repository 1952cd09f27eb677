"""Zodiac signs and their presentation data."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Sign(IntEnum):
    """A zodiacal sign."""

    ARIES = 0
    TAURUS = 1
    GEMINI = 2
    CANCER = 3
    LEO = 4
    VIRGO = 5
    LIBRA = 6
    SCORPIO = 7
    SAGITTARIUS = 8
    CAPRICORN = 9
    AQUARIUS = 10
    PISCES = 11


@dataclass(frozen=True)
class SignData:
    """Presentation data for a sign: its 1-based index, text id and glyphs."""

    key: Sign
    index: int
    text_id: str
    glyph: str
    alt_glyphs: tuple[str, ...] = ()


_ALL_SIGNS = (
    SignData(Sign.ARIES, 1, "r_si_aries", "\ue000"),
    SignData(Sign.TAURUS, 2, "r_si_taurus", "\ue001"),
    SignData(Sign.GEMINI, 3, "r_si_gemini", "\ue002"),
    SignData(Sign.CANCER, 4, "r_si_cancer", "\ue003"),
    SignData(Sign.LEO, 5, "r_si_leo", "\ue004"),
    SignData(Sign.VIRGO, 6, "r_si_virgo", "\ue005"),
    SignData(Sign.LIBRA, 7, "r_si_libra", "\ue006"),
    SignData(Sign.SCORPIO, 8, "r_si_scorpio", "\ue007"),
    SignData(Sign.SAGITTARIUS, 9, "r_si_sagittarius", "\ue008"),
    SignData(Sign.CAPRICORN, 10, "r_si_capricorn", "\ue009", ("\ue012",)),
    SignData(Sign.AQUARIUS, 11, "r_si_aquarius", "\ue010"),
    SignData(Sign.PISCES, 12, "r_si_pisces", "\ue011"),
)

_BY_KEY = {item.key: item for item in _ALL_SIGNS}


def all_signs() -> list[SignData]:
    """Return all zodiac signs with their presentation data."""
    return list(_ALL_SIGNS)


def sign_data(sign: Sign | int) -> SignData:
    """Return the data for one sign; raise ValueError for an unknown sign."""
    return _BY_KEY[Sign(sign)]