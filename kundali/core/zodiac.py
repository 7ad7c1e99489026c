"""
Zodiac and nakshatra lookup tables.

Everything here is a pure function of an ecliptic longitude in degrees.
"""

import math
from typing import NamedTuple

# Zodiac signs (Rasis)
ZODIAC_SIGNS = (
    'Aries', 'Taurus', 'Gemini', 'Cancer', 'Leo', 'Virgo',
    'Libra', 'Scorpio', 'Sagittarius', 'Capricorn', 'Aquarius', 'Pisces'
)

SIGNS_SANSKRIT = (
    'Mesha', 'Vrishabha', 'Mithuna', 'Karka', 'Simha', 'Kanya',
    'Tula', 'Vrishchika', 'Dhanu', 'Makara', 'Kumbha', 'Meena'
)

NAKSHATRA_SPAN = 360.0 / 27.0   # 13°20'


class Nakshatra(NamedTuple):
    name: str
    lord: str
    start: float
    end: float


_NAKSHATRA_NAMES = (
    ('Ashwini', 'Ketu'), ('Bharani', 'Venus'), ('Krittika', 'Sun'),
    ('Rohini', 'Moon'), ('Mrigashira', 'Mars'), ('Ardra', 'Rahu'),
    ('Punarvasu', 'Jupiter'), ('Pushya', 'Saturn'), ('Ashlesha', 'Mercury'),
    ('Magha', 'Ketu'), ('Purva Phalguni', 'Venus'), ('Uttara Phalguni', 'Sun'),
    ('Hasta', 'Moon'), ('Chitra', 'Mars'), ('Swati', 'Rahu'),
    ('Vishakha', 'Jupiter'), ('Anuradha', 'Saturn'), ('Jyeshtha', 'Mercury'),
    ('Mula', 'Ketu'), ('Purva Ashadha', 'Venus'), ('Uttara Ashadha', 'Sun'),
    ('Shravana', 'Moon'), ('Dhanishta', 'Mars'), ('Shatabhisha', 'Rahu'),
    ('Purva Bhadrapada', 'Jupiter'), ('Uttara Bhadrapada', 'Saturn'), ('Revati', 'Mercury'),
)

# 27 lunar mansions, each [start, end) in degrees from Aries 0°
NAKSHATRAS = tuple(
    Nakshatra(name, lord, i * NAKSHATRA_SPAN, (i + 1) * NAKSHATRA_SPAN)
    for i, (name, lord) in enumerate(_NAKSHATRA_NAMES)
)


def normalize(longitude: float) -> float:
    """Wrap a longitude into [0, 360)."""
    value = longitude % 360.0
    # -1e-17 % 360 rounds up to 360.0
    return 0.0 if value >= 360.0 else value


def sign_index(longitude: float) -> int:
    return math.floor(longitude / 30.0) % 12


def sign_of(longitude: float) -> str:
    return ZODIAC_SIGNS[sign_index(longitude)]


def degree_of(longitude: float) -> float:
    """Degrees travelled inside the current sign (0-30)."""
    return longitude % 30.0


def nakshatra_index(longitude: float) -> int:
    return math.floor(longitude * 27 / 360.0) % 27


def nakshatra_info(longitude: float) -> Nakshatra:
    return NAKSHATRAS[nakshatra_index(longitude)]


def nakshatra_of(longitude: float) -> str:
    return nakshatra_info(longitude).name


def house_from_signs(planet_sign_index: int, asc_sign_index: int) -> int:
    """Whole-sign house (1-12) counted from the ascendant's sign."""
    return ((planet_sign_index - asc_sign_index + 12) % 12) + 1


def format_degrees(degrees: float) -> str:
    """Render decimal degrees as D°M'S"."""
    whole = math.floor(degrees)
    minutes_float = (degrees - whole) * 60
    minutes = math.floor(minutes_float)
    seconds = math.floor((minutes_float - minutes) * 60)
    return f"{whole}°{minutes}'{seconds}\""
