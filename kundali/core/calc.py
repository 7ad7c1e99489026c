"""
Time keeping and ascendant (Lagna) calculation.

Julian Day -> Greenwich Mean Sidereal Time -> Local Sidereal Time -> ascendant,
using closed-form approximations rather than a full ephemeris.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, time

import pytz

from kundali.core import zodiac
from kundali.errors import ComputationFailure

logger = logging.getLogger(__name__)

J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0

# Julian -> Gregorian calendar reform
GREGORIAN_START = (1582, 10, 15)

# Returned whenever the ascendant cannot be solved
FALLBACK_ASCENDANT_SIGN = 'Leo'
FALLBACK_ASCENDANT_DEGREE = 15.0


@dataclass(frozen=True)
class Ascendant:
    longitude: float
    fallback: bool = False

    house = 1

    @property
    def sign(self) -> str:
        return zodiac.sign_of(self.longitude)

    @property
    def sign_index(self) -> int:
        return zodiac.sign_index(self.longitude)

    @property
    def degree(self) -> float:
        return zodiac.degree_of(self.longitude)

    @property
    def nakshatra(self) -> str:
        return zodiac.nakshatra_of(self.longitude)

    def label(self) -> str:
        """Display form used in chart summaries, e.g. 'Virgo - 12°'."""
        return f"{self.sign} - {math.floor(self.degree)}°"


FALLBACK_ASCENDANT = Ascendant(
    longitude=zodiac.ZODIAC_SIGNS.index(FALLBACK_ASCENDANT_SIGN) * 30.0 + FALLBACK_ASCENDANT_DEGREE,
    fallback=True,
)


# --- Calendar ---

def parse_time(time_value):
    """Return (hour, minute) from an 'HH:MM' string or a time object."""
    if isinstance(time_value, time):
        return time_value.hour, time_value.minute
    hour_str, minute_str = str(time_value).strip().split(':')[:2]
    hour, minute = int(hour_str), int(minute_str)
    if not (0 <= hour < 24 and 0 <= minute < 60):
        raise ValueError(f"Invalid clock time: {time_value!r}")
    return hour, minute


def parse_date(date_value) -> date:
    if isinstance(date_value, datetime):
        return date_value.date()
    if isinstance(date_value, date):
        return date_value
    return datetime.strptime(str(date_value).strip(), "%Y-%m-%d").date()


def julian_day(year: int, month: int, day: int, hour: int = 0, minute: float = 0) -> float:
    """Julian Day for a UT calendar date and clock time."""
    y, m = year, month
    if m <= 2:
        y -= 1
        m += 12

    day_fraction = day + (hour + minute / 60.0) / 24.0
    jd = math.floor(365.25 * y) + math.floor(30.6001 * (m + 1)) + day_fraction + 1720994.5

    if (year, month, day) >= GREGORIAN_START:
        a = math.floor(y / 100)
        jd += 2 - a + math.floor(a / 4)
    return jd


def to_utc(birth_date: date, hour: int, minute: int, timezone: str = 'UTC') -> datetime:
    """Localize a birth clock time and convert it to UTC."""
    dt = datetime(birth_date.year, birth_date.month, birth_date.day, hour, minute)
    if timezone == 'UTC':
        return pytz.UTC.localize(dt)
    local_tz = pytz.timezone(timezone)
    return local_tz.localize(dt).astimezone(pytz.UTC)


def get_julian_day(date_value, time_value, timezone='UTC') -> float:
    """Convert birth date and local time to Julian Day (UT)."""
    hour, minute = parse_time(time_value)
    utc = to_utc(parse_date(date_value), hour, minute, timezone)
    return julian_day(utc.year, utc.month, utc.day, utc.hour, utc.minute)


# --- Sidereal time ---

def julian_centuries(jd: float) -> float:
    """Julian centuries since J2000.0."""
    return (jd - J2000) / DAYS_PER_CENTURY


def day_fraction(jd: float) -> float:
    """Fraction of the UT day elapsed since midnight (JD days begin at noon)."""
    return (jd + 0.5) % 1.0


def greenwich_mean_sidereal_time(jd: float) -> float:
    """GMST in degrees, [0, 360)."""
    t = julian_centuries(jd)
    gmst = 100.46061837 + 36000.770053608 * t + 0.000387933 * t ** 2 - t ** 3 / 38710000.0
    return zodiac.normalize(gmst)


def local_sidereal_time(jd: float, longitude: float) -> float:
    gmst = greenwich_mean_sidereal_time(jd)
    return zodiac.normalize(gmst + day_fraction(jd) * 360.0 + longitude)


def obliquity(jd: float) -> float:
    """Mean obliquity of the ecliptic in degrees."""
    t = julian_centuries(jd)
    return 23.4392911 - 0.0130042 * t - 0.00000164 * t ** 2 + 0.000000503 * t ** 3


# --- Ascendant ---

def ascendant_longitude(jd: float, latitude: float, longitude: float) -> float:
    """Ecliptic longitude rising on the eastern horizon.

    Raises ComputationFailure when the geometry degenerates (poles, or a zero
    denominator in the tangent formula).
    """
    if not math.isfinite(latitude) or abs(latitude) >= 90.0:
        raise ComputationFailure(f"Ascendant undefined at latitude {latitude}")

    lst = math.radians(local_sidereal_time(jd, longitude))
    eps = math.radians(obliquity(jd))
    phi = math.radians(latitude)

    denominator = math.sin(lst) * math.cos(eps) + math.tan(phi) * math.sin(eps)
    if denominator == 0:
        raise ComputationFailure("Ascendant denominator vanished")

    asc = math.degrees(math.atan(-math.cos(lst) / denominator))
    if math.cos(lst) > 0:
        asc += 180.0
    return zodiac.normalize(asc)


def calculate_ascendant(jd: float, latitude: float, longitude: float) -> Ascendant:
    """Solve the ascendant; never raises, falls back to Leo 15°."""
    try:
        return Ascendant(longitude=ascendant_longitude(jd, latitude, longitude))
    except Exception as exc:
        logger.warning("Ascendant fallback used (lat=%s, lon=%s): %s", latitude, longitude, exc)
        return FALLBACK_ASCENDANT
