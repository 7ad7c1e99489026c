"""
Kundali assembly: birth details in, chart summary out.

Missing birth fields raise ValidationError. Any failure after validation is
logged and answered with FALLBACK_KUNDALI so callers always get a chart.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Mapping, Optional, Tuple, Union

from tabulate import tabulate

from kundali import settings
from kundali.core import aspects, calc, dasha
from kundali.core.planets import PLANET_ORDER, PlanetPosition, calculate_planets, ketu_from_rahu, planet_position
from kundali.core.zodiac import format_degrees
from kundali.errors import ValidationError

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('date', 'time', 'place')


# --- Data Classes ---

@dataclass(frozen=True)
class BirthDetails:
    date: object = None                 # datetime.date or 'YYYY-MM-DD'
    time: object = None                 # 'HH:MM' (local clock) or datetime.time
    place: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping) -> 'BirthDetails':
        return cls(
            date=data.get('date'),
            time=data.get('time'),
            place=data.get('place'),
            latitude=data.get('latitude'),
            longitude=data.get('longitude'),
            timezone=data.get('timezone'),
        )

    @property
    def coordinates(self) -> Tuple[float, float]:
        lat = settings.DEFAULT_LATITUDE if self.latitude is None else float(self.latitude)
        lon = settings.DEFAULT_LONGITUDE if self.longitude is None else float(self.longitude)
        return lat, lon


@dataclass(frozen=True)
class KundaliData:
    ascendant: str
    moon_sign: str
    sun_sign: str
    current_dasha: str
    planets: Tuple[PlanetPosition, ...]
    strong_houses: Tuple[int, ...]
    weak_houses: Tuple[int, ...]

    def planet(self, name: str) -> PlanetPosition:
        for p in self.planets:
            if p.name == name:
                return p
        raise KeyError(name)

    def as_dict(self) -> Dict:
        """Serialised with the field names UI consumers expect."""
        return {
            'ascendant': self.ascendant,
            'moonSign': self.moon_sign,
            'sunSign': self.sun_sign,
            'currentDasha': self.current_dasha,
            'planets': [p.as_dict() for p in self.planets],
            'strongHouses': list(self.strong_houses),
            'weakHouses': list(self.weak_houses),
        }


@dataclass(frozen=True)
class Computed:
    data: KundaliData
    is_fallback = False


@dataclass(frozen=True)
class Fallback:
    data: KundaliData
    reason: str = field(default='', compare=False)
    is_fallback = True


ChartResult = Union[Computed, Fallback]


# --- Fallback chart (Leo rising) ---

_FALLBACK_ASC_INDEX = calc.FALLBACK_ASCENDANT.sign_index
# sign offset * 30 + degree
_FALLBACK_LONGITUDES = {
    'Sun': 65.0,        # Gemini 5°, Mrigashira
    'Moon': 48.0,       # Taurus 18°, Rohini
    'Mercury': 65.0,    # Gemini 5°
    'Venus': 57.0,      # Taurus 27°
    'Mars': 22.0,       # Aries 22°
    'Jupiter': 347.0,   # Pisces 17°
    'Saturn': 282.0,    # Capricorn 12°
    'Rahu': 63.0,       # Gemini 3°
}


def _fallback_planets() -> Tuple[PlanetPosition, ...]:
    planets = [planet_position(name, lon, _FALLBACK_ASC_INDEX) for name, lon in _FALLBACK_LONGITUDES.items()]
    planets.append(ketu_from_rahu(planets[-1]))
    return tuple(planets)


FALLBACK_KUNDALI = KundaliData(
    ascendant='Leo',
    moon_sign='Taurus - Rohini Nakshatra',
    sun_sign='Gemini - Mrigashira Nakshatra',
    current_dasha='Jupiter Mahadasha (2020-2036)',
    planets=_fallback_planets(),
    strong_houses=(1, 5, 9),
    weak_houses=(6, 8, 12),
)


# --- Assembly ---

def _is_missing(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate(details: BirthDetails) -> None:
    missing = [name for name in REQUIRED_FIELDS if _is_missing(getattr(details, name))]
    if missing:
        raise ValidationError(missing)


def _as_birth_details(details: Union[BirthDetails, Mapping, None]) -> BirthDetails:
    if isinstance(details, BirthDetails):
        return details
    return BirthDetails.from_mapping(details or {})


def _sign_summary(planet: PlanetPosition) -> str:
    return f"{planet.sign} - {planet.nakshatra} Nakshatra"


def _build_chart(details: BirthDetails, today: Optional[date]) -> KundaliData:
    birth_date = calc.parse_date(details.date)
    hour, minute = calc.parse_time(details.time)
    latitude, longitude = details.coordinates
    timezone = details.timezone or settings.DEFAULT_TIMEZONE

    jd = calc.get_julian_day(birth_date, details.time, timezone)

    ascendant = calc.calculate_ascendant(jd, latitude, longitude)
    planets = calculate_planets(birth_date, hour, minute, jd, ascendant.sign_index)
    by_name = {p.name: p for p in planets}

    period = dasha.current_dasha(birth_date, today)
    strong, weak = aspects.calculate_house_strengths(planets)

    return KundaliData(
        ascendant=ascendant.label(),
        moon_sign=_sign_summary(by_name['Moon']),
        sun_sign=_sign_summary(by_name['Sun']),
        current_dasha=period.label,
        planets=tuple(by_name[name] for name in PLANET_ORDER),
        strong_houses=tuple(strong),
        weak_houses=tuple(weak),
    )


def calculate_kundali(details: Union[BirthDetails, Mapping, None], today: Optional[date] = None) -> ChartResult:
    """Tagged chart result: Computed on success, Fallback on internal failure."""
    details = _as_birth_details(details)
    validate(details)

    try:
        data = _build_chart(details, today)
    except Exception as exc:
        logger.exception("Error calculating Kundali for %s %s (%s)", details.date, details.time, details.place)
        return Fallback(FALLBACK_KUNDALI, reason=str(exc))

    logger.debug("Kundali computed for %s: %s", details.place, data.ascendant)
    return Computed(data)


def compute_kundali(details: Union[BirthDetails, Mapping, None], today: Optional[date] = None) -> KundaliData:
    """Chart for the given birth details.

    Raises ValidationError when date, time or place is missing; otherwise
    always returns a chart (possibly FALLBACK_KUNDALI).
    """
    return calculate_kundali(details, today).data


# --- Output Formatting ---

def format_chart_display(data: KundaliData) -> str:
    """Format chart data for display."""
    output = ["=" * 60, "VEDIC BIRTH CHART (Kundali)", "=" * 60]
    output += [
        f"\nAscendant (Lagna): {data.ascendant}",
        f"Moon Sign:         {data.moon_sign}",
        f"Sun Sign:          {data.sun_sign}",
        f"Current Dasha:     {data.current_dasha}",
        "\nPlanetary Positions:",
    ]

    rows: List[list] = [
        [p.name, p.sign, format_degrees(p.degree), p.house,
         f"{p.nakshatra} ({p.nakshatra_lord})", f"{p.longitude:.4f}"]
        for p in data.planets
    ]
    output.append(tabulate(rows, headers=['Planet', 'Rasi', 'Degrees', 'House', 'Nakshatra (Lord)', 'Longitude'],
                           tablefmt='fancy_grid'))

    output += [
        f"\nStrong Houses: {', '.join(map(str, data.strong_houses))}",
        f"Weak Houses:   {', '.join(map(str, data.weak_houses))}",
        "=" * 60,
    ]
    return "\n".join(output)
