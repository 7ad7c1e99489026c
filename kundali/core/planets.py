"""
Approximate planetary longitudes from linear mean-motion models.

Each body advances at a fixed rate from its J2000.0 mean longitude. A birth
specific offset (the same for every body) is then added. Ketu is not modelled;
it always sits opposite Rahu.
"""

from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Dict, List

from kundali.core import zodiac
from kundali.core.calc import J2000

PLANET_ORDER = ('Sun', 'Moon', 'Mercury', 'Venus', 'Mars', 'Jupiter', 'Saturn', 'Rahu', 'Ketu')

# (mean longitude at J2000.0 in degrees, mean daily motion in degrees/day)
MEAN_MOTION = MappingProxyType({
    'Sun':     (280.46, 0.9856474),
    'Moon':    (218.32, 13.17639648),
    'Mercury': (252.25, 4.0923344368),
    'Venus':   (181.98, 1.6021302244),
    'Mars':    (355.43, 0.5240207766),
    'Jupiter': (34.35, 0.0830853001),
    'Saturn':  (50.08, 0.0334442282),
    'Rahu':    (125.04, -0.0529538083),   # nodes regress
})

MAX_PERSONAL_VARIATION = 15.0


@dataclass(frozen=True)
class PlanetPosition:
    name: str
    longitude: float           # 0-360
    house: int                 # 1-12 (whole-sign house)

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

    @property
    def nakshatra_lord(self) -> str:
        return zodiac.nakshatra_info(self.longitude).lord

    def as_dict(self) -> Dict:
        return {
            'name': self.name,
            'longitude': self.longitude,
            'sign': self.sign,
            'house': self.house,
            'degree': self.degree,
            'nakshatra': self.nakshatra,
        }


def mean_longitude(planet_name: str, jd: float) -> float:
    base, rate = MEAN_MOTION[planet_name]
    return base + rate * (jd - J2000)


def personal_variation(day: int, month: int, hour: int, minute: int) -> float:
    """Birth-specific offset (0-15°) shared by every body of one chart."""
    personal_factor = ((day + month * 30 + hour + minute / 60.0) % 30) / 30.0
    return MAX_PERSONAL_VARIATION * personal_factor


def planet_position(name: str, longitude: float, asc_sign_index: int) -> PlanetPosition:
    longitude = zodiac.normalize(longitude)
    house = zodiac.house_from_signs(zodiac.sign_index(longitude), asc_sign_index)
    return PlanetPosition(name=name, longitude=longitude, house=house)


def ketu_from_rahu(rahu: PlanetPosition) -> PlanetPosition:
    return PlanetPosition(
        name='Ketu',
        longitude=zodiac.normalize(rahu.longitude + 180.0),
        house=((rahu.house + 5) % 12) + 1,
    )


def calculate_planets(birth_date: date, hour: int, minute: int, jd: float,
                      asc_sign_index: int) -> List[PlanetPosition]:
    """Positions of the 9 grahas in PLANET_ORDER."""
    variation = personal_variation(birth_date.day, birth_date.month, hour, minute)

    planets = []
    for name in MEAN_MOTION:
        longitude = mean_longitude(name, jd) + variation
        planets.append(planet_position(name, longitude, asc_sign_index))

    planets.append(ketu_from_rahu(planets[-1]))
    return planets
