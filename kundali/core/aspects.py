from types import MappingProxyType
from typing import Dict, Iterable, List, Tuple

from tabulate import tabulate

from kundali.core.planets import PlanetPosition

# Natural strength of each graha
PLANET_WEIGHTS = MappingProxyType({
    'Jupiter': 5.0,
    'Moon': 4.0,
    'Venus': 4.0,
    'Sun': 3.5,
    'Mercury': 3.5,
    'Mars': 3.0,
    'Saturn': 2.5,
    'Rahu': 2.0,
    'Ketu': 1.5,
})

# Every graha casts full drishti on the 7th house from itself
FULL_ASPECT = 7
# Additional drishti (counted as "Nth house from the planet")
SPECIAL_ASPECTS = MappingProxyType({
    'Jupiter': (5, 9),
    'Mars': (4, 8),
    'Saturn': (3, 10),
})

OPPOSITION_SHARE = 2.0
SPECIAL_ASPECT_SHARE = 2.5
EXALTATION_BONUS = 0.5
DEBILITATION_PENALTY = 0.4

# planet -> (exaltation sign, debilitation sign)
DIGNITY = MappingProxyType({
    'Sun': ('Aries', 'Libra'),
    'Moon': ('Taurus', 'Scorpio'),
    'Mercury': ('Virgo', 'Pisces'),
    'Venus': ('Pisces', 'Virgo'),
    'Mars': ('Capricorn', 'Cancer'),
    'Jupiter': ('Cancer', 'Capricorn'),
    'Saturn': ('Libra', 'Aries'),
    'Rahu': ('Taurus', 'Scorpio'),
    'Ketu': ('Scorpio', 'Taurus'),
})

HOUSES = tuple(range(1, 13))
RANKED_COUNT = 3


def house_ahead(house: int, nth: int) -> int:
    """The nth house counted from `house` (the house itself is the 1st)."""
    return ((house + nth - 1) % 12) or 12


def aspected_houses(planet_name: str, house: int) -> List[int]:
    """Houses receiving drishti from a planet, 7th first."""
    targets = [house_ahead(house, FULL_ASPECT)]
    for nth in SPECIAL_ASPECTS.get(planet_name, ()):
        targets.append(house_ahead(house, nth))
    return targets


def dignity_of(planet_name: str, sign: str) -> str:
    exalted, debilitated = DIGNITY[planet_name]
    if sign == exalted:
        return 'exalted'
    if sign == debilitated:
        return 'debilitated'
    return 'neutral'


def house_scores(planets: Iterable[PlanetPosition]) -> Dict[int, float]:
    """Weighted occupancy + drishti + dignity score for each house."""
    scores = {house: 0.0 for house in HOUSES}

    for planet in planets:
        weight = PLANET_WEIGHTS[planet.name]
        scores[planet.house] += weight
        scores[house_ahead(planet.house, FULL_ASPECT)] += weight / OPPOSITION_SHARE

        for nth in SPECIAL_ASPECTS.get(planet.name, ()):
            scores[house_ahead(planet.house, nth)] += weight / SPECIAL_ASPECT_SHARE

        dignity = dignity_of(planet.name, planet.sign)
        if dignity == 'exalted':
            scores[planet.house] += weight * EXALTATION_BONUS
        elif dignity == 'debilitated':
            scores[planet.house] -= weight * DEBILITATION_PENALTY

    return scores


def rank_houses(scores: Dict[int, float]) -> Tuple[List[int], List[int]]:
    """Top 3 (strongest first) and bottom 3 (weakest first) houses.

    sorted() is stable, so equal scores keep natural house order.
    """
    ranked = sorted(HOUSES, key=lambda house: scores[house], reverse=True)
    strong = ranked[:RANKED_COUNT]
    weak = list(reversed(ranked[-RANKED_COUNT:]))
    return strong, weak


def calculate_house_strengths(planets: Iterable[PlanetPosition]) -> Tuple[List[int], List[int]]:
    return rank_houses(house_scores(planets))


def aspect_table(planets: Iterable[PlanetPosition]) -> List[Dict]:
    """Drishti cast by each planet, for display."""
    rows = []
    for planet in planets:
        nths = (FULL_ASPECT,) + SPECIAL_ASPECTS.get(planet.name, ())
        rows.append({
            'Planet': planet.name,
            'House': planet.house,
            'Aspect Houses': ', '.join(map(str, nths)),
            'Houses Affected': ', '.join(map(str, aspected_houses(planet.name, planet.house))),
        })
    return rows


def format_aspect_table(planets: Iterable[PlanetPosition], scores: Dict[int, float] = None) -> str:
    """Aspect listing (and optional house scores) as fancy_grid tables."""
    rows = aspect_table(planets)
    if not rows:
        return "No aspects found."

    output = [tabulate([list(r.values()) for r in rows],
                       headers=list(rows[0].keys()), tablefmt='fancy_grid')]
    if scores:
        output.append(tabulate([[house, round(scores[house], 2)] for house in HOUSES],
                               headers=['House', 'Strength'], tablefmt='fancy_grid'))
    return "\n".join(output)
