"""
Vimshottari Dasha periods.

The starting mahadasha is picked from a birth-date seed mapped onto the
nakshatra lords, rather than from the Moon's actual nakshatra.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from types import MappingProxyType
from typing import List, Optional

from kundali.core import zodiac

# Vimshottari Dasha periods (in years), in cycle order
DASHA_SEQUENCE = (
    ('Ketu', 7), ('Venus', 20), ('Sun', 6), ('Moon', 10), ('Mars', 7),
    ('Rahu', 18), ('Jupiter', 16), ('Saturn', 19), ('Mercury', 17),
)
DASHA_ORDER = tuple(lord for lord, _ in DASHA_SEQUENCE)
DASHA_YEARS = MappingProxyType(dict(DASHA_SEQUENCE))
CYCLE_YEARS = sum(DASHA_YEARS.values())   # 120

DAYS_PER_YEAR = 365.25


@dataclass(frozen=True)
class DashaPeriod:
    lord: str
    duration_years: int
    start_year: int
    end_year: int

    @property
    def label(self) -> str:
        return f"{self.lord} Mahadasha ({self.start_year}-{self.end_year})"


@dataclass(frozen=True)
class AntardashaPeriod:
    lord: str
    start_date: date
    end_date: date
    duration_years: float


def dasha_seed(birth_date: date) -> int:
    return birth_date.day + birth_date.month * 30 + birth_date.year % 100


def starting_lord_index(birth_date: date) -> int:
    """Index into DASHA_ORDER of the mahadasha running at birth."""
    nakshatra = zodiac.NAKSHATRAS[dasha_seed(birth_date) % 27]
    return DASHA_ORDER.index(nakshatra.lord)


def years_passed(birth_date: date, today: date) -> int:
    """Completed years between birth and today."""
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def current_dasha(birth_date: date, today: Optional[date] = None) -> DashaPeriod:
    """Mahadasha running on `today` (defaults to the current date)."""
    if today is None:
        today = date.today()

    elapsed = max(years_passed(birth_date, today), 0)
    cycles, position = divmod(elapsed, CYCLE_YEARS)
    start = starting_lord_index(birth_date)

    accumulated = 0
    for offset in range(len(DASHA_SEQUENCE)):
        lord, duration = DASHA_SEQUENCE[(start + offset) % len(DASHA_SEQUENCE)]
        if accumulated + duration > position:
            break
        accumulated += duration

    start_year = birth_date.year + cycles * CYCLE_YEARS + accumulated
    return DashaPeriod(lord=lord, duration_years=duration,
                       start_year=start_year, end_year=start_year + duration)


def mahadasha_timeline(birth_date: date) -> List[DashaPeriod]:
    """One full cycle of mahadashas beginning at birth."""
    start = starting_lord_index(birth_date)
    year = birth_date.year
    periods = []
    for offset in range(len(DASHA_SEQUENCE)):
        lord, duration = DASHA_SEQUENCE[(start + offset) % len(DASHA_SEQUENCE)]
        periods.append(DashaPeriod(lord, duration, year, year + duration))
        year += duration
    return periods


def antardashas(period: DashaPeriod) -> List[AntardashaPeriod]:
    """Sub-periods of a mahadasha, starting with its own lord."""
    start_idx = DASHA_ORDER.index(period.lord)
    current = date(period.start_year, 1, 1)

    sub_periods = []
    for i in range(len(DASHA_ORDER)):
        lord = DASHA_ORDER[(start_idx + i) % len(DASHA_ORDER)]
        # Antardasha duration = (Antara years x Maha years) / 120
        years = period.duration_years * DASHA_YEARS[lord] / CYCLE_YEARS
        end = current + timedelta(days=years * DAYS_PER_YEAR)
        sub_periods.append(AntardashaPeriod(lord, current, end, years))
        current = end
    return sub_periods


def current_antardasha(birth_date: date, today: Optional[date] = None) -> AntardashaPeriod:
    if today is None:
        today = date.today()
    sub_periods = antardashas(current_dasha(birth_date, today))
    for sub in sub_periods:
        if sub.start_date <= today < sub.end_date:
            return sub
    # Whole-year mahadasha bounds can leave today just outside the day-level grid
    return sub_periods[0] if today < sub_periods[0].start_date else sub_periods[-1]
