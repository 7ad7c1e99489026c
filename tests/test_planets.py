from datetime import date

import pytest

from kundali.core import calc, zodiac
from kundali.core.planets import (
    MEAN_MOTION, PLANET_ORDER, calculate_planets, ketu_from_rahu,
    mean_longitude, personal_variation, planet_position,
)


def test_mean_longitude_at_epoch():
    for name, (base, _) in MEAN_MOTION.items():
        assert mean_longitude(name, calc.J2000) == pytest.approx(base)


def test_mean_longitude_daily_motion():
    assert mean_longitude("Moon", calc.J2000 + 1) - 218.32 == pytest.approx(13.17639648)
    # Rahu regresses
    assert mean_longitude("Rahu", calc.J2000 + 1) < mean_longitude("Rahu", calc.J2000)


@pytest.mark.parametrize("day,month,hour,minute,expected", [
    (15, 6, 14, 30, 14.75),       # 209.5 % 30 = 29.5
    (1, 1, 0, 0, 0.5),
    (10, 2, 10, 0, 10.0),         # 80 % 30 = 20
])
def test_personal_variation(day, month, hour, minute, expected):
    assert personal_variation(day, month, hour, minute) == pytest.approx(expected)


def test_personal_variation_is_bounded():
    for day in range(1, 32):
        for hour in range(24):
            assert 0.0 <= personal_variation(day, 12, hour, 59) < 15.0


def test_planet_position_normalizes_and_assigns_house():
    p = planet_position("Sun", 725.0, asc_sign_index=4)      # 5° Aries, Leo rising
    assert p.longitude == pytest.approx(5.0)
    assert p.sign == "Aries"
    assert p.house == 9


def test_ketu_opposes_rahu():
    rahu = planet_position("Rahu", 63.0, asc_sign_index=4)
    ketu = ketu_from_rahu(rahu)
    assert ketu.longitude == pytest.approx(243.0)
    assert ketu.sign == "Sagittarius"
    assert ketu.house == (rahu.house + 5) % 12 + 1 == 5


def test_calculate_planets():
    jd = calc.julian_day(1990, 6, 15, 14, 30)
    planets = calculate_planets(date(1990, 6, 15), 14, 30, jd, asc_sign_index=9)

    assert tuple(p.name for p in planets) == PLANET_ORDER
    for p in planets:
        assert 0.0 <= p.longitude < 360.0
        assert 1 <= p.house <= 12
        assert p.sign == zodiac.ZODIAC_SIGNS[int(p.longitude // 30)]
        assert p.house == zodiac.house_from_signs(p.sign_index, 9)

    by_name = {p.name: p for p in planets}
    assert (by_name["Ketu"].longitude - by_name["Rahu"].longitude) % 360.0 == pytest.approx(180.0)

    # Mean Sun 83.61° plus 14.75° personal offset
    sun = by_name["Sun"]
    assert sun.longitude == pytest.approx(98.36, abs=0.01)
    assert sun.sign == "Cancer"
    assert sun.nakshatra == "Pushya"


def test_personal_offset_is_shared_by_all_bodies():
    jd = calc.julian_day(1990, 6, 15, 14, 30)
    a = calculate_planets(date(1990, 6, 15), 14, 30, jd, 0)
    b = calculate_planets(date(1990, 6, 15), 14, 31, jd, 0)
    shift = personal_variation(15, 6, 14, 31) - personal_variation(15, 6, 14, 30)
    for before, after in zip(a, b):
        assert zodiac.normalize(after.longitude - before.longitude) == pytest.approx(shift % 360.0, abs=1e-9)


def test_as_dict_fields():
    p = planet_position("Moon", 48.0, asc_sign_index=4)
    assert p.as_dict() == {
        "name": "Moon", "longitude": 48.0, "sign": "Taurus",
        "house": 10, "degree": 18.0, "nakshatra": "Rohini",
    }
    assert p.nakshatra_lord == "Moon"
