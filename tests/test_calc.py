import math
from datetime import date, time

import pytest
import swisseph as swe

from kundali.core import calc
from kundali.errors import ComputationFailure


def test_julian_day_j2000_epoch():
    assert calc.julian_day(2000, 1, 1, 12, 0) == pytest.approx(2451545.0)


def test_julian_day_gregorian_reform_is_contiguous():
    # 4 Oct 1582 (Julian) is followed by 15 Oct 1582 (Gregorian)
    assert calc.julian_day(1582, 10, 4) == pytest.approx(2299159.5)
    assert calc.julian_day(1582, 10, 15) == pytest.approx(2299160.5)


@pytest.mark.parametrize("year,month,day,hour,minute", [
    (1990, 6, 15, 14, 30),
    (1947, 8, 15, 0, 0),
    (2024, 2, 29, 23, 59),
    (1900, 1, 1, 6, 15),
])
def test_julian_day_matches_swisseph(year, month, day, hour, minute):
    expected = swe.julday(year, month, day, hour + minute / 60.0)
    assert calc.julian_day(year, month, day, hour, minute) == pytest.approx(expected, abs=1e-6)


def test_julian_day_minute_step():
    jd1 = calc.julian_day(1990, 6, 15, 14, 30)
    jd2 = calc.julian_day(1990, 6, 15, 14, 31)
    assert jd2 - jd1 == pytest.approx(1 / 1440.0, abs=1e-9)


def test_julian_day_is_monotonic_across_month_and_year_ends():
    instants = [(1999, 12, 31, 23, 59), (2000, 1, 1, 0, 0), (2000, 1, 31, 23, 59),
                (2000, 2, 1, 0, 0), (2000, 2, 29, 12, 0), (2000, 3, 1, 0, 0)]
    jds = [calc.julian_day(*i) for i in instants]
    assert jds == sorted(jds)
    assert len(set(jds)) == len(jds)


def test_parse_time():
    assert calc.parse_time("14:30") == (14, 30)
    assert calc.parse_time(" 07:05 ") == (7, 5)
    assert calc.parse_time("23:59:59") == (23, 59)
    assert calc.parse_time(time(6, 45)) == (6, 45)


@pytest.mark.parametrize("bad", ["24:00", "12:60", "noon", "1230"])
def test_parse_time_rejects_malformed(bad):
    with pytest.raises(ValueError):
        calc.parse_time(bad)


def test_parse_date():
    assert calc.parse_date("1990-06-15") == date(1990, 6, 15)
    assert calc.parse_date(date(1990, 6, 15)) == date(1990, 6, 15)
    with pytest.raises(ValueError):
        calc.parse_date("15/06/1990")


def test_get_julian_day_converts_local_time_to_utc():
    # IST is UTC+5:30
    local = calc.get_julian_day("1990-06-15", "20:00", "Asia/Kolkata")
    utc = calc.get_julian_day("1990-06-15", "14:30")
    assert local == pytest.approx(utc)


def test_to_utc_rolls_back_a_day():
    utc = calc.to_utc(date(1990, 6, 15), 2, 0, "Asia/Kolkata")
    assert (utc.year, utc.month, utc.day, utc.hour, utc.minute) == (1990, 6, 14, 20, 30)


def test_day_fraction():
    assert calc.day_fraction(2451544.5) == pytest.approx(0.0)
    assert calc.day_fraction(2451545.0) == pytest.approx(0.5)


@pytest.mark.parametrize("jd", [
    2451545.0,
    2448058.1041666665,     # 1990-06-15 14:30 UT
    2460000.25,
    2415020.75,
])
def test_sidereal_time_agrees_with_swisseph(jd, angle_diff):
    # GMST at 0h plus the elapsed fraction of the day is the full sidereal time
    ours = calc.local_sidereal_time(jd, 0.0)
    reference = swe.sidtime(jd) * 15.0
    assert angle_diff(ours, reference) < 0.01


def test_local_sidereal_time_adds_east_longitude(angle_diff):
    jd = 2451545.0
    greenwich = calc.local_sidereal_time(jd, 0.0)
    delhi = calc.local_sidereal_time(jd, 77.209)
    assert angle_diff(delhi, (greenwich + 77.209) % 360.0) < 1e-9


def test_obliquity_at_j2000():
    assert calc.obliquity(2451545.0) == pytest.approx(23.4392911)


@pytest.mark.parametrize("lat,lon", [
    (28.6139, 77.2090), (19.0760, 72.8777), (51.5074, -0.1278), (-33.8688, 151.2093), (0.0, 0.0),
])
def test_ascendant_satisfies_tangent_relation(lat, lon):
    jd = calc.julian_day(1990, 6, 15, 14, 30)
    asc = calc.ascendant_longitude(jd, lat, lon)
    assert 0.0 <= asc < 360.0

    lst = math.radians(calc.local_sidereal_time(jd, lon))
    eps = math.radians(calc.obliquity(jd))
    denominator = math.sin(lst) * math.cos(eps) + math.tan(math.radians(lat)) * math.sin(eps)
    assert math.tan(math.radians(asc)) == pytest.approx(-math.cos(lst) / denominator, rel=1e-6)

    # Half-turn correction applies when cos(LST) is positive
    if math.cos(lst) > 0:
        assert 90.0 < asc < 270.0
    else:
        assert asc <= 90.0 or asc >= 270.0


def test_ascendant_for_new_delhi_sample():
    jd = calc.julian_day(1990, 6, 15, 14, 30)
    asc = calc.calculate_ascendant(jd, 28.6139, 77.2090)
    assert not asc.fallback
    assert asc.sign == "Capricorn"
    assert asc.house == 1


@pytest.mark.parametrize("lat", [90.0, -90.0, float("nan")])
def test_ascendant_longitude_raises_at_poles(lat):
    with pytest.raises(ComputationFailure):
        calc.ascendant_longitude(2451545.0, lat, 0.0)


def test_calculate_ascendant_falls_back_to_leo_15(caplog):
    asc = calc.calculate_ascendant(2451545.0, 90.0, 0.0)
    assert asc is calc.FALLBACK_ASCENDANT
    assert asc.fallback
    assert asc.longitude == 135.0
    assert asc.label() == "Leo - 15°"
    assert "Ascendant fallback" in caplog.text


def test_ascendant_label_floors_degree():
    assert calc.Ascendant(longitude=174.99).label() == "Virgo - 24°"
    assert calc.Ascendant(longitude=0.0).label() == "Aries - 0°"
