import pytest

from kundali.core import zodiac


@pytest.mark.parametrize("lon,sign", [
    (0.0, "Aries"), (29.999, "Aries"), (30.0, "Taurus"), (135.0, "Leo"),
    (270.0, "Capricorn"), (359.99, "Pisces"), (360.0, "Aries"),
])
def test_sign_of(lon, sign):
    assert zodiac.sign_of(lon) == sign


@pytest.mark.parametrize("lon,name", [
    (0.0, "Ashwini"), (13.3, "Ashwini"), (13.34, "Bharani"),
    (40.0, "Rohini"),            # Krittika/Rohini boundary belongs to Rohini
    (48.0, "Rohini"), (65.0, "Mrigashira"), (359.99, "Revati"),
])
def test_nakshatra_of(lon, name):
    assert zodiac.nakshatra_of(lon) == name


def test_nakshatras_tile_the_zodiac():
    assert len(zodiac.NAKSHATRAS) == 27
    assert zodiac.NAKSHATRAS[0].start == 0.0
    assert zodiac.NAKSHATRAS[-1].end == pytest.approx(360.0)
    for prev, nxt in zip(zodiac.NAKSHATRAS, zodiac.NAKSHATRAS[1:]):
        assert prev.end == pytest.approx(nxt.start)


def test_nakshatra_lords_cycle_in_dasha_order():
    lords = [n.lord for n in zodiac.NAKSHATRAS]
    assert lords[:9] == lords[9:18] == lords[18:]


def test_nakshatra_info_lord():
    assert zodiac.nakshatra_info(48.0).lord == "Moon"
    assert zodiac.nakshatra_info(200.0).lord == "Jupiter"     # Vishakha


def test_degree_of():
    assert zodiac.degree_of(45.5) == pytest.approx(15.5)
    assert zodiac.degree_of(30.0) == 0.0


@pytest.mark.parametrize("value,expected", [(-30.0, 330.0), (720.0, 0.0), (365.0, 5.0), (-1e-17, 0.0)])
def test_normalize(value, expected):
    result = zodiac.normalize(value)
    assert 0.0 <= result < 360.0
    assert result == pytest.approx(expected)


@pytest.mark.parametrize("planet,asc,house", [(0, 0, 1), (11, 0, 12), (0, 11, 2), (4, 4, 1), (1, 4, 10)])
def test_house_from_signs(planet, asc, house):
    assert zodiac.house_from_signs(planet, asc) == house


def test_format_degrees():
    assert zodiac.format_degrees(15.5) == "15°30'0\""
    assert zodiac.format_degrees(0.0) == "0°0'0\""
    assert zodiac.format_degrees(10.515625) == "10°30'56\""


def test_sanskrit_names_align():
    assert len(zodiac.SIGNS_SANSKRIT) == len(zodiac.ZODIAC_SIGNS) == 12
    assert zodiac.SIGNS_SANSKRIT[zodiac.ZODIAC_SIGNS.index("Leo")] == "Simha"
