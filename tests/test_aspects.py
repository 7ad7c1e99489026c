import pytest

from kundali.core import aspects
from kundali.core.planets import PlanetPosition


@pytest.mark.parametrize("house,nth,expected", [(1, 7, 7), (6, 7, 12), (7, 7, 1), (12, 5, 4), (10, 10, 7)])
def test_house_ahead(house, nth, expected):
    assert aspects.house_ahead(house, nth) == expected


@pytest.mark.parametrize("planet,expected", [
    ("Jupiter", [7, 5, 9]), ("Mars", [7, 4, 8]), ("Saturn", [7, 3, 10]), ("Sun", [7]), ("Ketu", [7]),
])
def test_aspected_houses_from_first(planet, expected):
    assert aspects.aspected_houses(planet, 1) == expected


def test_neutral_jupiter_scores():
    # 10° Aries is neither exaltation nor debilitation for Jupiter
    scores = aspects.house_scores([PlanetPosition("Jupiter", 10.0, 1)])
    assert scores[1] == pytest.approx(5.0)
    assert scores[7] == pytest.approx(2.5)
    assert scores[5] == pytest.approx(2.0)
    assert scores[9] == pytest.approx(2.0)
    assert sum(scores.values()) == pytest.approx(11.5)


def test_exalted_sun_adds_half_weight():
    scores = aspects.house_scores([PlanetPosition("Sun", 10.0, 1)])
    assert scores[1] == pytest.approx(3.5 * 1.5)
    assert scores[7] == pytest.approx(1.75)


def test_debilitated_saturn_loses_weight():
    scores = aspects.house_scores([PlanetPosition("Saturn", 10.0, 1)])
    assert scores[1] == pytest.approx(1.5)
    assert scores[7] == pytest.approx(1.25)
    assert scores[3] == pytest.approx(1.0)
    assert scores[10] == pytest.approx(1.0)


def test_rank_houses_ties_keep_house_order():
    strong, weak = aspects.rank_houses({h: 0.0 for h in aspects.HOUSES})
    assert strong == [1, 2, 3]
    assert weak == [12, 11, 10]


def test_weak_houses_are_reported_weakest_first():
    scores = {1: 4.0, 2: 3.0, 3: 2.5, 4: 2.0, 5: 5.0, 6: -0.4,
              7: 1.0, 8: 0.5, 9: 6.0, 10: 3.5, 11: 1.5, 12: 0.2}
    strong, weak = aspects.rank_houses(scores)
    assert strong == [9, 5, 1]
    assert weak == [6, 12, 8]
    assert weak[0] == min(scores, key=scores.get)


def test_calculate_house_strengths():
    strong, weak = aspects.calculate_house_strengths([PlanetPosition("Jupiter", 10.0, 1)])
    assert strong == [1, 7, 5]
    assert weak == [12, 11, 10]
    assert not set(strong) & set(weak)


def test_dignity_of():
    assert aspects.dignity_of("Moon", "Taurus") == "exalted"
    assert aspects.dignity_of("Mars", "Cancer") == "debilitated"
    assert aspects.dignity_of("Venus", "Libra") == "neutral"


def test_aspect_table_rows():
    rows = aspects.aspect_table([PlanetPosition("Saturn", 282.0, 6)])
    assert rows == [{"Planet": "Saturn", "House": 6, "Aspect Houses": "7, 3, 10", "Houses Affected": "12, 8, 3"}]


def test_format_aspect_table():
    planets = [PlanetPosition("Jupiter", 347.0, 8), PlanetPosition("Mars", 22.0, 9)]
    text = aspects.format_aspect_table(planets, aspects.house_scores(planets))
    assert "Jupiter" in text and "Mars" in text
    assert "Strength" in text
    assert aspects.format_aspect_table([]) == "No aspects found."
