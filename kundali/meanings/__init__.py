from kundali.meanings.house_meanings import HOUSE_MEANINGS, HOUSE_THEMES_HINDI, HOUSE_THEMES_HINGLISH
from kundali.meanings.planet_meanings import PLANET_MEANINGS
from kundali.meanings.rising import RISING_SIGNS
from kundali.meanings.sign_meanings import OWN_SIGNS, SIGN_MEANINGS

__all__ = [
    "HOUSE_MEANINGS", "HOUSE_THEMES_HINDI", "HOUSE_THEMES_HINGLISH",
    "PLANET_MEANINGS", "RISING_SIGNS", "OWN_SIGNS", "SIGN_MEANINGS",
]
