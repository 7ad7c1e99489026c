"""
insights.py

Template-driven chart readings for the chat assistant.

Given a computed KundaliData, builds a short paragraph about one life topic
(career, relationship, health, spiritual, wealth or general) in English, Hindi
or Hinglish. No randomness: the same chart and topic always give the same text.
"""

import logging
from typing import Dict, List, Optional

from kundali import settings
from kundali.core.chart import KundaliData
from kundali.core.planets import PlanetPosition
from kundali.core.zodiac import SIGNS_SANSKRIT, ZODIAC_SIGNS
from kundali.meanings import (
    HOUSE_MEANINGS, HOUSE_THEMES_HINDI, HOUSE_THEMES_HINGLISH,
    OWN_SIGNS, PLANET_MEANINGS, RISING_SIGNS, SIGN_MEANINGS,
)

logger = logging.getLogger(__name__)

# ============================================================================
# CONSTANTS
# ============================================================================

LANGUAGES = ('english', 'hindi', 'hinglish')

# topic -> (relevant houses, relevant planets)
TOPIC_FOCUS = {
    'career': ((1, 2, 6, 10), ('Sun', 'Mars', 'Saturn', 'Jupiter', 'Mercury')),
    'relationship': ((1, 5, 7, 8), ('Venus', 'Mars', 'Moon', 'Jupiter')),
    'health': ((1, 6, 8, 12), ('Sun', 'Moon', 'Mars', 'Saturn')),
    'spiritual': ((4, 8, 9, 12), ('Jupiter', 'Moon', 'Ketu')),
    'wealth': ((1, 2, 5, 8, 9, 11), ('Jupiter', 'Venus', 'Sun', 'Moon')),
    'general': ((1, 4, 7, 10), ('Sun', 'Moon', 'Jupiter', 'Saturn')),
}
TOPICS = tuple(TOPIC_FOCUS)

# Checked in this order; first match wins, otherwise 'general'
TOPIC_KEYWORDS = (
    ('career', ('career', 'job', 'profession', 'work', 'business', 'naukri', 'नौकरी', 'करियर')),
    ('relationship', ('love', 'relationship', 'marriage', 'partner', 'romance', 'shaadi', 'शादी', 'प्रेम')),
    ('health', ('health', 'medical', 'wellness', 'disease', 'fitness', 'sehat', 'स्वास्थ्य')),
    ('spiritual', ('spiritual', 'meditation', 'soul', 'yoga', 'dharma', 'moksha', 'आध्यात्म')),
    ('wealth', ('money', 'wealth', 'finance', 'investment', 'income', 'paisa', 'dhan', 'धन', 'पैसा')),
)

TOPIC_SUBJECT = {
    'english': {
        'career': 'Your career path', 'relationship': 'Your relationships', 'health': 'Your health',
        'spiritual': 'Your spiritual journey', 'wealth': 'Your financial situation', 'general': 'Your life path',
    },
    'hindi': {
        'career': 'करियर', 'relationship': 'रिश्ते', 'health': 'स्वास्थ्य',
        'spiritual': 'आध्यात्मिक मार्ग', 'wealth': 'धन', 'general': 'जीवन',
    },
    'hinglish': {
        'career': 'career', 'relationship': 'rishte', 'health': 'sehat',
        'spiritual': 'spiritual growth', 'wealth': 'paisa aur dhan', 'general': 'zindagi',
    },
}

TOPIC_APPROACH = {
    'career': 'natural approach to work', 'relationship': 'relationship style',
    'health': 'physical constitution', 'spiritual': 'spiritual path',
    'wealth': 'approach to finances', 'general': 'basic nature',
}

DIGNITY_WORDS = {
    'english': {'exalted': 'strongly positive', 'domicile': 'well-placed',
                'detriment': 'challenging', 'fall': 'difficult', 'neutral': 'neutral'},
    'hindi': {'exalted': 'उच्च', 'domicile': 'स्वगृही', 'detriment': 'कमज़ोर',
              'fall': 'नीच', 'neutral': 'सम'},
    'hinglish': {'exalted': 'uchch', 'domicile': 'swagrihi', 'detriment': 'kamzor',
                 'fall': 'neech', 'neutral': 'normal'},
}

# planet -> {sign: dignity}; the nodes have no traditional dignities
PLANETARY_DIGNITY = {
    'Sun': {'Aries': 'exalted', 'Leo': 'domicile', 'Libra': 'fall', 'Aquarius': 'detriment'},
    'Moon': {'Taurus': 'exalted', 'Cancer': 'domicile', 'Scorpio': 'fall', 'Capricorn': 'detriment'},
    # Virgo is both exaltation and own sign for Mercury; read as domicile
    'Mercury': {'Gemini': 'domicile', 'Virgo': 'domicile', 'Pisces': 'fall', 'Sagittarius': 'detriment'},
    'Venus': {'Pisces': 'exalted', 'Taurus': 'domicile', 'Libra': 'domicile', 'Virgo': 'fall',
              'Aries': 'detriment', 'Scorpio': 'detriment'},
    'Mars': {'Capricorn': 'exalted', 'Aries': 'domicile', 'Scorpio': 'domicile', 'Cancer': 'fall',
             'Libra': 'detriment', 'Taurus': 'detriment'},
    'Jupiter': {'Cancer': 'exalted', 'Sagittarius': 'domicile', 'Pisces': 'domicile', 'Capricorn': 'fall',
                'Gemini': 'detriment', 'Virgo': 'detriment'},
    'Saturn': {'Libra': 'exalted', 'Capricorn': 'domicile', 'Aquarius': 'domicile', 'Aries': 'fall',
               'Cancer': 'detriment', 'Leo': 'detriment'},
    'Rahu': {},
    'Ketu': {},
}

# Ascendants whose ruler earns the lagna-lord bonus in get_dominant_planet
LAGNA_LORDS = {
    'Leo': 'Sun', 'Cancer': 'Moon', 'Gemini': 'Mercury', 'Taurus': 'Venus',
    'Aries': 'Mars', 'Sagittarius': 'Jupiter', 'Capricorn': 'Saturn',
}


# ============================================================================
# CHART HELPERS
# ============================================================================

def _ascendant_sign(data: KundaliData) -> str:
    return data.ascendant.split('-')[0].strip()


def _moon_sign(data: KundaliData) -> str:
    return data.moon_sign.split('-')[0].strip()


def _find(data: KundaliData, name: str) -> Optional[PlanetPosition]:
    for planet in data.planets:
        if planet.name == name:
            return planet
    return None


def _ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(n % 10, 'th')
    return f"{n}{suffix}"


def _join(items: List[str], conjunction: str = 'and') -> str:
    if len(items) <= 1:
        return ''.join(items)
    return f"{', '.join(items[:-1])} {conjunction} {items[-1]}"


def _keywords(planet_name: str, count: int) -> str:
    return ', '.join(PLANET_MEANINGS[planet_name]['keywords'][:count])


def _sanskrit_sign(sign: str) -> str:
    if sign in ZODIAC_SIGNS:
        return SIGNS_SANSKRIT[ZODIAC_SIGNS.index(sign)]
    return sign


def get_planetary_dignity(planet: str, sign: str) -> str:
    """'exalted', 'domicile', 'detriment', 'fall' or 'neutral'."""
    return PLANETARY_DIGNITY.get(planet, {}).get(sign, 'neutral')


def get_dominant_planet(data: KundaliData) -> Optional[str]:
    """Planet with the highest placement score; ties go to the earlier planet."""
    if not data.planets:
        return None

    lagna_lord = LAGNA_LORDS.get(_ascendant_sign(data))
    strong = set(data.strong_houses)

    scores: Dict[str, int] = {}
    for planet in data.planets:
        score = 0
        if planet.house in strong:
            score += 3
        if planet.name in ('Sun', 'Moon', 'Jupiter'):
            score += 2
        if planet.sign in OWN_SIGNS.get(planet.name, ()):
            score += 3
        if planet.name == lagna_lord:
            score += 3
        if planet.house in (1, 10):      # angular
            score += 2
        elif planet.house in (5, 9):     # trine
            score += 1
        scores[planet.name] = score

    dominant, best = None, 0
    for name, score in scores.items():
        if score > best:
            dominant, best = name, score
    return dominant


def detect_topic(query: str) -> str:
    lower_query = query.lower()
    for topic, words in TOPIC_KEYWORDS:
        if any(word in lower_query for word in words):
            return topic
    return 'general'


# ============================================================================
# ENGLISH
# ============================================================================

def _topic_specific_english(topic: str, data: KundaliData) -> List[str]:
    lines = []
    if topic == 'career':
        tenth = [p for p in data.planets if p.house == 10]
        if tenth:
            themes = [kw for p in tenth for kw in PLANET_MEANINGS[p.name]['keywords'][:2]]
            lines.append(f"With {_join([p.name for p in tenth])} in your 10th house "
                         f"({HOUSE_MEANINGS[10]['name']}), you may excel "
                         f"in careers involving {', '.join(themes)}.")
        saturn = _find(data, 'Saturn')
        if saturn:
            outcome = {
                10: 'a structured career with potential for authority and long-term achievement',
                1: 'you work hard for your achievements and may face early career challenges',
                7: 'business partnerships may be significant in your professional life',
            }.get(saturn.house, 'discipline and perseverance are important factors in your career development')
            lines.append(f"Saturn in your {_ordinal(saturn.house)} house suggests {outcome}.")

    elif topic == 'relationship':
        venus, mars, moon = _find(data, 'Venus'), _find(data, 'Mars'), _find(data, 'Moon')
        if venus:
            element = SIGN_MEANINGS[venus.sign]['element']
            style = {
                'fire': 'seek passion and spontaneity in relationships',
                'earth': 'value loyalty and steady, tangible care',
                'air': 'value intellectual connection in partnerships',
                'water': 'seek emotional depth and nurturing bonds',
            }[element]
            lines.append(f"Venus in {venus.sign} and house {venus.house} suggests you {style}.")
        if venus and mars:
            if mars.sign == venus.sign:
                lines.append("Venus and Mars share a sign, so what you desire and how you pursue it work in harmony.")
            else:
                lines.append("Venus and Mars sit in different signs, which creates creative tension between "
                             "what you value and how you pursue it.")
        if moon:
            traits = ' and '.join(SIGN_MEANINGS[moon.sign]['keywords'][:2])
            lines.append(f"Your emotional needs are shaped by the Moon in {moon.sign}, making you {traits} "
                         f"in matters of the heart.")

    elif topic == 'health':
        asc = _ascendant_sign(data)
        if asc in SIGN_MEANINGS:
            lines.append(f"Your {asc} ascendant suggests attention to the {SIGN_MEANINGS[asc]['body']}.")
        sixth = [p.name for p in data.planets if p.house == 6]
        if sixth:
            if 'Saturn' in sixth:
                outcome = 'potential for chronic issues requiring long-term management'
            elif 'Jupiter' in sixth:
                outcome = 'generally good vitality but a tendency towards excess'
            elif 'Mars' in sixth:
                outcome = 'dynamic energy but some risk of inflammation or injury'
            else:
                outcome = 'daily health habits are important for your wellbeing'
            lines.append(f"Planets in your 6th house ({', '.join(sixth)}) suggest {outcome}.")

    elif topic == 'spiritual':
        ketu, jupiter = _find(data, 'Ketu'), _find(data, 'Jupiter')
        seekers = [p for p in data.planets if p.house in (9, 12)]
        if seekers:
            where = 'philosophy and higher understanding' if seekers[0].house == 9 else 'mysticism and transcendence'
            lines.append(f"Your spiritual nature is highlighted by {_join([p.name for p in seekers])} "
                         f"in the house of {where}.")
        if ketu:
            outcome = {
                12: 'deep spiritual gifts carried over from past lives',
                9: 'innate wisdom that needs little formal religious structure',
                3: 'intuitive knowledge that goes beyond book learning',
            }.get(ketu.house, 'areas where detachment helps your evolution')
            lines.append(f"Ketu in your {_ordinal(ketu.house)} house points to {outcome}.")
        if jupiter:
            lines.append(f"Jupiter in {jupiter.sign} guides your growth through "
                         f"{' and '.join(SIGN_MEANINGS[jupiter.sign]['keywords'][:2])} qualities.")

    elif topic == 'wealth':
        second = [p.name for p in data.planets if p.house == 2]
        if second:
            if 'Jupiter' in second:
                outcome = 'potential for abundance and financial expansion'
            elif 'Venus' in second:
                outcome = 'an eye for quality and an ability to attract resources'
            elif 'Saturn' in second:
                outcome = 'a disciplined approach to building steady wealth over time'
            else:
                outcome = f"resources tied to {_join([PLANET_MEANINGS[n]['keywords'][0] for n in second])}"
            lines.append(f"{_join(second)} in the 2nd house suggests {outcome}.")
        jupiter = _find(data, 'Jupiter')
        if jupiter:
            themes = ' and '.join(HOUSE_MEANINGS[jupiter.house]['keywords'][:2])
            lines.append(f"Jupiter in your {_ordinal(jupiter.house)} house suggests financial "
                         f"opportunities through {themes}.")

    else:
        asc = _ascendant_sign(data)
        if asc in SIGN_MEANINGS:
            sign = SIGN_MEANINGS[asc]
            lines.append(f"{asc} is a {sign['modality']} {sign['element']} sign ruled by {sign['lord']}, "
                         f"so {sign['lord']} colours the whole chart.")
        lord = data.current_dasha.split(' ')[0]
        if lord in PLANET_MEANINGS:
            lines.append(f"Your current {data.current_dasha} brings focus to qualities of {lord}: "
                         f"{_keywords(lord, 3)}.")
        sun, moon_sign = _find(data, 'Sun'), _moon_sign(data)
        if sun and moon_sign in SIGN_MEANINGS:
            lines.append(f"With the Sun in {sun.sign} and the Moon in {moon_sign}, you balance "
                         f"{SIGN_MEANINGS[sun.sign]['keywords'][0]} with "
                         f"{SIGN_MEANINGS[moon_sign]['keywords'][0]} qualities.")
    return lines


def _insight_english(topic: str, data: KundaliData) -> str:
    houses, _ = TOPIC_FOCUS[topic]
    lines = []

    asc = _ascendant_sign(data)
    if asc in SIGN_MEANINGS:
        lines.append(f"With {asc} ascendant, your {TOPIC_APPROACH[topic]} tends to be "
                     f"{', '.join(SIGN_MEANINGS[asc]['keywords'][:3])}; {RISING_SIGNS[asc]}.")

    dominant = get_dominant_planet(data)
    if dominant:
        planet = _find(data, dominant)
        lines.append(f"Your chart is strongly influenced by {dominant} in {planet.sign}, a "
                     f"{PLANET_MEANINGS[dominant]['nature']} influence that brings qualities of "
                     f"{_keywords(dominant, 3)} to your {topic} matters.")

    placed = [p for p in data.planets if p.house in houses]
    if placed:
        words = DIGNITY_WORDS['english']
        parts = [f"{p.name} in {p.sign} ({words[get_planetary_dignity(p.name, p.sign)]}) in house {p.house}"
                 for p in placed]
        lines.append(f"{TOPIC_SUBJECT['english'][topic]} is particularly influenced by {_join(parts)}.")

    lines.extend(_topic_specific_english(topic, data))

    strong = [HOUSE_MEANINGS[h]['keywords'][0] for h in data.strong_houses]
    lines.append(f"Overall, your chart suggests particular strength in matters of {', '.join(strong)}, "
                 f"which can be channeled positively into your {topic} development.")
    return ' '.join(lines)


# ============================================================================
# HINDI / HINGLISH
# ============================================================================

def _insight_hindi(topic: str, data: KundaliData) -> str:
    houses, planets_of_interest = TOPIC_FOCUS[topic]
    subject = TOPIC_SUBJECT['hindi'][topic]
    words = DIGNITY_WORDS['hindi']
    lines = []

    asc = _ascendant_sign(data)
    lines.append(f"आपका लग्न {_sanskrit_sign(asc)} ({asc}) है।")

    dominant = get_dominant_planet(data)
    if dominant:
        planet = _find(data, dominant)
        lines.append(f"आपकी कुंडली पर {PLANET_MEANINGS[dominant]['hindi']} ({dominant}) का गहरा प्रभाव है, "
                     f"जो {_sanskrit_sign(planet.sign)} राशि में स्थित है।")

    placed = [p for p in data.planets if p.house in houses]
    if placed:
        parts = [f"{PLANET_MEANINGS[p.name]['hindi']} {p.house}वें भाव में ({words[get_planetary_dignity(p.name, p.sign)]})"
                 for p in placed]
        lines.append(f"{subject} के मामलों में {', '.join(parts)} विशेष भूमिका निभाते हैं।")
    else:
        key = _find(data, planets_of_interest[0])
        lines.append(f"{subject} के लिए {PLANET_MEANINGS[key.name]['hindi']} {key.house}वें भाव से मार्गदर्शन करता है।")

    lord = data.current_dasha.split(' ')[0]
    if lord in PLANET_MEANINGS:
        lines.append(f"अभी {PLANET_MEANINGS[lord]['hindi']} की महादशा चल रही है ({data.current_dasha})।")

    strong = [HOUSE_THEMES_HINDI[h] for h in data.strong_houses]
    lines.append(f"कुल मिलाकर {', '.join(strong)} से जुड़े क्षेत्र आपकी ताकत हैं।")
    return ' '.join(lines)


def _insight_hinglish(topic: str, data: KundaliData) -> str:
    houses, planets_of_interest = TOPIC_FOCUS[topic]
    subject = TOPIC_SUBJECT['hinglish'][topic]
    words = DIGNITY_WORDS['hinglish']
    lines = []

    asc = _ascendant_sign(data)
    if asc in SIGN_MEANINGS:
        lines.append(f"Aapka lagna {asc} ({_sanskrit_sign(asc)}) hai, isliye aap "
                     f"{' aur '.join(SIGN_MEANINGS[asc]['keywords'][:2])} nature ke ho.")

    dominant = get_dominant_planet(data)
    if dominant:
        planet = _find(data, dominant)
        lines.append(f"Aapki kundali mein {dominant} ({PLANET_MEANINGS[dominant]['hindi']}) sabse strong hai, "
                     f"jo {planet.sign} mein baitha hai aur {_keywords(dominant, 2)} laata hai.")

    placed = [p for p in data.planets if p.house in houses]
    if placed:
        parts = [f"{p.name} {_ordinal(p.house)} house mein ({words[get_planetary_dignity(p.name, p.sign)]})"
                 for p in placed]
        lines.append(f"Aapke {subject} par {_join(parts, 'aur')} ka asar hai.")
    else:
        key = _find(data, planets_of_interest[0])
        lines.append(f"Aapke {subject} ke liye {key.name} ka {_ordinal(key.house)} house important hai.")

    lord = data.current_dasha.split(' ')[0]
    if lord in PLANET_MEANINGS:
        lines.append(f"Abhi {data.current_dasha} chal rahi hai, toh {_keywords(lord, 2)} par focus rahega.")

    strong = [HOUSE_THEMES_HINGLISH[h] for h in data.strong_houses]
    lines.append(f"Overall, {', '.join(strong)} aapki kundali ke strong points hain.")
    return ' '.join(lines)


_RENDERERS = {
    'english': _insight_english,
    'hindi': _insight_hindi,
    'hinglish': _insight_hinglish,
}


# ============================================================================
# PUBLIC API
# ============================================================================

def generate_insight(topic: str, data: KundaliData, language: Optional[str] = None) -> str:
    """Personalised reading of `data` for one topic."""
    language = (language or settings.DEFAULT_LANGUAGE).lower()
    if topic not in TOPIC_FOCUS:
        raise ValueError(f"Unknown topic {topic!r}; expected one of {', '.join(TOPICS)}")
    if language not in _RENDERERS:
        raise ValueError(f"Unknown language {language!r}; expected one of {', '.join(LANGUAGES)}")

    if not data or not data.planets:
        return "I don't have enough information about your birth chart to provide insights."

    logger.debug("Generating %s insight in %s", topic, language)
    return _RENDERERS[language](topic, data)


def generate_astrological_response(query: str, data: KundaliData, language: Optional[str] = None) -> str:
    """Answer a free-text chat question by routing it to the matching topic."""
    return generate_insight(detect_topic(query), data, language)
