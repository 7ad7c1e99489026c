# meanings/sign_meanings.py

"""
Rasi qualities: element, modality, lord and keywords.
"""

SIGN_MEANINGS = {
    "Aries": {
        "element": "fire", "modality": "cardinal", "lord": "Mars",
        "keywords": ["initiative", "courage", "impulsive", "leadership", "pioneering"],
        "body": "head, brain, and adrenal system",
    },
    "Taurus": {
        "element": "earth", "modality": "fixed", "lord": "Venus",
        "keywords": ["stability", "sensuality", "patience", "determination", "practical"],
        "body": "throat, neck and thyroid",
    },
    "Gemini": {
        "element": "air", "modality": "mutable", "lord": "Mercury",
        "keywords": ["communication", "versatility", "curiosity", "adaptability", "intellect"],
        "body": "lungs, shoulders, arms and nervous system",
    },
    "Cancer": {
        "element": "water", "modality": "cardinal", "lord": "Moon",
        "keywords": ["nurturing", "emotional", "protective", "intuitive", "sensitive"],
        "body": "stomach, breasts and digestive system",
    },
    "Leo": {
        "element": "fire", "modality": "fixed", "lord": "Sun",
        "keywords": ["creative", "proud", "warm-hearted", "generous", "dignified"],
        "body": "heart, spine and circulation",
    },
    "Virgo": {
        "element": "earth", "modality": "mutable", "lord": "Mercury",
        "keywords": ["analytical", "practical", "detailed", "perfectionist", "service-oriented"],
        "body": "intestines and assimilation",
    },
    "Libra": {
        "element": "air", "modality": "cardinal", "lord": "Venus",
        "keywords": ["diplomatic", "harmonious", "fair", "aesthetic", "balanced"],
        "body": "kidneys, lower back and adrenals",
    },
    "Scorpio": {
        "element": "water", "modality": "fixed", "lord": "Mars",
        "keywords": ["intense", "passionate", "secretive", "transformative", "investigative"],
        "body": "reproductive and elimination systems",
    },
    "Sagittarius": {
        "element": "fire", "modality": "mutable", "lord": "Jupiter",
        "keywords": ["philosophical", "adventurous", "optimistic", "freedom-loving", "honest"],
        "body": "hips, thighs and liver",
    },
    "Capricorn": {
        "element": "earth", "modality": "cardinal", "lord": "Saturn",
        "keywords": ["ambitious", "disciplined", "responsible", "cautious", "authoritative"],
        "body": "bones, joints and skin",
    },
    "Aquarius": {
        "element": "air", "modality": "fixed", "lord": "Saturn",
        "keywords": ["innovative", "humanitarian", "independent", "intellectual", "progressive"],
        "body": "circulation, ankles and nervous impulses",
    },
    "Pisces": {
        "element": "water", "modality": "mutable", "lord": "Jupiter",
        "keywords": ["compassionate", "intuitive", "spiritual", "imaginative", "dreamy"],
        "body": "feet and lymphatic system",
    },
}

# Planets in their own sign (swakshetra)
OWN_SIGNS = {
    "Sun": ("Leo",),
    "Moon": ("Cancer",),
    "Mercury": ("Gemini", "Virgo"),
    "Venus": ("Taurus", "Libra"),
    "Mars": ("Aries", "Scorpio"),
    "Jupiter": ("Sagittarius", "Pisces"),
    "Saturn": ("Capricorn", "Aquarius"),
}
