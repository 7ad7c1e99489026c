"""
Bhava (house) significations, 1-12.
"""

HOUSE_MEANINGS = {
    1: {"name": "Tanu Bhava", "keywords": ["self", "physical body", "personality", "appearance", "beginnings"]},
    2: {"name": "Dhana Bhava", "keywords": ["possessions", "values", "wealth", "speech", "family"]},
    3: {"name": "Sahaja Bhava", "keywords": ["communication", "siblings", "courage", "short journeys", "writing"]},
    4: {"name": "Sukha Bhava", "keywords": ["home", "mother", "real estate", "emotional foundation", "roots"]},
    5: {"name": "Putra Bhava", "keywords": ["creativity", "romance", "children", "intelligence", "self-expression"]},
    6: {"name": "Ripu Bhava", "keywords": ["health", "daily routine", "service", "enemies", "debts"]},
    7: {"name": "Kalatra Bhava", "keywords": ["partnerships", "marriage", "contracts", "business relationships"]},
    8: {"name": "Ayu Bhava", "keywords": ["transformation", "joint resources", "longevity", "occult", "inheritance"]},
    9: {"name": "Dharma Bhava", "keywords": ["higher education", "philosophy", "long journeys", "fortune", "father"]},
    10: {"name": "Karma Bhava", "keywords": ["career", "reputation", "public image", "authority", "ambition"]},
    11: {"name": "Labha Bhava", "keywords": ["gains", "friends", "hopes", "elder siblings", "networks"]},
    12: {"name": "Vyaya Bhava", "keywords": ["spirituality", "isolation", "expenses", "foreign lands", "liberation"]},
}

# Short Hindi gloss per house for hindi/hinglish output
HOUSE_THEMES_HINDI = {
    1: "व्यक्तित्व", 2: "धन", 3: "साहस", 4: "घर", 5: "संतान", 6: "स्वास्थ्य",
    7: "विवाह", 8: "परिवर्तन", 9: "भाग्य", 10: "करियर", 11: "लाभ", 12: "मोक्ष",
}

HOUSE_THEMES_HINGLISH = {
    1: "personality", 2: "dhan", 3: "himmat", 4: "ghar-parivaar", 5: "santaan", 6: "sehat",
    7: "shaadi", 8: "badlaav", 9: "bhagya", 10: "career", 11: "labh", 12: "moksha",
}
