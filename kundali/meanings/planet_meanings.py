# meanings/planet_meanings.py

"""
Graha significations used by the insight generator.
`keywords` are ordered from most to least characteristic.
"""

PLANET_MEANINGS = {
    "Sun": {
        "hindi": "Surya",
        "nature": "neutral",
        "keywords": ["self", "ego", "vitality", "leadership", "father", "authority"],
    },
    "Moon": {
        "hindi": "Chandra",
        "nature": "benefic",
        "keywords": ["emotions", "mother", "nurturing", "home", "habits", "instincts"],
    },
    "Mercury": {
        "hindi": "Budh",
        "nature": "neutral",
        "keywords": ["communication", "intellect", "learning", "siblings", "local travel", "thought process"],
    },
    "Venus": {
        "hindi": "Shukra",
        "nature": "benefic",
        "keywords": ["love", "relationships", "beauty", "arts", "values", "pleasure"],
    },
    "Mars": {
        "hindi": "Mangal",
        "nature": "malefic",
        "keywords": ["energy", "action", "passion", "drive", "aggression", "courage"],
    },
    "Jupiter": {
        "hindi": "Guru",
        "nature": "benefic",
        "keywords": ["expansion", "luck", "philosophy", "higher learning", "travel", "abundance"],
    },
    "Saturn": {
        "hindi": "Shani",
        "nature": "malefic",
        "keywords": ["discipline", "responsibility", "limitations", "structure", "time", "karma"],
    },
    "Rahu": {
        "hindi": "Rahu",
        "nature": "malefic",
        "keywords": ["obsession", "desire", "illusion", "innovation", "unconventional", "amplification"],
    },
    "Ketu": {
        "hindi": "Ketu",
        "nature": "malefic",
        "keywords": ["spirituality", "liberation", "past life", "detachment", "isolation", "intuition"],
    },
}
