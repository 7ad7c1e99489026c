# meanings/rising.py

"""
Lagna (ascendant) temperament, one line per rising sign.
"""

RISING_SIGNS = {
    "Aries": "you meet life head-on and prefer to lead rather than wait",
    "Taurus": "you build steadily and value comfort, loyalty and security",
    "Gemini": "you live through ideas, conversation and a wide circle of contacts",
    "Cancer": "you protect what you love and look for emotional security at home",
    "Leo": "you lead with warmth and confidence and like your efforts to be seen",
    "Virgo": "you refine and improve whatever you touch, with an eye for detail",
    "Libra": "you look for balance and do your best work in partnership",
    "Scorpio": "you feel deeply, keep your counsel and grow through crisis",
    "Sagittarius": "you chase meaning, learning and room to roam",
    "Capricorn": "you climb patiently and measure success over the long term",
    "Aquarius": "you think ahead of the crowd and care about collective progress",
    "Pisces": "you absorb the moods around you and draw on imagination and faith",
}
