import os

# Reference location used when birth details carry no coordinates (New Delhi)
DEFAULT_LATITUDE = float(os.getenv("KUNDALI_DEFAULT_LATITUDE", "28.6139"))
DEFAULT_LONGITUDE = float(os.getenv("KUNDALI_DEFAULT_LONGITUDE", "77.2090"))
DEFAULT_TIMEZONE = os.getenv("KUNDALI_DEFAULT_TIMEZONE", "UTC")

DEFAULT_LANGUAGE = os.getenv("KUNDALI_DEFAULT_LANGUAGE", "english").lower()
LOG_LEVEL = os.getenv("KUNDALI_LOG_LEVEL", "warning").lower()  # "debug" | "info" | "warning" | "error"
