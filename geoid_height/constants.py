"""
Centralized service constants.
Change values here to point the client somewhere else without touching the modules.
"""

__version__ = "0.1.0"

# NGA EGM96 single point interpolation form handler
INTPT_CGI_URL = "http://earth-info.nga.mil/nga-bin/gandg-bin/intpt.cgi"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
USER_AGENT = f"geoid-height/{__version__}"
REQUEST_TIMEOUT_S: float = 30.0

# Form fields (order matters for the request body)
UNITS = "Units=meters"
LATITUDE_FIELDS = ("LatitudeDeg", "LatitudeMin", "LatitudeSec")
LONGITUDE_FIELDS = ("LongitudeDeg", "LongitudeMin", "LongitudeSec")

# Response scraping
HEIGHT_PATTERN = r"<br>([^<]+) Meters<br>"
NO_HEIGHT: float = -9999.99
ALTITUDE_DECIMALS: int = 3  # service reports N in millimeters

# DMS encoding
SECONDS_MAX_CHARS: int = 11

# Environment overrides (see config.py)
ENV_URL = "GEOID_INTPT_URL"
ENV_TIMEOUT = "GEOID_TIMEOUT_S"

# NGA published check data (outintpt.dat): latitude, longitude, undulation [m]
REFERENCE_POINTS = [
    (38.628155, 269.779155, -31.628),
    (-14.621217, 305.021114, -2.969),
    (46.874319, 102.448729, -43.575),
    (-23.617446, 133.874712, 15.871),
    (38.625473, 359.999500, 50.066),
    (-0.466744, 0.002300, 17.329),
]
REFERENCE_TOLERANCE_M: float = 0.01
