"""Meteomatics API constants.

API docs:
  - Request format: https://www.meteomatics.com/en/api/request/
  - Parameters: https://www.meteomatics.com/en/api/available-parameters/
"""

BASE_URL = "https://api.meteomatics.com"

# One data point per hour
DEFAULT_FREQUENCY = "PT1H"

OUTPUT_FORMAT_JSON = "json"

# Parameter tokens. Elevation-dependent ones get "_{elevation}m" appended.
PROB_SNOWFALL = "prob_snowfall_1h:p"
RELATIVE_HUMIDITY = "relative_humidity"
TEMPERATURE = "t"
CLEAR_SKY_RADIATION = "clear_sky_rad"
WIND_SPEED = "wind_speed"
PRESSURE = "pressure"

# Unit suffixes
UNIT_PERCENT = "p"
UNIT_CELSIUS = "C"
UNIT_WATTS = "W"
UNIT_KMH = "kmh"
UNIT_HPA = "hPa"
