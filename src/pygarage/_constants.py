"""Internal constants shared across the library."""

DEFAULT_MAX_ALLOWED_SPEED = 300.0
"""Speed ceiling (km/h) applied when no configuration is supplied."""

DEFAULT_LOG_LEVEL = "WARNING"
