"""Configuration management"""
import os
from dotenv import load_dotenv

from src.exceptions import ConfigurationError
from src.models.clock import ClockTime

load_dotenv()

# Sleep dial geometry (pixels)
DIAL_SIZE: int = int(os.getenv("DIAL_SIZE", "340"))
DIAL_STROKE_WIDTH: int = int(os.getenv("DIAL_STROKE_WIDTH", "36"))
DIAL_MARGIN: int = int(os.getenv("DIAL_MARGIN", "40"))

# Touches farther than this from both handles are ignored
HIT_BOX_RADIUS: float = float(os.getenv("HIT_BOX_RADIUS", "80"))

# Minute granularity of user-driven updates
SNAP_MINUTES: int = int(os.getenv("SNAP_MINUTES", "5"))

# Morning check-in defaults (HH:MM, 24-hour)
DEFAULT_BEDTIME: str = os.getenv("DEFAULT_BEDTIME", "22:00")
DEFAULT_WAKE_TIME: str = os.getenv("DEFAULT_WAKE_TIME", "07:00")

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


# Validation
def validate_config() -> None:
    """Validate dial and logging configuration"""
    if DIAL_SIZE <= 0 or DIAL_STROKE_WIDTH <= 0:
        raise ConfigurationError("Dial size and stroke width must be positive", config_key="DIAL_SIZE")
    if DIAL_SIZE - DIAL_STROKE_WIDTH - DIAL_MARGIN <= 0:
        raise ConfigurationError("Dial radius must be positive", config_key="DIAL_MARGIN")
    if HIT_BOX_RADIUS <= 0:
        raise ConfigurationError("HIT_BOX_RADIUS must be positive", config_key="HIT_BOX_RADIUS")
    if SNAP_MINUTES <= 0 or 60 % SNAP_MINUTES != 0:
        raise ConfigurationError("SNAP_MINUTES must divide 60", config_key="SNAP_MINUTES")
    if LOG_LEVEL.upper() not in _LOG_LEVELS:
        raise ConfigurationError(f"Unknown LOG_LEVEL {LOG_LEVEL!r}", config_key="LOG_LEVEL")
    for key, value in (("DEFAULT_BEDTIME", DEFAULT_BEDTIME), ("DEFAULT_WAKE_TIME", DEFAULT_WAKE_TIME)):
        # same parser the check-in session uses
        try:
            ClockTime.parse(value)
        except ValueError as e:
            raise ConfigurationError(f"{key} must be a valid HH:MM time, got {value!r}", config_key=key, cause=e)
