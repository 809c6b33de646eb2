"""Configuration module for the ADS-B beacon gateway."""
import os
from dotenv import load_dotenv

from adsb_beacon.errors import ConfigurationError

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


# Settings whose values could not be parsed; reported by Config.validate()
_invalid_settings = []


def _env_number(name: str, default, cast=float):
    """Read a numeric setting, falling back to default and recording bad values."""
    value = os.getenv(name, '').strip()
    if not value:
        return default
    try:
        return cast(value)
    except ValueError:
        _invalid_settings.append(f"{name}={value!r}")
        return default


class Config:
    """Application configuration."""

    # Logging level
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Software Version
    VERSION = os.getenv('VERSION', 'v0.0.0')

    # Identity used for outbound delivery
    CALLSIGN = os.getenv('CALLSIGN', '').strip().upper()
    PASSCODE = os.getenv('PASSCODE', '').strip()

    # Operator station (decimal degrees / feet), used by probability circles
    OPERATOR_LATITUDE = _env_number('OPERATOR_LATITUDE', None)
    OPERATOR_LONGITUDE = _env_number('OPERATOR_LONGITUDE', None)
    OPERATOR_ALTITUDE_FT = _env_number('OPERATOR_ALTITUDE_FT', 600, int)

    # SBS-1 (BaseStation) feed
    FEED_HOST = os.getenv('FEED_HOST', 'localhost')
    FEED_PORT = _env_number('FEED_PORT', 30003, int)
    FEED_TIMEOUT_SECONDS = _env_number('FEED_TIMEOUT_SECONDS', 300.0)

    # Report delivery
    DELIVERY_MODE = os.getenv('DELIVERY_MODE', 'udp').strip().lower()
    DELIVERY_HOST = os.getenv('DELIVERY_HOST', 'localhost')
    DELIVERY_PORT = _env_number('DELIVERY_PORT', 2023, int)
    DELIVERY_URL = os.getenv('DELIVERY_URL', '')
    DELIVERY_TIMEOUT_SECONDS = _env_number('DELIVERY_TIMEOUT_SECONDS', 10.0)
    DELIVERY_TO_RF = _env_bool('DELIVERY_TO_RF')

    # Positions older than this are not sent as live objects
    POSITION_TTL_SECONDS = _env_number('POSITION_TTL_SECONDS', 1.0)

    # Feature flags
    ENABLE_CIRCLES = _env_bool('ENABLE_CIRCLES')
    ENABLE_REPORT_LOG = _env_bool('ENABLE_REPORT_LOG')
    REPORT_LOG_PATH = os.path.expanduser(os.getenv('REPORT_LOG_PATH', '~/.xastir/logs/planes.log'))

    # Aircraft that stop transmitting are forgotten after this long
    AIRCRAFT_EXPIRY_SECONDS = _env_number('AIRCRAFT_EXPIRY_SECONDS', 900.0)
    EXPIRY_SWEEP_INTERVAL_SECONDS = _env_number('EXPIRY_SWEEP_INTERVAL_SECONDS', 60.0)

    DELIVERY_MODES = ('udp', 'http')
    INVALID_SETTINGS = _invalid_settings

    @property
    def has_operator_position(self) -> bool:
        return self.OPERATOR_LATITUDE is not None and self.OPERATOR_LONGITUDE is not None

    def validate(self):
        """Validate required configuration."""
        if self.INVALID_SETTINGS:
            raise ConfigurationError(f"Invalid numeric settings: {', '.join(self.INVALID_SETTINGS)}")
        if not self.CALLSIGN:
            raise ConfigurationError("CALLSIGN configuration is required")
        if not self.PASSCODE:
            raise ConfigurationError("PASSCODE configuration is required")
        for name in ('FEED_PORT', 'DELIVERY_PORT'):
            port = getattr(self, name)
            if not 0 < port < 65536:
                raise ConfigurationError(f"{name} out of range: {port}")
        if self.POSITION_TTL_SECONDS < 0:
            raise ConfigurationError("POSITION_TTL_SECONDS must not be negative")
        if self.DELIVERY_MODE not in self.DELIVERY_MODES:
            raise ConfigurationError(f"Unknown DELIVERY_MODE: {self.DELIVERY_MODE}")
        if self.DELIVERY_MODE == 'http' and not self.DELIVERY_URL:
            raise ConfigurationError("DELIVERY_URL configuration is required for http delivery")
        if self.ENABLE_CIRCLES:
            if not self.has_operator_position:
                raise ConfigurationError("OPERATOR_LATITUDE/OPERATOR_LONGITUDE are required for circles")
            if not -90.0 <= self.OPERATOR_LATITUDE <= 90.0:
                raise ConfigurationError(f"OPERATOR_LATITUDE out of range: {self.OPERATOR_LATITUDE}")
            if not -180.0 <= self.OPERATOR_LONGITUDE <= 180.0:
                raise ConfigurationError(f"OPERATOR_LONGITUDE out of range: {self.OPERATOR_LONGITUDE}")
        return True
