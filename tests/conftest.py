"""Shared fixtures."""
import pytest
from adsb_beacon.config import Config
from adsb_beacon.delivery import BaseDeliverySink


class RecordingSink(BaseDeliverySink):
    """Sink that keeps every report and accepts unless told otherwise."""

    def __init__(self, config=None, accept=True):
        super().__init__(config)
        self.accept = accept
        self.reports = []
        self.closed = False

    def submit(self, report: str) -> bool:
        self.reports.append(report)
        return self.accept

    def close(self):
        self.closed = True


class FakeClock:
    """Manually advanced clock."""

    def __init__(self, now=1_700_000_000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def config():
    """Configuration isolated from the environment."""
    config = Config()
    config.CALLSIGN = 'PLANES'
    config.PASSCODE = '12345'
    config.INVALID_SETTINGS = []
    config.POSITION_TTL_SECONDS = 1
    config.ENABLE_CIRCLES = False
    config.ENABLE_REPORT_LOG = False
    config.OPERATOR_LATITUDE = 47.9
    config.OPERATOR_LONGITUDE = -122.3
    config.OPERATOR_ALTITUDE_FT = 600
    config.DELIVERY_MODE = 'udp'
    config.DELIVERY_HOST = '127.0.0.1'
    config.DELIVERY_PORT = 2023
    config.DELIVERY_URL = ''
    config.DELIVERY_TIMEOUT_SECONDS = 1
    config.DELIVERY_TO_RF = False
    config.FEED_HOST = '127.0.0.1'
    config.FEED_PORT = 30003
    config.FEED_TIMEOUT_SECONDS = 5
    config.AIRCRAFT_EXPIRY_SECONDS = 900
    config.EXPIRY_SWEEP_INTERVAL_SECONDS = 60
    return config


@pytest.fixture
def sink(config):
    return RecordingSink(config)


@pytest.fixture
def clock():
    return FakeClock()


SBS_FIELD_NAMES = {
    'callsign': 10, 'altitude': 11, 'speed': 12, 'track': 13, 'lat': 14, 'lon': 15,
    'vrate': 16, 'squawk': 17, 'alert': 18, 'emergency': 19, 'ident': 20, 'ground': 21,
}


def sbs_line(kind, subtype, address, **values):
    """Build a 22-field BaseStation sentence from named values."""
    fields = [''] * 22
    fields[0] = kind
    fields[1] = str(subtype)
    fields[4] = address
    for name, value in values.items():
        fields[SBS_FIELD_NAMES[name]] = str(value)
    return ','.join(fields)


@pytest.fixture
def make_line():
    return sbs_line
