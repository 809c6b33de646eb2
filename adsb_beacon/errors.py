"""Exceptions raised by the beacon gateway."""


class BeaconError(Exception):
    """Base class for all gateway errors."""


class ConfigurationError(BeaconError, ValueError):
    """Startup configuration is missing or malformed."""


class ParseError(BeaconError):
    """A feed line is empty or lacks the fields needed to identify an aircraft."""

    def __init__(self, message: str, line: str = ''):
        super().__init__(message)
        self.line = line


class ClassificationFallback(BeaconError):
    """No jurisdiction rule matched an address."""

    def __init__(self, address: str):
        super().__init__(f"No registry rule matches address {address}")
        self.address = address


class StalePosition(BeaconError):
    """The last position fix is older than the freshness window."""

    def __init__(self, age: int):
        super().__init__(f"Position is {age}s old")
        self.age = age


class DeliveryRejected(BeaconError):
    """The delivery sink refused a report."""

    def __init__(self, report: str, reason: str = 'rejected'):
        super().__init__(f"Delivery {reason}: {report}")
        self.report = report
        self.reason = reason


class FeedConnectionLost(BeaconError):
    """The input feed could not be opened, closed, or went silent."""
