"""Aircraft domain model."""
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Tuple

from adsb_beacon.errors import StalePosition


class MessageKind(Enum):
    """SBS-1 sentence type (field 0)."""
    MSG = "MSG"    # Transmission message, carries a subtype
    STA = "STA"    # Status change
    ID = "ID"      # Callsign / identity
    AIR = "AIR"    # New aircraft
    SEL = "SEL"    # Selection change
    CLK = "CLK"    # Clock
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_field(cls, value: str) -> "MessageKind":
        try:
            return cls(value.strip().upper())
        except ValueError:
            return cls.UNKNOWN


class Symbol(Enum):
    """Display symbol (primary symbol table)."""
    SMALL_AIRCRAFT = "'"
    HELICOPTER = "X"
    LARGE_AIRCRAFT = "^"


class EmergencyKind(Enum):
    """Emergency classification from reserved squawk codes."""
    HIJACKING = "Hijacking"
    COMMS_FAILURE = "Comms_Failure"
    GENERAL = "General"
    UNSPECIFIED = ""

    @classmethod
    def from_squawk(cls, squawk: Optional[str]) -> "EmergencyKind":
        return EMERGENCY_SQUAWKS.get(squawk, cls.UNSPECIFIED)


class ReportKind(Enum):
    """Shape of an outbound report."""
    POSITION = "POSITION"
    CIRCLE = "CIRCLE"
    STATUS = "STATUS"
    STALE = "STALE"
    TACTICAL = "TACTICAL"


# Reserved Mode A codes
EMERGENCY_SQUAWKS = {
    "7500": EmergencyKind.HIJACKING,        # Unlawful interference
    "7600": EmergencyKind.COMMS_FAILURE,    # Radio failure
    "7700": EmergencyKind.GENERAL,          # General emergency
}

IDENTITY_PLACEHOLDER = "????????"

_NON_ALNUM = re.compile(r'[^A-Za-z0-9]')
_WHITESPACE = re.compile(r'\s+')


def _degrees_minutes(value: float):
    """Whole degrees and minutes rounded to hundredths, carrying 60.00 into the degrees."""
    degrees = int(value)
    minutes = round((value - degrees) * 60.0, 2)
    if minutes >= 60.0:
        degrees += 1
        minutes = 0.0
    return degrees, minutes


def format_latitude(value: float) -> str:
    """
    Format signed decimal degrees as ddmm.mmH.

    Example: 47.87670 -> "4752.60N"
    """
    hemisphere = 'N' if value >= 0.0 else 'S'
    degrees, minutes = _degrees_minutes(abs(value))
    return f"{degrees:02d}{minutes:05.2f}{hemisphere}"


def format_longitude(value: float) -> str:
    """
    Format signed decimal degrees as dddmm.mmH.

    Example: -122.27269 -> "12216.36W"
    """
    hemisphere = 'E' if value >= 0.0 else 'W'
    degrees, minutes = _degrees_minutes(abs(value))
    return f"{degrees:03d}{minutes:05.2f}{hemisphere}"


def normalize_identity(text: Optional[str]) -> Optional[str]:
    """Strip a callsign/tail number down to alphanumerics; None if nothing usable."""
    if text is None or text == IDENTITY_PLACEHOLDER or not text.strip():
        return None
    cleaned = _NON_ALNUM.sub('', text)
    return cleaned or None


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(' ', text)


@dataclass
class AircraftRecord:
    """
    One parsed feed line.

    Every telemetry field is None when the feed left it empty, so a present
    zero is distinguishable from a missing value.
    """
    kind: MessageKind
    subtype: Optional[int]
    address: str
    callsign: Optional[str] = None
    altitude: Optional[int] = None
    ground_speed: Optional[int] = None
    track: Optional[int] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    vertical_rate: Optional[int] = None
    squawk: Optional[str] = None
    squawk_alert: Optional[bool] = None
    emergency: Optional[bool] = None
    ident: Optional[bool] = None
    on_ground: Optional[bool] = None
    fields: List[str] = field(default_factory=list, repr=False)

    @property
    def has_position(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def is_identity_sentence(self) -> bool:
        return self.kind == MessageKind.ID or self.subtype == 1


@dataclass
class AircraftState:
    """Fused per-aircraft state, keyed by address in the store."""
    address: str
    last_altitude: Optional[int] = None
    last_ground_speed: Optional[int] = None
    last_track: Optional[int] = None
    last_position: Optional[Tuple[str, str]] = None
    last_position_time: Optional[float] = None
    last_squawk: Optional[str] = None
    last_identity: Optional[str] = None
    tactical_label: Optional[str] = None
    dirty_count: int = 0
    last_seen: float = 0.0

    # Derived per record, not change-detected
    emergency: Optional[EmergencyKind] = None
    on_ground: bool = False

    @property
    def is_dirty(self) -> bool:
        return self.dirty_count > 0

    def assign_tactical_label(self, label: str) -> bool:
        """Set the tactical label once. Returns False if one was already assigned."""
        if self.tactical_label is not None:
            return False
        self.tactical_label = collapse_whitespace(label)
        return True

    def position_age(self, now: float) -> Optional[int]:
        """Whole seconds since the last position change, or None without a fix."""
        if self.last_position is None or self.last_position_time is None:
            return None
        return int(now) - int(self.last_position_time)

    def check_position_fresh(self, now: float, ttl: float) -> int:
        """
        Return the position age, raising StalePosition if it exceeds ttl.

        Callers must check last_position first.
        """
        age = self.position_age(now)
        if age > ttl:
            raise StalePosition(age)
        return age

    def reset_dirty(self):
        self.dirty_count = 0
        self.emergency = None
        self.on_ground = False


@dataclass
class Report:
    """An outbound report string and the shape it was composed in."""
    kind: ReportKind
    address: str
    text: str

    def __str__(self) -> str:
        return self.text
