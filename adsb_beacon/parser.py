"""Parser module for SBS-1 (BaseStation) feed lines."""
import logging
import math
from typing import List, Optional

from adsb_beacon.errors import ParseError
from adsb_beacon.models.aircraft import AircraftRecord, MessageKind

logger = logging.getLogger(__name__)


# Field positions in an SBS-1 sentence
FIELD_KIND = 0
FIELD_SUBTYPE = 1
FIELD_SESSION_ID = 2
FIELD_AIRCRAFT_ID = 3
FIELD_ADDRESS = 4
FIELD_FLIGHT_ID = 5
FIELD_DATE_GENERATED = 6
FIELD_TIME_GENERATED = 7
FIELD_DATE_LOGGED = 8
FIELD_TIME_LOGGED = 9
FIELD_CALLSIGN = 10
FIELD_ALTITUDE = 11
FIELD_GROUND_SPEED = 12
FIELD_TRACK = 13
FIELD_LATITUDE = 14
FIELD_LONGITUDE = 15
FIELD_VERTICAL_RATE = 16
FIELD_SQUAWK = 17
FIELD_SQUAWK_ALERT = 18
FIELD_EMERGENCY = 19
FIELD_IDENT = 20
FIELD_ON_GROUND = 21

FIELD_DELIMITER = ','
MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0
FLAG_SET = '-1'


class SbsParser:
    """Parses SBS-1 lines into AircraftRecord instances."""

    def parse_line(self, line: str) -> AircraftRecord:
        """
        Parse one feed line.

        Args:
            line: Raw text line, with or without its line terminator

        Returns:
            Parsed AircraftRecord

        Raises:
            ParseError: if the line is empty or has no kind, subtype or address
        """
        text = line.rstrip('\r\n')
        if text == '':
            raise ParseError("Empty line", line)

        # Keep empty trailing fields; short sentences are padded by _field()
        fields = text.split(FIELD_DELIMITER)

        if len(fields) <= FIELD_ADDRESS or fields[FIELD_ADDRESS].strip() == '':
            raise ParseError("Missing kind, subtype or address", line)

        address = fields[FIELD_ADDRESS].strip().upper()

        return AircraftRecord(
            kind=MessageKind.from_field(fields[FIELD_KIND]),
            subtype=self._parse_int(fields[FIELD_SUBTYPE]),
            address=address,
            callsign=self._field(fields, FIELD_CALLSIGN),
            altitude=self._parse_int(self._field(fields, FIELD_ALTITUDE)),
            ground_speed=self._parse_int(self._field(fields, FIELD_GROUND_SPEED)),
            track=self._parse_int(self._field(fields, FIELD_TRACK)),
            latitude=self._parse_coordinate(self._field(fields, FIELD_LATITUDE), MAX_LATITUDE),
            longitude=self._parse_coordinate(self._field(fields, FIELD_LONGITUDE), MAX_LONGITUDE),
            vertical_rate=self._parse_int(self._field(fields, FIELD_VERTICAL_RATE)),
            squawk=self._parse_squawk(self._field(fields, FIELD_SQUAWK)),
            squawk_alert=self._parse_flag(self._field(fields, FIELD_SQUAWK_ALERT)),
            emergency=self._parse_flag(self._field(fields, FIELD_EMERGENCY)),
            ident=self._parse_flag(self._field(fields, FIELD_IDENT)),
            on_ground=self._parse_flag(self._field(fields, FIELD_ON_GROUND)),
            fields=fields,
        )

    @staticmethod
    def _field(fields: List[str], index: int) -> Optional[str]:
        """Return a raw field, or None when absent or empty."""
        if index >= len(fields):
            return None
        value = fields[index]
        return value if value.strip() != '' else None

    def _parse_int(self, value: Optional[str]) -> Optional[int]:
        if value is None or value.strip() == '':
            return None
        try:
            return int(float(value))
        except (ValueError, OverflowError):
            logger.debug(f"Could not parse integer field '{value}'")
            return None

    def _parse_coordinate(self, value: Optional[str], limit: float) -> Optional[float]:
        """Decimal degrees within +/-limit; nan, inf and out-of-range values are absent."""
        if value is None:
            return None
        try:
            coordinate = float(value)
        except ValueError:
            logger.debug(f"Could not parse coordinate '{value}'")
            return None
        if not math.isfinite(coordinate) or abs(coordinate) > limit:
            logger.debug(f"Coordinate out of range '{value}'")
            return None
        return coordinate

    @staticmethod
    def _parse_squawk(value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip()

    @staticmethod
    def _parse_flag(value: Optional[str]) -> Optional[bool]:
        """SBS flags are -1 when set and 0 when clear."""
        if value is None:
            return None
        return value.strip() == FLAG_SET
