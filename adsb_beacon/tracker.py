"""Fuses feed records into per-aircraft state and emits reports on change."""
import logging
import time
from typing import Callable, List, Optional

from adsb_beacon.config import Config
from adsb_beacon.delivery import BaseDeliverySink
from adsb_beacon.errors import DeliveryRejected, ParseError
from adsb_beacon.models.aircraft import (
    AircraftRecord,
    AircraftState,
    EmergencyKind,
    Report,
    format_latitude,
    format_longitude,
    normalize_identity,
)
from adsb_beacon.parser import SbsParser
from adsb_beacon.registry import RegistryClassifier
from adsb_beacon.reports import ReportEmitter
from adsb_beacon.store import AircraftStore

logger = logging.getLogger(__name__)

# MSG subtypes carrying each field
ALTITUDE_SUBTYPES = frozenset({2, 3, 5, 6, 7})
VELOCITY_SUBTYPES = frozenset({2, 4})
POSITION_SUBTYPES = frozenset({2, 3})


class AircraftTracker:
    """
    Applies parsed records to the aircraft store.

    Each changed field bumps the aircraft's dirty count; a dirty aircraft
    gets its reports composed and delivered before the next record is
    processed.
    """

    def __init__(self, sink: BaseDeliverySink,
                 store: Optional[AircraftStore] = None,
                 classifier: Optional[RegistryClassifier] = None,
                 config: Optional[Config] = None,
                 clock: Callable[[], float] = time.time):
        self.config = config or Config()
        self.sink = sink
        self.store = store if store is not None else AircraftStore()
        self.classifier = classifier or RegistryClassifier()
        self.parser = SbsParser()
        self.emitter = ReportEmitter(self.store, self.config)
        self.clock = clock

    def process_line(self, line: str) -> List[Report]:
        """
        Parse and apply one feed line.

        Returns:
            Reports delivered while processing the line (empty if skipped)

        Raises:
            DeliveryRejected: if the sink refuses a report
        """
        try:
            record = self.parser.parse_line(line)
        except ParseError as e:
            logger.debug(f"Skipping line: {e} ({line.strip()!r})")
            return []
        return self.process_record(record)

    def process_record(self, record: AircraftRecord) -> List[Report]:
        """Apply a record's fields, then report if anything changed."""
        now = self.clock()
        jurisdiction = self.classifier.classify(record.address)

        state = self.store.get_or_create(record.address, now)
        state.last_seen = now
        state.emergency = None
        state.on_ground = False

        delivered = []
        self._apply_altitude(state, record)
        self._apply_velocity(state, record)
        delivered.extend(self._apply_position(state, record, jurisdiction, now))
        delivered.extend(self._apply_identity(state, record, jurisdiction))
        self._apply_squawk(state, record)
        self._apply_emergency(state, record)
        self._apply_on_ground(state, record)

        if state.is_dirty:
            for report in self.emitter.compose(state, jurisdiction, now):
                self._deliver(report)
                delivered.append(report)
            state.reset_dirty()

        return delivered

    @staticmethod
    def _update(state: AircraftState, attribute: str, value) -> bool:
        """Store a field value, counting it as a change if it differs."""
        if getattr(state, attribute) == value:
            return False
        setattr(state, attribute, value)
        state.dirty_count += 1
        return True

    def _apply_altitude(self, state: AircraftState, record: AircraftRecord):
        if record.subtype not in ALTITUDE_SUBTYPES or not record.altitude:
            return
        self._update(state, 'last_altitude', record.altitude)

    def _apply_velocity(self, state: AircraftState, record: AircraftRecord):
        if record.subtype not in VELOCITY_SUBTYPES:
            return
        if record.ground_speed is not None:
            self._update(state, 'last_ground_speed', record.ground_speed)
        if record.track is not None:
            self._update(state, 'last_track', record.track)

    def _apply_position(self, state: AircraftState, record: AircraftRecord,
                        jurisdiction: str, now: float) -> List[Report]:
        if record.subtype not in POSITION_SUBTYPES or not record.has_position:
            return []

        position = (format_latitude(record.latitude), format_longitude(record.longitude))
        if not self._update(state, 'last_position', position):
            return []
        state.last_position_time = now

        if state.assign_tactical_label(f"{state.address} ({jurisdiction})"):
            return [self._deliver_tactical(state)]
        return []

    def _apply_identity(self, state: AircraftState, record: AircraftRecord,
                        jurisdiction: str) -> List[Report]:
        if not record.is_identity_sentence:
            return []
        identity = normalize_identity(record.callsign)
        if identity is None:
            return []
        if not self._update(state, 'last_identity', identity):
            return []

        label = identity
        if jurisdiction != self.classifier.unknown_label:
            label = f"{identity} ({jurisdiction})"
        if state.assign_tactical_label(label):
            return [self._deliver_tactical(state)]
        return []

    def _apply_squawk(self, state: AircraftState, record: AircraftRecord):
        if record.squawk:
            self._update(state, 'last_squawk', record.squawk)

    def _apply_emergency(self, state: AircraftState, record: AircraftRecord):
        if record.emergency:
            state.emergency = EmergencyKind.from_squawk(state.last_squawk)
            state.dirty_count += 1

    def _apply_on_ground(self, state: AircraftState, record: AircraftRecord):
        if record.on_ground:
            state.on_ground = True
            state.dirty_count += 1

    def _deliver_tactical(self, state: AircraftState) -> Report:
        report = self.emitter.tactical_report(state)
        logger.info(f"{state.address:<6}  tactical label {state.tactical_label!r}")
        self._deliver(report)
        return report

    def _deliver(self, report: Report):
        if not self.sink.submit(report.text):
            raise DeliveryRejected(report.text)

    def expire(self, now: Optional[float] = None) -> int:
        """Drop aircraft silent for longer than AIRCRAFT_EXPIRY_SECONDS."""
        now = self.clock() if now is None else now
        return self.store.purge_expired(self.config.AIRCRAFT_EXPIRY_SECONDS, now)
