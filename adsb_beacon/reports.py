"""Report composition for dirty aircraft."""
import logging
from typing import List, Optional

from adsb_beacon.config import Config
from adsb_beacon.errors import StalePosition
from adsb_beacon.models.aircraft import (
    AircraftState,
    Report,
    ReportKind,
    Symbol,
    format_latitude,
    format_longitude,
)
from adsb_beacon.store import AircraftStore

logger = logging.getLogger(__name__)

DESTINATION = "BEACON"

# Symbol thresholds
#   Cessna 150 minimum speed:        57 kn
#   Boeing 757 landing speed:       126 kn
HELICOPTER_MAX_SPEED_KN = 57
LARGE_AIRCRAFT_MIN_SPEED_KN = 126
LARGE_AIRCRAFT_MIN_ALTITUDE_FT = 20000
HELICOPTER_MAX_ALTITUDE_FT = 10000

DEFAULT_TRACK = "360"
DEFAULT_SPEED = "000"
DEFAULT_CIRCLE_RADIUS_MI = 10.0


def select_symbol(ground_speed: Optional[int], altitude: Optional[int]) -> Symbol:
    """
    Pick a display symbol from speed and altitude.

    | Condition                          | Symbol         |
    |------------------------------------|----------------|
    | 0 < speed < 57 kn                  | helicopter     |
    | speed > 126 kn                     | large aircraft |
    | altitude > 20000 ft                | large aircraft |
    | helicopter and altitude > 10000 ft | small aircraft |
    | otherwise                          | small aircraft |
    """
    symbol = Symbol.SMALL_AIRCRAFT
    if ground_speed is not None:
        if 0 < ground_speed < HELICOPTER_MAX_SPEED_KN:
            symbol = Symbol.HELICOPTER
        if ground_speed > LARGE_AIRCRAFT_MIN_SPEED_KN:
            symbol = Symbol.LARGE_AIRCRAFT

    if altitude is not None:
        if altitude > LARGE_AIRCRAFT_MIN_ALTITUDE_FT:
            symbol = Symbol.LARGE_AIRCRAFT
        elif symbol == Symbol.LARGE_AIRCRAFT:
            pass
        elif symbol == Symbol.HELICOPTER and altitude > HELICOPTER_MAX_ALTITUDE_FT:
            symbol = Symbol.SMALL_AIRCRAFT
    return symbol


def display_track(track: Optional[int]) -> str:
    """Course field; 0 and unknown both render as 360."""
    if not track:
        return DEFAULT_TRACK
    return f"{track:03d}"


def display_speed(ground_speed: Optional[int]) -> str:
    if ground_speed is None:
        return DEFAULT_SPEED
    return f"{ground_speed:03d}"


def display_squawk(squawk: str) -> str:
    return f"{int(squawk):04d}" if squawk.isdigit() else squawk


def circle_radius(altitude: Optional[int], operator_altitude_ft: int) -> float:
    """
    Radius in miles of the area an altitude-only aircraft could be in.

    Two miles per thousand feet above the operator: 40000 ft -> 80 mi,
    10000 ft -> 20 mi. Defaults to 10 mi without an altitude.
    """
    if altitude is None:
        return DEFAULT_CIRCLE_RADIUS_MI
    return max(0.0, ((altitude - operator_altitude_ft) / 1000) * 2)


class ReportEmitter:
    """Composes outbound report strings for aircraft with changed state."""

    def __init__(self, store: AircraftStore, config: Optional[Config] = None):
        self.store = store
        self.config = config or Config()

    @property
    def header(self) -> str:
        return f"{self.config.CALLSIGN}>{DESTINATION}"

    def compose(self, state: AircraftState, jurisdiction: str, now: float) -> List[Report]:
        """
        Build the reports for one dirty aircraft.

        Args:
            state: Aircraft state after the current record was applied
            jurisdiction: Registry label for the aircraft's address
            now: Current time (epoch seconds)

        Returns:
            One report, or two when the circle overlay is added
        """
        reports = []
        annotations = self._annotations(state, jurisdiction)

        if state.last_position is None:
            reports.append(Report(
                ReportKind.STATUS,
                state.address,
                f"{self.header}:>{state.address}{annotations}",
            ))
            if self.config.ENABLE_CIRCLES and self.config.has_operator_position:
                reports.append(self._circle_report(state, jurisdiction))
            self._log_summary(state, '-', reports[0])
            return reports

        try:
            age = state.check_position_fresh(now, self.config.POSITION_TTL_SECONDS)
        except StalePosition as e:
            report = Report(
                ReportKind.STALE,
                state.address,
                f"{self.header}:>{state.address}{annotations} ({e.age}s)",
            )
            self._log_summary(state, f"({e.age}s)", report)
            return [report]

        latitude, longitude = state.last_position
        report = Report(
            ReportKind.POSITION,
            state.address,
            self._object_report(state, latitude, longitude, annotations),
        )
        self._log_summary(state, f"{latitude},{longitude}" if age <= 0 else f"{age}s", report)
        return [report]

    def tactical_report(self, state: AircraftState) -> Report:
        """Out-of-band report naming the aircraft on the display."""
        return Report(
            ReportKind.TACTICAL,
            state.address,
            f"{self.header}::TACTICAL :{state.address}={state.tactical_label}",
        )

    def coverage_text(self) -> str:
        percentage = self.store.coverage_percentage()
        if percentage is None:
            return ""
        return (
            f"ADS-B:{percentage:.1f}% "
            f"({self.store.count_with_position()}/{self.store.count_with_altitude()})"
        )

    def _object_report(self, state: AircraftState, latitude: str, longitude: str,
                       annotations: str) -> str:
        symbol = select_symbol(state.last_ground_speed, state.last_altitude)
        altitude = f" /A={state.last_altitude:06d}" if state.last_altitude is not None else ""
        return (
            f"{self.header}:){state.address}!{latitude}/{longitude}{symbol.value}"
            f"{display_track(state.last_track)}/{display_speed(state.last_ground_speed)}"
            f"{altitude}{annotations}"
        )

    def _circle_report(self, state: AircraftState, jurisdiction: str) -> Report:
        radius = circle_radius(state.last_altitude, self.config.OPERATOR_ALTITUDE_FT)
        text = self._object_report(
            state,
            format_latitude(self.config.OPERATOR_LATITUDE),
            format_longitude(self.config.OPERATOR_LONGITUDE),
            self._annotations(state, jurisdiction),
        )
        return Report(ReportKind.CIRCLE, state.address, f"{text} [Pmin{radius:.1f},]")

    def _annotations(self, state: AircraftState, jurisdiction: str) -> str:
        """Identity, emergency, squawk and ground flags, then the registry label."""
        text = ""
        if state.last_identity:
            text += f" {state.last_identity}"
        if state.emergency is not None:
            text += f" EMERGENCY={state.emergency.value}"
        if state.last_squawk:
            text += f" SQUAWK={display_squawk(state.last_squawk)}"
        if state.on_ground:
            text += " On_Ground"
        return f"{text} ({jurisdiction})"

    def _log_summary(self, state: AircraftState, position: str, report: Report):
        altitude = f"{state.last_altitude}ft" if state.last_altitude is not None else ""
        speed = f"{state.last_ground_speed}kn" if state.last_ground_speed is not None else ""
        track = f"{state.last_track}°" if state.last_track is not None else ""
        logger.info(
            f"{state.address:<6}  {altitude:>7}  {speed:>5}  {track:>4}  "
            f"{position:>18}  {report.text}  {self.coverage_text()}"
        )
