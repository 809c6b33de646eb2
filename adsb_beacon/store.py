"""In-memory store of per-aircraft state."""
import logging
from typing import Dict, Iterator, Optional

from adsb_beacon.models.aircraft import AircraftState

logger = logging.getLogger(__name__)


class AircraftStore:
    """
    Holds AircraftState keyed by address.

    Owned by a single AircraftTracker and mutated only from the processing
    thread. Feeding it from more than one thread requires serialising access
    per address.
    """

    def __init__(self):
        """Initialize an empty store."""
        self._aircraft: Dict[str, AircraftState] = {}

    def __len__(self) -> int:
        return len(self._aircraft)

    def __contains__(self, address: str) -> bool:
        return address in self._aircraft

    def __iter__(self) -> Iterator[AircraftState]:
        return iter(list(self._aircraft.values()))

    def get(self, address: str) -> Optional[AircraftState]:
        return self._aircraft.get(address)

    def get_or_create(self, address: str, now: float) -> AircraftState:
        """Return the state for an address, creating it on first sight."""
        state = self._aircraft.get(address)
        if state is None:
            state = AircraftState(address=address, last_seen=now)
            self._aircraft[address] = state
            logger.debug(f"New aircraft {address} ({len(self._aircraft)} tracked)")
        return state

    def purge_expired(self, max_age_seconds: float, now: float) -> int:
        """
        Forget aircraft that have not been heard from in max_age_seconds.

        Returns:
            Number of aircraft removed
        """
        expired = [
            address for address, state in self._aircraft.items()
            if now - state.last_seen > max_age_seconds
        ]
        for address in expired:
            del self._aircraft[address]

        if expired:
            logger.info(f"Expired {len(expired)} aircraft not seen for {max_age_seconds:.0f}s")
        return len(expired)

    def count_with_position(self) -> int:
        return sum(1 for state in self._aircraft.values() if state.last_position is not None)

    def count_with_altitude(self) -> int:
        return sum(1 for state in self._aircraft.values() if state.last_altitude is not None)

    def coverage_percentage(self) -> Optional[float]:
        """
        Share of altitude-reporting aircraft that also report a position.

        Approximates ADS-B equipage among Mode S aircraft in range. None when
        no aircraft has reported an altitude.
        """
        with_altitude = self.count_with_altitude()
        if with_altitude == 0:
            return None
        return (self.count_with_position() * 1.0 / with_altitude) * 100.0

    def get_statistics(self) -> Dict:
        """Get summary statistics."""
        stats = {}
        stats['total_aircraft'] = len(self._aircraft)
        stats['with_position'] = self.count_with_position()
        stats['with_altitude'] = self.count_with_altitude()
        stats['with_identity'] = sum(
            1 for state in self._aircraft.values() if state.last_identity is not None
        )
        stats['coverage_percentage'] = self.coverage_percentage()
        return stats
