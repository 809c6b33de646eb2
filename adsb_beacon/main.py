"""Main application module."""
import argparse
import logging
import signal
import sys
import threading
import time
from typing import Optional

from adsb_beacon.config import Config
from adsb_beacon.delivery import BaseDeliverySink, get_delivery_sink
from adsb_beacon.errors import ConfigurationError, DeliveryRejected, FeedConnectionLost
from adsb_beacon.feed import FileFeed, SbsFeedClient
from adsb_beacon.registry import RegistryClassifier
from adsb_beacon.store import AircraftStore
from adsb_beacon.tracker import AircraftTracker

# Configure logging from environment
log_level = Config.LOG_LEVEL
logging.basicConfig(
    level=getattr(logging, log_level.upper(), logging.INFO),
    format="%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-20s | %(filename)-15s | %(funcName)-15s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


class BeaconMonitor:
    """Main application class: feed in, beacon reports out."""

    def __init__(self, config: Optional[Config] = None,
                 sink: Optional[BaseDeliverySink] = None,
                 feed=None,
                 stop_event: Optional[threading.Event] = None):
        """Initialize the beacon monitor."""
        self.config = config or Config()
        self.config.validate()

        self.stop_event = stop_event or threading.Event()
        self.sink = sink or get_delivery_sink(self.config)
        self.feed = feed or SbsFeedClient(self.config, self.stop_event)
        self.store = AircraftStore()
        self.classifier = RegistryClassifier()
        self.tracker = AircraftTracker(self.sink, self.store, self.classifier, self.config)

        self.records_processed = 0
        self.reports_delivered = 0
        self._last_sweep = self.tracker.clock()

        rule_counts = self.classifier.count_rules()
        logger.info("=" * 80)
        logger.info("ADS-B beacon gateway initialized")
        logger.info(f"Software Version: {self.config.VERSION}")
        logger.info(f"Callsign: {self.config.CALLSIGN}")
        logger.info(f"Feed: {self.config.FEED_HOST}:{self.config.FEED_PORT}")
        logger.info(f"Position TTL: {self.config.POSITION_TTL_SECONDS}s")
        logger.info(f"Circles: {'on' if self.config.ENABLE_CIRCLES else 'off'}, "
                    f"report log: {'on' if self.config.ENABLE_REPORT_LOG else 'off'}")
        logger.info(f"Registry rules: {rule_counts['top_level']} top-level, "
                    f"{rule_counts['overrides']} overrides, {rule_counts['regional']} regional")
        logger.info("=" * 80)

    def run(self) -> int:
        """
        Process feed lines until shutdown or a fatal error.

        Returns:
            Number of lines processed

        Raises:
            FeedConnectionLost: if the feed fails
            DeliveryRejected: if the sink refuses a report
        """
        try:
            for line in self.feed.lines():
                delivered = self.tracker.process_line(line)
                self.records_processed += 1
                self.reports_delivered += len(delivered)
                self._sweep_expired()
        finally:
            self.close()
        return self.records_processed

    def _sweep_expired(self):
        now = self.tracker.clock()
        if now - self._last_sweep >= self.config.EXPIRY_SWEEP_INTERVAL_SECONDS:
            self.tracker.expire(now)
            self._last_sweep = now

    def stop(self, signum=None, frame=None):
        """Request shutdown; the record in flight is finished first."""
        if signum is not None:
            logger.info(f"Received signal {signum}, shutting down")
        self.stop_event.set()

    def close(self):
        """Close feed and sink, then log session statistics."""
        self.feed.close()
        self.sink.close()

        stats = self.store.get_statistics()
        coverage = stats['coverage_percentage']
        logger.info("=" * 80)
        logger.info("Session Statistics:")
        logger.info(f"  Records processed: {self.records_processed}")
        logger.info(f"  Reports delivered: {self.reports_delivered}")
        logger.info(f"  Aircraft tracked: {stats['total_aircraft']}")
        logger.info(f"  With position: {stats['with_position']}")
        logger.info(f"  With altitude: {stats['with_altitude']}")
        logger.info(f"  With identity: {stats['with_identity']}")
        if coverage is not None:
            logger.info(f"  ADS-B coverage: {coverage:.1f}%")
        logger.info("=" * 80)


def build_config(args: argparse.Namespace) -> Config:
    """Apply command-line overrides on top of the environment configuration."""
    config = Config()
    if args.callsign:
        config.CALLSIGN = args.callsign.strip().upper()
    if args.passcode:
        config.PASSCODE = args.passcode.strip()
    if args.circles:
        config.ENABLE_CIRCLES = True
    if args.logging:
        config.ENABLE_REPORT_LOG = True
    return config


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Convert SBS-1 aircraft feed to beacon reports')
    parser.add_argument('callsign', nargs='?',
                        help='Callsign for injection (not the station\'s own callsign)')
    parser.add_argument('passcode', nargs='?', help='Passcode for injection')
    parser.add_argument('--circles', action='store_true',
                        help='Draw probability circles around the station for altitude-only aircraft')
    parser.add_argument('--logging', action='store_true',
                        help='Append delivered reports to the report log')
    parser.add_argument('--replay', metavar='FILE',
                        help='Read feed lines from FILE instead of the network')
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = build_config(args)
        stop_event = threading.Event()
        feed = FileFeed(args.replay, stop_event) if args.replay else None
        monitor = BeaconMonitor(config, feed=feed, stop_event=stop_event)
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to start beacon gateway: {e}", exc_info=True)
        sys.exit(1)

    signal.signal(signal.SIGTERM, monitor.stop)
    signal.signal(signal.SIGINT, monitor.stop)

    start_time = time.time()
    try:
        monitor.run()
    except FeedConnectionLost as e:
        logger.error(f"Feed lost: {e}")
        sys.exit(1)
    except DeliveryRejected as e:
        logger.error(f"Fatal: {e}")
        sys.exit(1)

    logger.info(f"Stopped after {time.time() - start_time:.0f}s")


if __name__ == '__main__':
    main()
