"""Line-oriented SBS-1 feed sources."""
import logging
import socket
import threading
import time
from typing import Iterator, Optional

from adsb_beacon.config import Config
from adsb_beacon.errors import FeedConnectionLost

logger = logging.getLogger(__name__)


class SbsFeedClient:
    """
    Reads lines from a decoder's BaseStation TCP port (30003 by default).

    Reads poll in short slices so a shutdown request is seen within about
    POLL_INTERVAL seconds; going FEED_TIMEOUT_SECONDS without data is
    treated as a lost feed.
    """

    POLL_INTERVAL = 1.0
    RECV_SIZE = 4096

    def __init__(self, config: Optional[Config] = None,
                 stop_event: Optional[threading.Event] = None):
        self.config = config or Config()
        self.stop_event = stop_event or threading.Event()
        self.host = self.config.FEED_HOST
        self.port = self.config.FEED_PORT
        self._socket = None

    def connect(self):
        """Open the TCP connection, raising FeedConnectionLost on failure."""
        try:
            self._socket = socket.create_connection(
                (self.host, self.port),
                timeout=self.config.FEED_TIMEOUT_SECONDS
            )
        except OSError as e:
            raise FeedConnectionLost(f"Couldn't connect to {self.host}:{self.port} : {e}") from e
        self._socket.settimeout(min(self.POLL_INTERVAL, self.config.FEED_TIMEOUT_SECONDS))
        logger.info(f"Connected to feed at {self.host}:{self.port}")

    def lines(self) -> Iterator[str]:
        """
        Yield decoded lines until shutdown is requested.

        Raises:
            FeedConnectionLost: if the peer closes, errors, or goes silent
        """
        if self._socket is None:
            self.connect()

        buffer = b''
        last_data = time.monotonic()
        while not self.stop_event.is_set():
            try:
                chunk = self._socket.recv(self.RECV_SIZE)
            except socket.timeout:
                idle = time.monotonic() - last_data
                if idle > self.config.FEED_TIMEOUT_SECONDS:
                    raise FeedConnectionLost(f"No data from {self.host}:{self.port} for {idle:.0f}s")
                continue
            except OSError as e:
                raise FeedConnectionLost(f"Error reading from {self.host}:{self.port}: {e}") from e

            if not chunk:
                raise FeedConnectionLost(f"Feed {self.host}:{self.port} closed the connection")

            last_data = time.monotonic()
            buffer += chunk
            while b'\n' in buffer:
                raw, buffer = buffer.split(b'\n', 1)
                yield raw.decode('latin-1')
                if self.stop_event.is_set():
                    return

    def close(self):
        if self._socket is not None:
            self._socket.close()
            self._socket = None
            logger.info(f"Closed feed connection to {self.host}:{self.port}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class FileFeed:
    """Replays lines from a file (for example a saved BaseStation capture)."""

    def __init__(self, path: str, stop_event: Optional[threading.Event] = None):
        self.path = path
        self.stop_event = stop_event or threading.Event()
        self._file = None

    def lines(self) -> Iterator[str]:
        try:
            self._file = open(self.path, 'r', encoding='latin-1')
        except OSError as e:
            raise FeedConnectionLost(f"Couldn't open {self.path}: {e}") from e

        for line in self._file:
            if self.stop_event.is_set():
                return
            yield line

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
