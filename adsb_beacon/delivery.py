"""Report delivery sinks."""
import logging
import os
import socket
from abc import ABC, abstractmethod
from typing import Optional

import requests

from adsb_beacon.config import Config

logger = logging.getLogger(__name__)


class BaseDeliverySink(ABC):
    """
    Abstract base class for report sinks.
    A sink accepts one report string at a time and says whether it was taken.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or Config()

    @abstractmethod
    def submit(self, report: str) -> bool:
        """
        Deliver a report.

        Returns:
            True if the receiver accepted it, False if it was rejected
        """

    def close(self):
        """Release any transport resources."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class UdpDeliverySink(BaseDeliverySink):
    """
    Injects reports through a station's UDP server port.

    Each datagram is "CALLSIGN,PASSCODE[,TO_RF]\\n<report>" and the station
    answers ACK or NACK.
    """

    REPLY_SIZE = 1024

    def __init__(self, config: Optional[Config] = None):
        super().__init__(config)
        self.address = (self.config.DELIVERY_HOST, self.config.DELIVERY_PORT)
        self._socket = None

    def _get_socket(self) -> socket.socket:
        if self._socket is None:
            self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
            self._socket.settimeout(self.config.DELIVERY_TIMEOUT_SECONDS)
        return self._socket

    def _build_datagram(self, report: str) -> bytes:
        credentials = f"{self.config.CALLSIGN},{self.config.PASSCODE}"
        if self.config.DELIVERY_TO_RF:
            credentials += ",TO_RF"
        return f"{credentials}\n{report}".encode('utf-8')

    def submit(self, report: str) -> bool:
        sock = self._get_socket()
        try:
            sock.sendto(self._build_datagram(report), self.address)
            reply, _ = sock.recvfrom(self.REPLY_SIZE)
        except socket.timeout:
            logger.error(f"No reply from {self.address[0]}:{self.address[1]} "
                         f"within {self.config.DELIVERY_TIMEOUT_SECONDS}s")
            return False
        except OSError as e:
            logger.error(f"Error delivering report to {self.address[0]}:{self.address[1]}: {e}")
            return False

        text = reply.decode('utf-8', errors='replace').strip()
        if 'NACK' in text:
            logger.error("Received NACK: callsign/passcode don't match?")
            return False
        if 'ACK' not in text:
            logger.warning(f"Unexpected reply from station: {text!r}")
            return False
        return True

    def close(self):
        if self._socket is not None:
            self._socket.close()
            self._socket = None


class HttpDeliverySink(BaseDeliverySink):
    """
    POSTs reports to an HTTP endpoint.
    Authenticates with the callsign and passcode as basic auth.
    """

    def __init__(self, config: Optional[Config] = None):
        super().__init__(config)
        self.url = self.config.DELIVERY_URL
        self.session = requests.Session()
        self.session.auth = (self.config.CALLSIGN, self.config.PASSCODE)

    def submit(self, report: str) -> bool:
        headers = {"Content-Type": "text/plain; charset=utf-8"}
        try:
            response = self.session.post(
                self.url,
                data=report.encode('utf-8'),
                headers=headers,
                timeout=self.config.DELIVERY_TIMEOUT_SECONDS
            )
            response.raise_for_status()
            return True

        except requests.exceptions.HTTPError as e:
            logger.error(f"HTTP error delivering report: {e}")
            return False
        except requests.exceptions.RequestException as e:
            logger.error(f"Error delivering report: {e}")
            return False

    def close(self):
        self.session.close()


class ReportLogSink(BaseDeliverySink):
    """Wraps another sink and appends every accepted report to a log file."""

    def __init__(self, inner: BaseDeliverySink, path: str, config: Optional[Config] = None):
        super().__init__(config)
        self.inner = inner
        self.path = path
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

    def submit(self, report: str) -> bool:
        accepted = self.inner.submit(report)
        if accepted:
            with open(self.path, 'a', encoding='utf-8') as f:
                f.write(report + '\n')
        return accepted

    def close(self):
        self.inner.close()


# Factory function to get the appropriate sink
def get_delivery_sink(config: Optional[Config] = None) -> BaseDeliverySink:
    """
    Instantiate the sink selected by DELIVERY_MODE.

    Returns:
        Sink instance, wrapped in a ReportLogSink when the report log is enabled
    """
    config = config or Config()

    if config.DELIVERY_MODE == 'http':
        logger.info(f"Delivering reports via HTTP to {config.DELIVERY_URL}")
        sink = HttpDeliverySink(config)
    else:
        logger.info(f"Delivering reports via UDP to {config.DELIVERY_HOST}:{config.DELIVERY_PORT}")
        sink = UdpDeliverySink(config)

    if config.ENABLE_REPORT_LOG:
        logger.info(f"Logging reports to {config.REPORT_LOG_PATH}")
        sink = ReportLogSink(sink, config.REPORT_LOG_PATH, config)
    return sink
