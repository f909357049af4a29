import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional
from ..errors import FetchError
from ..ingestion.schema import ParameterKind, Station
from ..ingestion.smhi_client import SmhiClient, latest_value
from ..utils.clock import SystemClock
from ..utils.logging import get_logger

logger = get_logger(__name__)

class ScanStatus(str, Enum):
    COMPLETED = "completed"
    CANCELLED = "cancelled"

@dataclass(frozen=True)
class ScanResult:
    status: ScanStatus
    processed: int
    elapsed_ms: int = 0

@dataclass(frozen=True)
class StationResult:
    station: Station
    value: Optional[float]

class SequentialScanner:
    """
    Walks stations one at a time, pausing `delay_s` between them.

    Cancellation is cooperative: `cancel` is checked before every station and
    interrupts the pause, so a scan stops at most one fetch after it is signalled.
    A station whose fetch fails for any reason is reported with no value and
    the scan moves on, as the collector skips it.
    """

    def __init__(
        self,
        fetcher: SmhiClient,
        clock: Optional[SystemClock] = None,
        delay_s: float = 0.1,
        kind: ParameterKind = ParameterKind.TEMPERATURE,
    ):
        self.fetcher = fetcher
        self.clock = clock or SystemClock()
        self.delay_s = delay_s
        self.kind = kind

    def scan(
        self,
        stations: List[Station],
        cancel: threading.Event,
        on_result: Callable[[StationResult], None],
    ) -> ScanResult:
        processed = 0
        started = self.clock.now_ms()

        for station in stations:
            if cancel.is_set():
                logger.info(f"Scan cancelled after {processed} stations.")
                return ScanResult(ScanStatus.CANCELLED, processed, self.clock.now_ms() - started)

            on_result(StationResult(station, self._read(station)))
            processed += 1

            if self.clock.delay(self.delay_s, cancel):
                logger.info(f"Scan cancelled during delay after {processed} stations.")
                return ScanResult(ScanStatus.CANCELLED, processed, self.clock.now_ms() - started)

        elapsed = self.clock.now_ms() - started
        logger.info(f"Scan completed ({processed} stations in {elapsed} ms).")
        return ScanResult(ScanStatus.COMPLETED, processed, elapsed)

    def _read(self, station: Station) -> Optional[float]:
        try:
            return latest_value(self.fetcher.fetch_series(station.id, self.kind))
        except FetchError as e:
            logger.warning(f"Failed to fetch {self.kind.name.lower()} for {station.display_name}: {e}")
            return None
        except Exception as e:
            logger.error(f"Unexpected error fetching {station.display_name}: {e}")
            return None
