import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Dict, List, Optional
from ..errors import FetchError, StationNotFound
from ..ingestion.schema import ParameterKind, Station
from ..ingestion.smhi_client import SmhiClient, latest_value
from ..utils.logging import get_logger

logger = get_logger(__name__)

@dataclass(frozen=True)
class CollectionResult:
    readings: Dict[str, float]
    collected: int
    skipped: int

@dataclass
class ReadingAccumulator:
    """Station readings shared between fetch workers."""
    readings: Dict[str, float] = field(default_factory=dict)
    collected: int = 0
    skipped: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock)

    def add(self, station_name: str, value: float) -> None:
        with self.lock:
            # duplicate station names: last write wins
            self.readings[station_name] = value
            self.collected += 1

    def skip(self) -> None:
        with self.lock:
            self.skipped += 1

    def result(self) -> CollectionResult:
        with self.lock:
            return CollectionResult(dict(self.readings), self.collected, self.skipped)

class ConcurrentCollector:
    def __init__(self, fetcher: SmhiClient, max_workers: Optional[int] = None):
        self.fetcher = fetcher
        self.max_workers = max_workers or None

    def collect(self, stations: List[Station], kind: ParameterKind) -> CollectionResult:
        acc = ReadingAccumulator()
        if not stations:
            return acc.result()

        # None -> one worker per station
        workers = self.max_workers or len(stations)
        logger.info(f"Collecting {kind.name.lower()} for {len(stations)} stations ({workers} workers)")

        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="station-fetch") as executor:
            future_to_station = {
                executor.submit(self._collect_one, station, kind, acc): station
                for station in stations
            }

            for future in as_completed(future_to_station):
                station = future_to_station[future]
                try:
                    future.result()
                except Exception as e:
                    acc.skip()
                    logger.error(f"Unexpected error collecting {station.display_name}: {e}")

        result = acc.result()
        logger.info(f"Collected {result.collected} readings ({result.skipped} stations skipped)")
        return result

    def _collect_one(self, station: Station, kind: ParameterKind, acc: ReadingAccumulator) -> None:
        try:
            series = self.fetcher.fetch_series(station.id, kind)
        except StationNotFound:
            logger.debug(f"{kind.name.capitalize()} data not found for {station.display_name} (404).")
            acc.skip()
            return
        except FetchError as e:
            logger.warning(f"Failed to get {kind.name.lower()} for {station.display_name}: {e}")
            acc.skip()
            return

        value = latest_value(series)
        if value is None:
            acc.skip()
            return
        acc.add(station.display_name, value)
