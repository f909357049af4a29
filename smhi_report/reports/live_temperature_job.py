import threading
from typing import Callable
from ..ingestion.schema import ParameterKind
from ..ingestion.smhi_client import SmhiClient
from ..transformation.scanner import ScanResult, SequentialScanner, StationResult
from ..utils.logging import get_logger

logger = get_logger(__name__)

class LiveTemperatureJob:
    def __init__(self, client: SmhiClient, scanner: SequentialScanner):
        self.client = client
        self.scanner = scanner

    def run(self, cancel: threading.Event, on_result: Callable[[StationResult], None]) -> ScanResult:
        logger.info("Starting temperature display with cancellation support...")
        stations = self.client.fetch_stations(ParameterKind.TEMPERATURE)
        return self.scanner.scan(stations, cancel, on_result)
