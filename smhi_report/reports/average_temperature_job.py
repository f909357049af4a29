from dataclasses import dataclass
from typing import Optional
from ..ingestion.schema import ParameterKind
from ..ingestion.smhi_client import SmhiClient
from ..transformation.aggregator import average
from ..transformation.collector import ConcurrentCollector
from ..utils.logging import get_logger

logger = get_logger(__name__)

@dataclass(frozen=True)
class TemperatureSummary:
    average: Optional[float]
    station_count: int
    reading_count: int
    skipped: int

class AverageTemperatureJob:
    def __init__(self, client: SmhiClient, collector: ConcurrentCollector):
        self.client = client
        self.collector = collector

    def run(self) -> TemperatureSummary:
        logger.info("Calculating average temperature in Sweden (last hour)...")
        stations = self.client.fetch_stations(ParameterKind.TEMPERATURE)
        result = self.collector.collect(stations, ParameterKind.TEMPERATURE)

        avg = average(result.readings)
        if avg is None:
            logger.warning("No temperature data for averaging.")
        else:
            logger.info(f"Average temp: {avg:.1f} °C over {len(result.readings)} stations")

        return TemperatureSummary(
            average=avg,
            station_count=len(stations),
            reading_count=len(result.readings),
            skipped=result.skipped,
        )
