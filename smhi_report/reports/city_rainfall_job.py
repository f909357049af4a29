from dataclasses import dataclass
from typing import List, Optional
from ..errors import FetchError
from ..ingestion.schema import ParameterKind, Station
from ..ingestion.smhi_client import SmhiClient
from ..transformation.aggregator import AggregationResult, aggregate_rainfall
from ..utils.logging import get_logger

logger = get_logger(__name__)

def find_station(stations: List[Station], city: str) -> Optional[Station]:
    """Exact (case-insensitive) name match first, then the first name containing `city`."""
    needle = city.strip().casefold()
    if not needle:
        return None
    named = [s for s in stations if s.name]
    for s in named:
        if s.name.casefold() == needle:
            return s
    for s in named:
        if needle in s.name.casefold():
            return s
    return None

@dataclass(frozen=True)
class CityRainfallReport:
    city: str
    station: Optional[Station] = None
    result: Optional[AggregationResult] = None
    error: Optional[str] = None

class CityRainfallJob:
    def __init__(self, client: SmhiClient):
        self.client = client

    def run(self, city: str) -> CityRainfallReport:
        logger.info(f"Calculating total rainfall in {city} (last months)...")
        stations = self.client.fetch_stations(ParameterKind.RAINFALL)

        station = find_station(stations, city)
        if station is None:
            logger.warning(f"No station found matching '{city}'.")
            return CityRainfallReport(city)

        try:
            series = self.client.fetch_series(station.id, ParameterKind.RAINFALL)
        except FetchError as e:
            logger.error(f"Rainfall fetch failed for {city}: {e}")
            return CityRainfallReport(city, station, error=str(e))

        result = aggregate_rainfall(series.value or []) if series is not None else None
        if result is None:
            logger.warning(f"No rainfall data retrieved for {city}.")
            return CityRainfallReport(city, station)

        if result.unparsed_count:
            logger.warning(f"{result.unparsed_count} rainfall values for {city} could not be parsed, counted as 0 mm")
        logger.info(f"Total rainfall in {city}: {result.grand_total} mm")
        return CityRainfallReport(city, station, result)
