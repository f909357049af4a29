import requests
from typing import Any, Dict, List, Optional
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential
from .schema import ObservationSeries, ParameterKind, Station
from .validator import PayloadValidator
from ..errors import DirectoryUnavailable, FetchError, StationNotFound
from ..utils.logging import get_logger

logger = get_logger(__name__)

def _is_transient(exc: BaseException) -> bool:
    if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
        return True
    if isinstance(exc, requests.HTTPError) and exc.response is not None:
        status = exc.response.status_code
        return status == 429 or status >= 500
    return False

def latest_value(series: Optional[ObservationSeries]) -> Optional[float]:
    """Numeric value of the last point in the series, the latest reading wins."""
    if series is None or not series.value:
        return None
    return series.value[-1].numeric_value()

class SmhiClient:
    def __init__(self, base_url: str, timeout_s: int = 30, validator: Optional[PayloadValidator] = None):
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout_s = timeout_s
        self.validator = validator or PayloadValidator()

    @retry(
        retry=retry_if_exception(_is_transient),
        stop=stop_after_attempt(5),
        wait=wait_exponential(min=1, max=10),
        reraise=True,
    )
    def _get(self, path: str) -> Dict[str, Any]:
        r = requests.get(self.base_url + path, headers={"Accept": "application/json"}, timeout=self.timeout_s)
        if r.status_code == 404:
            raise StationNotFound(f"{path} not found")
        r.raise_for_status()
        return r.json()

    def fetch_stations(self, kind: ParameterKind = ParameterKind.TEMPERATURE) -> List[Station]:
        try:
            payload = self._get(kind.directory_path)
        except (requests.RequestException, FetchError) as e:
            logger.error(f"Station list fetch failed for {kind.name.lower()}: {e}")
            raise DirectoryUnavailable(f"Failed to fetch station list: {e}") from e

        directory, err = self.validator.validate_directory(payload)
        if directory is None:
            logger.error(f"Station list payload rejected: {err}")
            raise DirectoryUnavailable(f"Malformed station list: {err}")

        stations = directory.station or []
        logger.info(f"Fetched {len(stations)} stations reporting {kind.name.lower()}")
        return stations

    def fetch_series(self, station_id: int, kind: ParameterKind) -> Optional[ObservationSeries]:
        """
        Latest-window series for one station. Returns None when upstream has
        nothing for the station (404); raises FetchError for anything else.
        """
        try:
            payload = self._get(kind.series_path(station_id))
        except StationNotFound:
            logger.debug(f"No {kind.name.lower()} data for station {station_id} (404)")
            return None
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise FetchError(status, str(e)) from e
        except requests.RequestException as e:
            raise FetchError(None, str(e)) from e

        series, err = self.validator.validate_series(payload)
        if series is None:
            raise FetchError(None, f"Malformed {kind.name.lower()} payload for station {station_id}: {err}")
        return series
