import json
import threading
from typing import Callable, Dict, List, Optional

import pytest
import requests

from smhi_report.ingestion.schema import ObservationSeries, ParameterKind


def make_response(status: int, payload=None, url: str = "https://example.test/") -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r.url = url
    r.reason = "OK" if status < 400 else "Error"
    r.encoding = "utf-8"
    r._content = json.dumps(payload).encode("utf-8") if payload is not None else b""
    return r


def series(*points) -> ObservationSeries:
    """series((from_ms, value), ...) -> ObservationSeries"""
    return ObservationSeries.model_validate(
        {"value": [{"from": f, "to": f + 3600_000, "value": v, "quality": "G"} for f, v in points]}
    )


class FakeFetcher:
    """Answers fetch_series from a table: series, None, or an exception to raise."""

    def __init__(self, table: Dict[int, object]):
        self.table = table
        self.calls: List[int] = []
        self.lock = threading.Lock()

    def fetch_series(self, station_id: int, kind: ParameterKind) -> Optional[ObservationSeries]:
        with self.lock:
            self.calls.append(station_id)
        answer = self.table.get(station_id)
        if isinstance(answer, Exception):
            raise answer
        return answer


class VirtualClock:
    """Records delays instead of sleeping; `on_delay(n)` runs before the n-th delay returns."""

    def __init__(self, on_delay: Optional[Callable[[int], None]] = None):
        self.now = 0
        self.delays: List[float] = []
        self.on_delay = on_delay

    def now_ms(self) -> int:
        return self.now

    def delay(self, seconds: float, cancel: Optional[threading.Event] = None) -> bool:
        self.delays.append(seconds)
        if self.on_delay is not None:
            self.on_delay(len(self.delays))
        if cancel is not None and cancel.is_set():
            return True
        self.now += int(seconds * 1000)
        return False


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def series_factory():
    return series


@pytest.fixture
def fake_fetcher():
    return FakeFetcher


@pytest.fixture
def virtual_clock():
    return VirtualClock
