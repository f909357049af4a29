import sys
import threading
from typing import List, Optional

from smhi_report.config import Settings
from smhi_report.errors import DirectoryUnavailable
from smhi_report.ingestion.smhi_client import SmhiClient

from smhi_report.transformation.collector import ConcurrentCollector
from smhi_report.transformation.scanner import ScanStatus, SequentialScanner, StationResult

from smhi_report.reports.average_temperature_job import AverageTemperatureJob
from smhi_report.reports.city_rainfall_job import CityRainfallJob
from smhi_report.reports.live_temperature_job import LiveTemperatureJob

from smhi_report.utils.clock import SystemClock
from smhi_report.utils.formatting import format_value
from smhi_report.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

def build_client(s: Settings) -> SmhiClient:
    return SmhiClient(s.smhi_base_url, timeout_s=s.request_timeout_s)

def average_temperature(s: Settings) -> None:
    client = build_client(s)
    job = AverageTemperatureJob(client, ConcurrentCollector(client, max_workers=s.collector_max_workers))
    try:
        summary = job.run()
    except DirectoryUnavailable as e:
        print(f"Failed to fetch temperature data: {e}")
        return

    if summary.average is None:
        print("No valid temperature data available.")
    else:
        print(f"The average temperature in Sweden for the last hour was {format_value(summary.average)} degrees")
    print(f"{summary.skipped} of {summary.station_count} stations had no recent temperature data.")

def city_rainfall(s: Settings, city: str) -> None:
    try:
        report = CityRainfallJob(build_client(s)).run(city)
    except DirectoryUnavailable as e:
        print(f"Failed to fetch rainfall data for {city}: {e}")
        return

    if report.station is None:
        print(f"No station found for {city}.")
        return
    print(f"{city} Station ID: {report.station.id}, Name: {report.station.name}")

    if report.error:
        print(f"Failed to fetch rainfall data for {city}: {report.error}")
        return
    result = report.result
    if result is None:
        print(f"No rainfall data available for {city}.")
        return

    for month in result.monthly_totals:
        print(f"Rainfall in {month.month}: {format_value(month.total)} mm")
    print(
        f"\nBetween {result.from_date.isoformat()} and {result.to_date.isoformat()} "
        f"the total rainfall in {city} was {format_value(result.grand_total)} millimeters"
    )
    if result.unparsed_count:
        print(f"{result.unparsed_count} of {result.point_count} measurements had no usable value.")

def _print_station(r: StationResult) -> None:
    name = r.station.display_name
    print(f"{name}: {format_value(r.value)}" if r.value is not None else f"{name}:")

def _wait_for_enter(cancel: threading.Event) -> None:
    try:
        line = sys.stdin.readline()
    except (OSError, ValueError):
        return
    # "" is end of input (cron, pipes, /dev/null), not a key press
    if line:
        cancel.set()

def live_temperatures(s: Settings) -> None:
    client = build_client(s)
    scanner = SequentialScanner(client, SystemClock(), delay_s=s.scan_delay_ms / 1000)
    cancel = threading.Event()

    print("Press Enter to cancel...\n")
    threading.Thread(target=_wait_for_enter, args=(cancel,), daemon=True, name="cancel-listener").start()

    try:
        result = LiveTemperatureJob(client, scanner).run(cancel, _print_station)
    except DirectoryUnavailable as e:
        print(f"Unexpected error during temperature display: {e}")
        return

    if result.status is ScanStatus.CANCELLED:
        print(f"\nOperation cancelled by user after {result.processed} stations.")
    else:
        print("\nTemperature display completed.")

def main(argv: Optional[List[str]] = None):
    args = sys.argv[1:] if argv is None else argv
    s = Settings()
    setup_logging(s.log_level)

    city = args[0] if args else s.rainfall_city
    average_temperature(s)
    city_rainfall(s, city)
    live_temperatures(s)

if __name__ == "__main__":
    main()
