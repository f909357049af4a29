from dataclasses import dataclass
import os

@dataclass(frozen=True)
class Settings:
    # SMHI open data (meteorological observations)
    smhi_base_url: str = os.environ.get(
        "SMHI_BASE_URL", "https://opendata-download-metobs.smhi.se/api/version/latest/"
    )
    request_timeout_s: int = int(os.environ.get("REQUEST_TIMEOUT_S", "30"))

    # Collector options
    collector_max_workers: int = int(os.environ.get("COLLECTOR_MAX_WORKERS", "0"))  # 0 = one worker per station

    # Live display
    scan_delay_ms: int = int(os.environ.get("SCAN_DELAY_MS", "100"))

    # Rainfall report
    rainfall_city: str = os.environ.get("RAINFALL_CITY", "Lund")

    log_level: str = os.environ.get("LOG_LEVEL", "INFO")
