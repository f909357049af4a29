from datetime import date, datetime
from dateutil import tz

def to_utc_datetime(epoch_ms: int) -> datetime:
    return datetime.fromtimestamp(epoch_ms / 1000, tz=tz.UTC)

def to_utc_date(epoch_ms: int) -> date:
    return to_utc_datetime(epoch_ms).date()

def month_key(epoch_ms: int) -> str:
    """Calendar month of an epoch-millis timestamp as 'YYYY-MM' (UTC)."""
    return to_utc_datetime(epoch_ms).strftime("%Y-%m")
