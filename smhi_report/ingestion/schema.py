import math
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def parse_decimal(raw: Optional[str]) -> Optional[Decimal]:
    """Invariant-culture parse of an observation value; None instead of raising."""
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    # NaN/Infinity would poison every sum they touch
    if not value.is_finite():
        return None
    return value


class ParameterKind(Enum):
    TEMPERATURE = (1, "latest-hour")
    RAINFALL = (5, "latest-months")

    def __init__(self, parameter_id: int, period: str):
        self.parameter_id = parameter_id
        self.period = period

    @property
    def directory_path(self) -> str:
        return f"parameter/{self.parameter_id}.json"

    def series_path(self, station_id: int) -> str:
        return f"parameter/{self.parameter_id}/station/{station_id}/period/{self.period}/data.json"


class Station(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: Optional[str] = None
    height: Optional[float] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def display_name(self) -> str:
        return self.name or f"Station_{self.id}"


class ObservationPoint(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    from_: int = Field(alias="from")
    # never read by the reports; absent on some upstream rows
    to: int = 0
    value: Optional[str] = None
    quality: Optional[str] = None

    @field_validator("value", mode="before")
    @classmethod
    def _scalar_to_str(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    def decimal_value(self) -> Optional[Decimal]:
        return parse_decimal(self.value)

    def numeric_value(self) -> Optional[float]:
        d = self.decimal_value()
        if d is None:
            return None
        f = float(d)
        # finite decimals such as 1e400 still overflow a float
        return f if math.isfinite(f) else None


class ObservationSeries(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    # None means "no data", distinct from an empty list
    value: Optional[List[ObservationPoint]] = None


class StationDirectory(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    station: Optional[List[Station]] = None
