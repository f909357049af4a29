from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, Mapping, Optional, Tuple
from ..ingestion.normalizer import month_key, to_utc_date
from ..ingestion.schema import ObservationPoint

@dataclass(frozen=True)
class MonthlyTotal:
    month: str
    total: Decimal

@dataclass(frozen=True)
class AggregationResult:
    from_date: date
    to_date: date
    monthly_totals: Tuple[MonthlyTotal, ...]
    grand_total: Decimal
    point_count: int
    unparsed_count: int = 0
    excluded_count: int = 0

def average(readings: Mapping[str, float]) -> Optional[float]:
    """Plain mean of the readings, None when there is nothing to average."""
    if not readings:
        return None
    return sum(readings.values()) / len(readings)

def aggregate_rainfall(points: Iterable[ObservationPoint]) -> Optional[AggregationResult]:
    """
    Sum rainfall per calendar month (UTC) and overall.

    Points with from <= 0 are malformed and dropped entirely; points whose value
    does not parse count as 0 mm. Returns None if no point survives the filter.
    """
    buckets: Dict[str, Decimal] = {}
    grand_total = Decimal(0)
    first_ms: Optional[int] = None
    last_ms: Optional[int] = None
    kept = unparsed = excluded = 0

    for p in points:
        if p.from_ <= 0:
            excluded += 1
            continue
        kept += 1

        value = p.decimal_value()
        if value is None:
            unparsed += 1
            value = Decimal(0)

        key = month_key(p.from_)
        buckets[key] = buckets.get(key, Decimal(0)) + value
        grand_total += value

        first_ms = p.from_ if first_ms is None else min(first_ms, p.from_)
        last_ms = p.from_ if last_ms is None else max(last_ms, p.from_)

    if kept == 0:
        return None

    return AggregationResult(
        from_date=to_utc_date(first_ms),
        to_date=to_utc_date(last_ms),
        monthly_totals=tuple(MonthlyTotal(k, buckets[k]) for k in sorted(buckets)),
        grand_total=grand_total,
        point_count=kept,
        unparsed_count=unparsed,
        excluded_count=excluded,
    )
