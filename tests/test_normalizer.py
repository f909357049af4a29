from datetime import date

from smhi_report.ingestion.normalizer import month_key, to_utc_date


def test_month_key_uses_utc():
    assert month_key(1740895201000) == "2025-03"
    # 2025-02-28T23:30:00Z, still February in UTC
    assert month_key(1740785400000) == "2025-02"


def test_to_utc_date():
    assert to_utc_date(1740895201000) == date(2025, 3, 2)
    assert to_utc_date(1740981601000) == date(2025, 3, 3)
