from decimal import Decimal

import pytest

from smhi_report.ingestion.schema import (
    ObservationPoint,
    ObservationSeries,
    ParameterKind,
    Station,
    StationDirectory,
    parse_decimal,
)
from smhi_report.ingestion.validator import PayloadValidator


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2.3", Decimal("2.3")),
        (" -4.5 ", Decimal("-4.5")),
        ("0", Decimal("0")),
        ("1e2", Decimal("100")),
    ],
)
def test_parse_decimal_accepts_invariant_numbers(raw, expected):
    assert parse_decimal(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", "2,3", "NaN", "Infinity", "-"])
def test_parse_decimal_returns_none_instead_of_raising(raw):
    assert parse_decimal(raw) is None


def test_point_reads_from_alias_and_parses_value():
    p = ObservationPoint.model_validate({"from": 1740895201000, "to": 1740981600000, "value": "1.2", "quality": "G"})
    assert p.from_ == 1740895201000
    assert p.numeric_value() == pytest.approx(1.2)
    assert p.decimal_value() == Decimal("1.2")


def test_point_coerces_numeric_wire_value_to_string():
    p = ObservationPoint.model_validate({"from": 1, "value": 3.5})
    assert p.value == "3.5"
    assert p.numeric_value() == 3.5


def test_point_without_value_has_no_numeric_value():
    p = ObservationPoint.model_validate({"from": 1})
    assert p.value is None
    assert p.numeric_value() is None


def test_series_distinguishes_absent_from_empty():
    assert ObservationSeries.model_validate({}).value is None
    assert ObservationSeries.model_validate({"value": []}).value == []


def test_station_display_name_falls_back_to_id():
    assert Station(id=7, name="Lund").display_name == "Lund"
    assert Station(id=7).display_name == "Station_7"


def test_parameter_kind_paths():
    assert ParameterKind.TEMPERATURE.directory_path == "parameter/1.json"
    assert ParameterKind.TEMPERATURE.series_path(53430) == "parameter/1/station/53430/period/latest-hour/data.json"
    assert ParameterKind.RAINFALL.series_path(53430) == "parameter/5/station/53430/period/latest-months/data.json"


def test_validator_accepts_directory_and_ignores_extra_fields():
    payload = {
        "key": "1",
        "station": [
            {"id": 1, "name": "Lund", "height": 73.0, "latitude": 55.7, "longitude": 13.2, "active": True},
            {"id": 2},
        ],
    }
    directory, err = PayloadValidator().validate_directory(payload)
    assert err == ""
    assert isinstance(directory, StationDirectory)
    assert [s.id for s in directory.station] == [1, 2]


def test_validator_reports_errors_without_raising():
    directory, err = PayloadValidator().validate_directory({"station": [{"name": "no id"}]})
    assert directory is None
    assert "id" in err

    series, err = PayloadValidator().validate_series(["not", "an", "object"])
    assert series is None
    assert "list" in err


def test_value_overflowing_float_has_no_numeric_value():
    p = ObservationPoint.model_validate({"from": 1, "value": "1e400"})
    assert p.decimal_value() == Decimal("1e400")
    assert p.numeric_value() is None


def test_point_without_to_defaults_to_zero():
    assert ObservationPoint.model_validate({"from": 1, "value": "1.0"}).to == 0
