from __future__ import annotations

import math

import pytest

from sebp.domain import coercers
from sebp.domain.defs import BlockOrientation, Quaternion, Vector3, Vector3Int


@pytest.mark.parametrize("raw", [None, "", "   ", "abc", "1.5", "1e3", "0x10", "1_000", "12a", "٣"])
def test_coerce_int_rejects_malformed_text(raw: str | None) -> None:
    assert coercers.coerce_int(raw) is None


def test_coerce_int_accepts_sign_and_whitespace() -> None:
    assert coercers.coerce_int(" 42 ") == 42
    assert coercers.coerce_int("-7") == -7
    assert coercers.coerce_int("+3") == 3


def test_coerce_int_range_limits() -> None:
    assert coercers.coerce_int(str(2**31 - 1)) == 2**31 - 1
    assert coercers.coerce_int(str(2**31)) is None
    assert coercers.coerce_int(str(-(2**31))) == -(2**31)


def test_coerce_long_accepts_64_bit_values() -> None:
    assert coercers.coerce_long("144115188075855895") == 144115188075855895
    assert coercers.coerce_long(str(2**63)) is None


@pytest.mark.parametrize("raw", [None, "", "abc", "nan", "NaN", "1_0.5", "1,5"])
def test_coerce_float_rejects_malformed_text(raw: str | None) -> None:
    assert coercers.coerce_float(raw) is None


def test_coerce_float_parses_common_forms() -> None:
    assert coercers.coerce_float("0.575") == 0.575
    assert coercers.coerce_float("-3.25") == -3.25
    assert coercers.coerce_float("1E-05") == 1e-05
    assert coercers.coerce_float("100") == 100.0


@pytest.mark.parametrize("raw,expected", [("true", True), ("False", False), (" TRUE ", True), ("false", False)])
def test_coerce_bool_is_case_insensitive(raw: str, expected: bool) -> None:
    assert coercers.coerce_bool(raw) is expected


@pytest.mark.parametrize("raw", [None, "", "notabool", "1", "0", "yes"])
def test_coerce_bool_rejects_other_text(raw: str | None) -> None:
    assert coercers.coerce_bool(raw) is None


def test_coerce_text_keeps_empty_string() -> None:
    assert coercers.coerce_text("") == ""
    assert coercers.coerce_text(None) is None


def test_coerce_vector3_defaults_missing_components() -> None:
    assert coercers.coerce_vector3({"x": "1.5", "Z": "2"}) == Vector3(1.5, 0.0, 2.0)


def test_coerce_vector3_malformed_component_yields_none() -> None:
    assert coercers.coerce_vector3({"x": "1", "y": "oops", "z": "0"}) is None
    assert coercers.coerce_vector3(None) is None


def test_coerce_vector3_int_requires_integers() -> None:
    assert coercers.coerce_vector3_int({"x": "1", "y": "-2", "z": "3"}) == Vector3Int(1, -2, 3)
    assert coercers.coerce_vector3_int({"x": "1.5"}) is None


def test_coerce_quaternion_reads_upper_case_components() -> None:
    assert coercers.coerce_quaternion({"X": "0", "Y": "0", "Z": "0", "W": "1"}) == Quaternion(0.0, 0.0, 0.0, 1.0)


def test_coerce_block_orientation_keeps_raw_names() -> None:
    assert coercers.coerce_block_orientation({"Forward": "Left", "up": "Down"}) == BlockOrientation("Left", "Down")
    assert coercers.coerce_block_orientation({}) == BlockOrientation(None, None)


def test_formatters_round_trip_through_coercers() -> None:
    for value in (0.1, -3.25, 1e-05, 123456.789, 2.0):
        assert coercers.coerce_float(coercers.format_float(value)) == value
    assert coercers.format_bool(True) == "true"
    assert coercers.format_bool(False) == "false"
    assert coercers.format_int(-12) == "-12"


def test_format_float_writes_infinity_as_upper_case_inf() -> None:
    assert coercers.format_float(float("inf")) == "INF"
    assert coercers.format_float(float("-inf")) == "-INF"
    assert coercers.coerce_float("INF") == math.inf
    assert coercers.coerce_float("-INF") == -math.inf
