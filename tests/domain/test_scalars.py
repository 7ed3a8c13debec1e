"""Tests for wire scalar normalization."""

from __future__ import annotations

import sys

import pytest
from pydantic import BaseModel, ValidationError

from vkwire.domain.errors import DecodeError
from vkwire.domain.scalars import (
    OptWireInt64,
    OptWireStr,
    ScalarTarget,
    WireInt16,
    WireInt64,
    WireKind,
    WireStr,
    classify,
    normalize,
    normalize_optional,
)

INT_TARGETS = [ScalarTarget.INT8, ScalarTarget.INT16, ScalarTarget.INT32, ScalarTarget.INT64]


class TestClassify:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            (0, WireKind.UNSIGNED),
            (777, WireKind.UNSIGNED),
            (-777, WireKind.SIGNED),
            ("777", WireKind.STRING),
            (1.5, WireKind.FLOAT),
            (True, WireKind.OTHER),
            (None, WireKind.OTHER),
            ([1], WireKind.OTHER),
            ({"a": 1}, WireKind.OTHER),
        ],
    )
    def test_kinds(self, value: object, kind: WireKind) -> None:
        assert classify(value) is kind


class TestIntegerTargets:
    @pytest.mark.parametrize("target", INT_TARGETS)
    def test_positive_number(self, target: ScalarTarget) -> None:
        assert normalize(123, target) == 123

    @pytest.mark.parametrize("target", INT_TARGETS)
    def test_positive_string(self, target: ScalarTarget) -> None:
        assert normalize("123", target) == 123

    @pytest.mark.parametrize("target", INT_TARGETS)
    def test_negative_number(self, target: ScalarTarget) -> None:
        assert normalize(-123, target) == -123

    @pytest.mark.parametrize("target", INT_TARGETS)
    def test_negative_string(self, target: ScalarTarget) -> None:
        assert normalize("-123", target) == -123

    def test_explicit_plus_sign(self) -> None:
        assert normalize("+42", ScalarTarget.INT64) == 42

    @pytest.mark.parametrize(
        "n",
        [0, 1, -1, 2**31 - 1, -(2**31), 2**63 - 1, -(2**63), 1_613_000_000],
    )
    def test_number_and_string_encodings_agree(self, n: int) -> None:
        assert normalize(n, ScalarTarget.INT64) == normalize(str(n), ScalarTarget.INT64)

    @pytest.mark.parametrize("value", [123.0, -123.0, 123.4, "123.0", "-123.0", "1e3"])
    def test_fractions_rejected(self, value: object) -> None:
        with pytest.raises(DecodeError):
            normalize(value, ScalarTarget.INT64)

    @pytest.mark.parametrize("value", ["-+", "", " 12", "12 ", "0x10", "1_000", "abc", "١٢"])
    def test_non_numerals_rejected(self, value: str) -> None:
        with pytest.raises(DecodeError):
            normalize(value, ScalarTarget.INT64)

    @pytest.mark.parametrize("value", [True, False, None, [], {}, [1]])
    def test_other_kinds_rejected(self, value: object) -> None:
        with pytest.raises(DecodeError):
            normalize(value, ScalarTarget.INT64)

    def test_int64_overflow_number(self) -> None:
        with pytest.raises(DecodeError):
            normalize(2**63, ScalarTarget.INT64)

    def test_int64_overflow_string(self) -> None:
        with pytest.raises(DecodeError):
            normalize(str(2**63), ScalarTarget.INT64)

    @pytest.mark.parametrize("target", [ScalarTarget.INT64, ScalarTarget.INT])
    def test_oversized_numeral(self, target: ScalarTarget) -> None:
        huge = "9" * 5000
        previous = sys.get_int_max_str_digits()
        sys.set_int_max_str_digits(4300)
        try:
            with pytest.raises(DecodeError) as exc_info:
                normalize(huge, target)
            with pytest.raises(DecodeError):
                normalize_optional({"n": huge}, "n", target)
        finally:
            sys.set_int_max_str_digits(previous)
        assert exc_info.value.reason == "integer text too long"
        assert exc_info.value.target == target.value

    def test_int16_bounds(self) -> None:
        assert normalize("-32768", ScalarTarget.INT16) == -32768
        assert normalize(32767, ScalarTarget.INT16) == 32767
        with pytest.raises(DecodeError):
            normalize("32768", ScalarTarget.INT16)
        with pytest.raises(DecodeError):
            normalize(-32769, ScalarTarget.INT16)

    def test_int8_bounds(self) -> None:
        assert normalize(-128, ScalarTarget.INT8) == -128
        with pytest.raises(DecodeError):
            normalize(128, ScalarTarget.INT8)

    def test_unbounded_int(self) -> None:
        assert normalize(str(2**70), ScalarTarget.INT) == 2**70
        assert normalize(-(2**70), ScalarTarget.INT) == -(2**70)


class TestStringTarget:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (123, "123"),
            (-123, "-123"),
            ("123", "123"),
            ("not a number", "not a number"),
            (123.4, "123.4"),
            (-123.4, "-123.4"),
        ],
    )
    def test_accepted(self, value: object, expected: str) -> None:
        assert normalize(value, ScalarTarget.STR) == expected

    @pytest.mark.parametrize("value", [True, None, [], {}])
    def test_other_kinds_rejected(self, value: object) -> None:
        with pytest.raises(DecodeError):
            normalize(value, ScalarTarget.STR)


class TestDecodeError:
    def test_carries_value_and_target(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            normalize("123.0", ScalarTarget.INT16)
        assert exc_info.value.value == "123.0"
        assert exc_info.value.target == "int16"
        assert "int16" in str(exc_info.value)

    def test_is_value_error(self) -> None:
        assert issubclass(DecodeError, ValueError)


class TestNormalizeOptional:
    def test_missing_key_is_absent(self) -> None:
        assert normalize_optional({"other": 1}, "value", ScalarTarget.INT64) is None

    def test_present_value_normalized(self) -> None:
        assert normalize_optional({"value": "-7"}, "value", ScalarTarget.INT64) == -7

    def test_present_malformed_raises(self) -> None:
        with pytest.raises(DecodeError):
            normalize_optional({"value": "7.5"}, "value", ScalarTarget.INT64)

    def test_present_null_raises(self) -> None:
        with pytest.raises(DecodeError):
            normalize_optional({"value": None}, "value", ScalarTarget.INT64)

    def test_string_target(self) -> None:
        assert normalize_optional({"value": -123.4}, "value", ScalarTarget.STR) == "-123.4"
        assert normalize_optional({}, "value", ScalarTarget.STR) is None


class Item(BaseModel):
    value: WireInt64


class SmallItem(BaseModel):
    value: WireInt16


class TextItem(BaseModel):
    value: WireStr


class OptionalItem(BaseModel):
    value: OptWireInt64 = None
    label: OptWireStr = None


class TestRecordFields:
    def test_number_or_string(self) -> None:
        assert Item.model_validate({"value": 123}).value == 123
        assert Item.model_validate({"value": "123"}).value == 123

    def test_from_json_text(self) -> None:
        assert Item.model_validate_json('{"value": "-123"}').value == -123

    def test_float_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Item.model_validate_json('{"value": 123.0}')

    def test_range_checked(self) -> None:
        with pytest.raises(ValidationError):
            SmallItem.model_validate({"value": "40000"})

    def test_string_field(self) -> None:
        assert TextItem.model_validate({"value": 777}).value == "777"

    def test_optional_missing(self) -> None:
        item = OptionalItem.model_validate({"no_value": 123})
        assert item.value is None
        assert item.label is None

    def test_optional_present(self) -> None:
        item = OptionalItem.model_validate({"value": "5", "label": -1.5})
        assert item.value == 5
        assert item.label == "-1.5"

    def test_optional_malformed_fails(self) -> None:
        with pytest.raises(ValidationError):
            OptionalItem.model_validate({"value": "-+"})

    def test_optional_null_fails(self) -> None:
        with pytest.raises(ValidationError):
            OptionalItem.model_validate({"value": None})

    def test_serializes_as_plain_values(self) -> None:
        assert Item.model_validate({"value": "9"}).model_dump() == {"value": 9}
