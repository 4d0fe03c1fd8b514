"""Unit tests for engines.query.converters."""

import sys

import pytest

from querytpl.engines.query.converters import (
    convert,
    is_numeric_string,
    to_array,
    to_auto,
    to_float,
    to_identifier,
    to_int,
)
from querytpl.engines.query.errors import (
    ConversionFailedError,
    HeterogeneousArrayError,
    MixedArrayShapeError,
    NotAnArrayError,
    TypeMismatchError,
    UnsupportedTypeError,
)
from querytpl.engines.query.scanner import PlaceholderKind

_INT_STR_LIMIT = getattr(sys, "get_int_max_str_digits", lambda: 0)()


class TestToInt:
    def test_none(self):
        assert to_int(None) == "NULL"

    def test_bool(self):
        assert to_int(True) == "1"
        assert to_int(False) == "0"

    def test_int(self):
        assert to_int(42) == "42"
        assert to_int(-7) == "-7"

    def test_digit_string(self):
        assert to_int("99") == "99"
        assert to_int("007") == "7"

    def test_long_digit_string(self):
        digits = "1" * 5000
        assert to_int(digits) == digits
        assert to_int("000" + digits) == digits
        assert to_int("000") == "0"

    @pytest.mark.skipif(not _INT_STR_LIMIT, reason="no int-to-str digit limit")
    def test_int_over_digit_limit(self):
        with pytest.raises(TypeMismatchError) as exc:
            to_int(10 ** (_INT_STR_LIMIT + 1))
        assert exc.value.expected == "integer"

    @pytest.mark.parametrize("value", [1.5, "1.5", "-3", "abc", "", [1]])
    def test_invalid(self, value):
        with pytest.raises(TypeMismatchError) as exc:
            to_int(value)
        assert exc.value.expected == "integer"


class TestToFloat:
    def test_none(self):
        assert to_float(None) == "NULL"

    def test_float(self):
        assert to_float(3.14) == "3.14"
        assert to_float(2.0) == "2.0"

    def test_numeric_string(self):
        assert to_float("2.5") == "2.5"
        assert to_float("-3") == "-3.0"
        assert to_float("1e3") == "1000.0"

    @pytest.mark.parametrize("value", [5, True, "5", "abc", float("inf"), float("nan")])
    def test_invalid(self, value):
        with pytest.raises(TypeMismatchError) as exc:
            to_float(value)
        assert exc.value.expected == "float"


class TestToAuto:
    def test_none(self):
        assert to_auto(None) == "NULL"

    def test_string_quoted(self):
        assert to_auto("Jack") == "'Jack'"

    def test_string_not_escaped(self):
        assert to_auto("o'brien") == "'o'brien'"

    def test_bool(self):
        assert to_auto(True) == "1"
        assert to_auto(False) == "0"

    def test_int_and_digit_string(self):
        assert to_auto(5) == "5"
        assert to_auto("12") == "12"

    def test_float_and_numeric_string(self):
        assert to_auto(1.5) == "1.5"
        assert to_auto("1.5") == "1.5"

    @pytest.mark.parametrize("value", [[1], {"a": 1}, object(), b"x"])
    def test_unsupported(self, value):
        with pytest.raises(UnsupportedTypeError):
            to_auto(value)

    def test_long_digit_string(self):
        assert to_auto("9" * 5000) == "9" * 5000

    @pytest.mark.skipif(not _INT_STR_LIMIT, reason="no int-to-str digit limit")
    def test_int_over_digit_limit_fails(self):
        with pytest.raises(ConversionFailedError):
            to_auto(10 ** (_INT_STR_LIMIT + 1))

    def test_non_finite_float_fails(self):
        with pytest.raises(ConversionFailedError):
            to_auto(float("nan"))


class TestToArray:
    def test_list(self):
        assert to_array([1, 2, 3]) == "1, 2, 3"

    def test_list_of_strings(self):
        assert to_array(["a", "b"]) == "'a', 'b'"

    def test_tuple(self):
        assert to_array((1.5, 2.5)) == "1.5, 2.5"

    def test_nulls_exempt_from_type_check(self):
        assert to_array([1, None, 3]) == "1, NULL, 3"
        assert to_array([None, "a"]) == "NULL, 'a'"

    def test_heterogeneous(self):
        with pytest.raises(HeterogeneousArrayError):
            to_array([1, "x"])

    def test_bool_and_int_differ(self):
        with pytest.raises(HeterogeneousArrayError):
            to_array([1, True])

    def test_set_sorted(self):
        assert to_array({"gamma", "alpha", "beta"}) == "'alpha', 'beta', 'gamma'"
        assert to_array(frozenset({3, 1, 2})) == "1, 2, 3"

    def test_set_null_first(self):
        assert to_array({2, None, 1}) == "NULL, 1, 2"

    def test_heterogeneous_set(self):
        with pytest.raises(HeterogeneousArrayError):
            to_array({1, "x"})

    def test_full_map(self):
        assert to_array({"name": "Jack", "email": None}) == "`name` = 'Jack', `email` = NULL"

    def test_full_map_mixed_value_types(self):
        assert to_array({"name": "x", "age": 5}) == "`name` = 'x', `age` = 5"

    def test_map_without_string_keys_is_list(self):
        assert to_array({0: 1, 1: 2}) == "1, 2"

    def test_mixed_keys(self):
        with pytest.raises(MixedArrayShapeError):
            to_array({"a": 1, 2: 3})

    def test_empty(self):
        assert to_array([]) == ""
        assert to_array({}) == ""

    @pytest.mark.parametrize("value", [None, 5, "1,2"])
    def test_not_an_array(self, value):
        with pytest.raises(NotAnArrayError):
            to_array(value)

    def test_nested_value_unsupported(self):
        with pytest.raises(UnsupportedTypeError):
            to_array([[1], [2]])


class TestToIdentifier:
    def test_string(self):
        assert to_identifier("user_id") == "`user_id`"

    def test_list(self):
        assert to_identifier(["name", "email"]) == "`name`, `email`"

    def test_invalid(self):
        with pytest.raises(TypeMismatchError):
            to_identifier(5)
        with pytest.raises(TypeMismatchError):
            to_identifier(["a", 1])


class TestConvertDispatch:
    def test_each_kind(self):
        assert convert(PlaceholderKind.INT, "3") == "3"
        assert convert(PlaceholderKind.FLOAT, "3.5") == "3.5"
        assert convert(PlaceholderKind.ARRAY, [1]) == "1"
        assert convert(PlaceholderKind.IDENTIFIER, "t") == "`t`"
        assert convert(PlaceholderKind.AUTO, "t") == "'t'"

    @pytest.mark.parametrize("kind", list(PlaceholderKind))
    def test_every_kind_has_converter(self, kind):
        samples = {
            PlaceholderKind.INT: 1,
            PlaceholderKind.FLOAT: 1.5,
            PlaceholderKind.ARRAY: [1],
            PlaceholderKind.IDENTIFIER: "c",
            PlaceholderKind.AUTO: "x",
        }
        assert convert(kind, samples[kind])


class TestIsNumericString:
    @pytest.mark.parametrize("value", ["1", "-1", "+1.5", ".5", "1.", "1e10", " 2 "])
    def test_numeric(self, value):
        assert is_numeric_string(value)

    @pytest.mark.parametrize("value", ["", "abc", "1a", "0x1A", "1e", "."])
    def test_not_numeric(self, value):
        assert not is_numeric_string(value)
