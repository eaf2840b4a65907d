"""Tests for value coercion (core/coercion.py).

Pure function calls only.  Coverage:

* String identity and absence
* Strict integer parsing, finite float parsing
* Boolean truthiness and the falsity literals
* Arbitrary text converters and non-callable targets
* Count-preserving multi-value coercion
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from flagparse.core.coercion import coerce, coerce_all, to_bool, type_name
from flagparse.utils.constants import FALSITIES


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------

class TestStrings:
    def test_identity(self) -> None:
        text = (
            "Lorem ipsum dolor sit amet, consectetur adipiscing elit, sed do "
            "eiusmod tempor incididunt ut labore et dolore magna aliqua."
        )
        assert coerce(text, str) == text

    def test_default_target_is_str(self) -> None:
        assert coerce("abc") == "abc"

    def test_absent_stays_absent(self) -> None:
        assert coerce(None, str) is None

    def test_empty_string_is_a_value(self) -> None:
        assert coerce("", str) == ""


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

class TestNumbers:
    def test_int(self) -> None:
        assert coerce("42", int) == 42

    def test_negative_int(self) -> None:
        assert coerce("-7", int) == -7

    def test_int_rejects_fraction(self) -> None:
        assert coerce("42.42", int) is None

    @pytest.mark.parametrize("raw", ["42abc", "abc", "", "4 2"])
    def test_int_rejects_partial_or_garbage(self, raw: str) -> None:
        assert coerce(raw, int) is None

    def test_float(self) -> None:
        assert coerce("42.42", float) == 42.42

    def test_float_from_integer_text(self) -> None:
        assert coerce("42", float) == 42.0

    def test_float_rejects_partial(self) -> None:
        assert coerce("42.4x", float) is None

    def test_int_rejects_digit_separators(self) -> None:
        assert coerce("1_000", int) is None

    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf", "Infinity", "1_0.5"])
    def test_float_rejects_non_finite_and_separators(self, raw: str) -> None:
        assert coerce(raw, float) is None

    def test_absent_number(self) -> None:
        assert coerce(None, int) is None
        assert coerce(None, float) is None


# ---------------------------------------------------------------------------
# Booleans
# ---------------------------------------------------------------------------

class TestBooleans:
    @pytest.mark.parametrize("falsity", sorted(FALSITIES))
    def test_falsities(self, falsity: str) -> None:
        assert coerce(falsity, bool) is False

    @pytest.mark.parametrize("raw", ["1", "yes", "true", "y", "", "anything"])
    def test_truthy_values(self, raw: str) -> None:
        assert coerce(raw, bool) is True

    def test_bare_flag_is_true(self) -> None:
        assert coerce(None, bool) is True
        assert to_bool(None) is True

    @pytest.mark.parametrize("raw", ["No", "FALSE", "F", "N"])
    def test_comparison_is_case_sensitive(self, raw: str) -> None:
        assert coerce(raw, bool) is True

    def test_falsity_set(self) -> None:
        assert FALSITIES == {"0", "n", "no", "f", "false"}


# ---------------------------------------------------------------------------
# Text converters
# ---------------------------------------------------------------------------

class TestTextConverters:
    def test_path(self) -> None:
        assert coerce("/tmp/out", Path) == Path("/tmp/out")

    def test_decimal_failure_is_absent(self) -> None:
        assert coerce("1.5", Decimal) == Decimal("1.5")
        assert coerce("x", Decimal) is None

    def test_custom_callable(self) -> None:
        def port(text: str) -> int:
            value = int(text)
            if not 0 < value < 65536:
                raise ValueError(text)
            return value

        assert coerce("8080", port) == 8080
        assert coerce("70000", port) is None

    @pytest.mark.parametrize("target", [5, "int", None])
    def test_non_callable_target_raises(self, target: object) -> None:
        with pytest.raises(TypeError, match="not a text converter"):
            coerce("1", target)

    def test_non_callable_target_raises_for_bare_flag(self) -> None:
        with pytest.raises(TypeError):
            coerce(None, 5)

    def test_type_name(self) -> None:
        assert type_name(int) == "int"
        assert type_name(Path) == "Path"


# ---------------------------------------------------------------------------
# Multi-value coercion
# ---------------------------------------------------------------------------

class TestCoerceAll:
    def test_preserves_order(self) -> None:
        assert coerce_all(["42", "7"], int) == [42, 7]

    def test_unparseable_slot_kept(self) -> None:
        assert coerce_all(["1", "x", None, "3"], int) == [1, None, None, 3]

    def test_bool_slots(self) -> None:
        assert coerce_all([None, "no", "yes"], bool) == [True, False, True]

    def test_empty(self) -> None:
        assert coerce_all([], int) == []
