"""Tests para el módulo core/formatting.py."""

import pytest

from spidrform.core.formatting import (
    apply_edit,
    delete_last,
    digits_only,
    format_cost,
    format_phone,
    format_pin,
    get_formatter,
    type_keystrokes,
)


class TestDigitsOnly:
    """Tests para digits_only."""

    def test_strips_non_digits(self):
        assert digits_only("(123) 456-7890") == "1234567890"

    def test_ignores_unicode_digits(self):
        """Test solo se aceptan dígitos ASCII."""
        assert digits_only("١٢٣4") == "4"


class TestFormatPhone:
    """Tests para format_phone."""

    @pytest.mark.parametrize("raw,expected", [
        ("", ""),
        ("1", "1"),
        ("123", "123"),
        ("1234", "(123) 4"),
        ("123456", "(123) 456"),
        ("1234567", "(123) 456-7"),
        ("1234567890", "(123) 456-7890"),
    ])
    def test_partial_grouping(self, raw, expected):
        """Test agrupación de prefijos parciales."""
        assert format_phone(raw) == expected

    def test_extra_digits_ignored(self):
        """Test más de 10 dígitos equivale a 10."""
        assert format_phone("123456789012345") == format_phone("1234567890")

    def test_reformats_formatted_input(self):
        """Test el valor ya formateado más un dígito se reformatea."""
        assert format_phone("(123) 456-789" + "0") == "(123) 456-7890"

    def test_letters_removed(self):
        assert format_phone("abc123def4") == "(123) 4"


class TestFormatPin:
    """Tests para format_pin."""

    @pytest.mark.parametrize("raw,expected", [
        ("", ""),
        ("1234", "1234"),
        ("12345", "1234-5"),
        ("12345678", "1234-5678"),
        ("1234567890123456", "1234-5678-9012-3456"),
    ])
    def test_groups_of_four(self, raw, expected):
        """Test guiones solo entre grupos completos."""
        assert format_pin(raw) == expected

    def test_never_trailing_dash(self):
        for n in range(1, 17):
            assert not format_pin("7" * n).endswith("-")

    def test_length(self):
        """Test largo n + (n-1)//4."""
        for n in range(1, 17):
            assert len(format_pin("5" * n)) == n + (n - 1) // 4


class TestFormatCost:
    """Tests para format_cost."""

    def test_strips_letters(self):
        assert format_cost("abc123.45def") == "123.45"

    def test_keeps_multiple_dots(self):
        """Test no se normalizan los puntos."""
        assert format_cost("1.2.3") == "1.2.3"

    def test_idempotent(self):
        for value in ["", "0", "199.99", "1.2.3", "."]:
            assert format_cost(format_cost(value)) == format_cost(value)

    def test_only_allowed_characters(self):
        result = format_cost("$ 1,299.99 USD")
        assert set(result) <= set("0123456789.")
        assert result == "1299.99"


class TestGetFormatter:
    """Tests para get_formatter."""

    def test_accepts_alias(self):
        assert get_formatter("spidrPin") is get_formatter("spidr_pin")

    def test_plain_fields_unchanged(self):
        assert get_formatter("first_name")("  John ") == "  John "

    def test_unknown_field(self):
        with pytest.raises(ValueError, match="Unknown field"):
            get_formatter("nickname")


class TestApplyEdit:
    """Tests para apply_edit."""

    def test_pin_over_limit_keeps_previous(self):
        """Test edición rechazada si excede 19 caracteres."""
        previous = "1234-5678-9012-3456"
        assert apply_edit("spidr_pin", previous + "7", previous) == previous

    def test_pasted_pin_over_limit_rejected(self):
        assert apply_edit("spidr_pin", "12345678901234567890", "") == ""

    def test_phone_never_exceeds_14(self):
        assert len(apply_edit("phone_number", "12345678901234")) == 14

    def test_cost_has_no_limit(self):
        raw = "1" * 40
        assert apply_edit("air_fryer_cost", raw) == raw


class TestTypeKeystrokes:
    """Tests para type_keystrokes."""

    def test_pin_saturates(self):
        """Test escribir 18 dígitos deja el PIN en 16."""
        assert type_keystrokes("spidr_pin", "123456789012345678") == "1234-5678-9012-3456"

    def test_pin_long_input(self):
        assert type_keystrokes("spidrPin", "12345678901234567890123456789") == "1234-5678-9012-3456"

    def test_phone(self):
        assert type_keystrokes("phone_number", "1234567890") == "(123) 456-7890"

    def test_appends_to_previous(self):
        assert type_keystrokes("phone_number", "4", "123") == "(123) 4"


class TestDeleteLast:
    """Tests para delete_last."""

    def test_phone_backspace(self):
        assert delete_last("phone_number", "(123) 4") == "123"

    def test_pin_backspace_removes_dash(self):
        assert delete_last("spidr_pin", "1234-5") == "1234"

    def test_empty(self):
        assert delete_last("first_name", "") == ""
