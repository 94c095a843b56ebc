"""Tests para el módulo core/validation.py."""

import pytest

from spidrform.core.formatting import type_keystrokes
from spidrform.core.validation import (
    MSG_COST_REQUIRED,
    MSG_EMAIL_INVALID,
    MSG_EMAIL_REQUIRED,
    MSG_FIRST_NAME_REQUIRED,
    MSG_LAST_NAME_REQUIRED,
    MSG_PHONE_INVALID,
    MSG_PHONE_REQUIRED,
    MSG_PIN_LENGTH,
    MSG_PIN_REQUIRED,
    is_valid_email,
    is_valid_phone_number,
    trim,
    validate_field,
    validate_form,
)
from spidrform.models import FIELD_ALIASES, FormRecord


class TestIsValidEmail:
    """Tests para is_valid_email."""

    @pytest.mark.parametrize("email", [
        "john.doe@example.com",
        "a@b.c",
        "user+tag@mail.example.org",
    ])
    def test_valid(self, email):
        assert is_valid_email(email)

    @pytest.mark.parametrize("email", [
        "invalid-email",
        "no-dot@domain",
        "two@@example.com",
        "spa ce@example.com",
        "@example.com",
        "john@example.com\n",
    ])
    def test_invalid(self, email):
        assert not is_valid_email(email)


class TestIsValidPhoneNumber:
    """Tests para is_valid_phone_number."""

    def test_ten_digits(self):
        assert is_valid_phone_number("(123) 456-7890")

    def test_nine_digits(self):
        assert not is_valid_phone_number("(123) 456-789")


class TestValidateField:
    """Tests para validate_field."""

    def test_whitespace_name_is_empty(self):
        record = FormRecord(first_name="   ")
        assert validate_field(record, "first_name") == MSG_FIRST_NAME_REQUIRED

    def test_accepts_alias(self, valid_record):
        assert validate_field(valid_record, "spidrPin") is None

    def test_short_phone(self):
        record = FormRecord(phone_number="(123) 4")
        assert validate_field(record, "phone_number") == MSG_PHONE_INVALID

    def test_short_pin(self):
        record = FormRecord(spidr_pin="1234-5678")
        assert validate_field(record, "spidr_pin") == MSG_PIN_LENGTH

    def test_cost_malformed_accepted(self):
        """Test el costo no se valida numéricamente."""
        assert validate_field(FormRecord(air_fryer_cost="1.2.3"), "air_fryer_cost") is None
        assert validate_field(FormRecord(air_fryer_cost="."), "air_fryer_cost") is None


class TestValidateForm:
    """Tests para validate_form."""

    def test_empty_record_has_six_errors(self):
        """Test formulario vacío: un error por campo, en orden."""
        errors = validate_form(FormRecord())

        assert list(errors) == list(FIELD_ALIASES)
        assert errors == {
            "first_name": MSG_FIRST_NAME_REQUIRED,
            "last_name": MSG_LAST_NAME_REQUIRED,
            "phone_number": MSG_PHONE_REQUIRED,
            "email": MSG_EMAIL_REQUIRED,
            "air_fryer_cost": MSG_COST_REQUIRED,
            "spidr_pin": MSG_PIN_REQUIRED,
        }

    def test_exact_messages(self):
        assert MSG_FIRST_NAME_REQUIRED == "First name is required"
        assert MSG_PHONE_INVALID == "Please enter a valid phone number (at least 10 digits)"
        assert MSG_EMAIL_INVALID == "Please enter a valid email address"
        assert MSG_COST_REQUIRED == "Air fryer cost guess is required"
        assert MSG_PIN_LENGTH == "Spidr PIN must be exactly 16 digits"

    def test_valid_record(self, valid_record):
        assert validate_form(valid_record) == {}

    def test_pure(self, valid_record):
        """Test validar dos veces da el mismo resultado."""
        record = valid_record.with_field("email", "nope")
        assert validate_form(record) == validate_form(record)

    def test_does_not_stop_at_first_error(self):
        record = FormRecord(first_name="John", email="bad")
        errors = validate_form(record)
        assert "email" in errors
        assert "last_name" in errors
        assert "first_name" not in errors


class TestEndToEndScenarios:
    """Escenarios completos: tecleo, formateo y validación."""

    def test_invalid_email_only(self, valid_record):
        """Test solo el email falla."""
        record = valid_record.with_field("email", "invalid-email")
        assert validate_form(record) == {"email": MSG_EMAIL_INVALID}

    def test_phone_typed(self, valid_record):
        stored = type_keystrokes("phone_number", "1234567890")
        assert stored == "(123) 456-7890"
        assert "phone_number" not in validate_form(valid_record.with_field("phone_number", stored))

    def test_pin_typed(self, valid_record):
        stored = type_keystrokes("spidr_pin", "1234567890123456")
        assert stored == "1234-5678-9012-3456"
        assert "spidr_pin" not in validate_form(valid_record.with_field("spidr_pin", stored))

    def test_pin_over_typed_still_valid(self, valid_record):
        """Test un PIN saturado sigue siendo válido."""
        stored = type_keystrokes("spidr_pin", "123456789012345678")
        assert len(stored) == 19
        assert validate_form(valid_record.with_field("spidr_pin", stored)) == {}

    def test_cost_typed(self):
        assert type_keystrokes("air_fryer_cost", "abc123.45def") == "123.45"


class TestTrim:
    """Tests para trim: mismos espacios que recorta un formulario web."""

    @pytest.mark.parametrize("blank", [" ", "\t", "\n", "\u00a0", "\u2003", "\u3000", "\ufeff"])
    def test_strips_blanks(self, blank):
        assert trim(f"{blank}John{blank}") == "John"

    @pytest.mark.parametrize("char", ["\x1c", "\x1f", "\x85"])
    def test_keeps_control_separators(self, char):
        assert trim(char) == char

    def test_bom_only_name_is_required(self):
        errors = validate_form(FormRecord(first_name="\ufeff", last_name="\ufeff \u00a0"))
        assert errors["first_name"] == MSG_FIRST_NAME_REQUIRED
        assert errors["last_name"] == MSG_LAST_NAME_REQUIRED

    def test_control_separator_counts_as_value(self):
        assert validate_field(FormRecord(first_name="\x1c"), "first_name") is None

    def test_email_rejects_bom(self):
        assert not is_valid_email("john\ufeff@example.com")
