"""Tests para session.py - Controlador de envío."""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from spidrform.core.validation import MSG_EMAIL_INVALID, MSG_FIRST_NAME_REQUIRED
from spidrform.models import FormRecord
from spidrform.reporting import RecordingReporter
from spidrform.session import FAILURE_MESSAGE, SUCCESS_MESSAGE, FormSession


def _fill_valid(session: FormSession) -> None:
    session.type_text("firstName", "John")
    session.type_text("lastName", "Doe")
    session.type_text("phoneNumber", "1234567890")
    session.type_text("email", "john.doe@example.com")
    session.type_text("airFryerCost", "199.99")
    session.type_text("spidrPin", "1234567890123456")


class TestFormRecord:
    """Tests para FormRecord."""

    def test_defaults_empty(self):
        record = FormRecord()
        assert record.first_name == ""
        assert record.spidr_pin == ""

    def test_frozen(self):
        """Test el registro no se puede modificar."""
        record = FormRecord()
        with pytest.raises(ValidationError):
            record.first_name = "John"

    def test_with_field_returns_new(self):
        record = FormRecord()
        updated = record.with_field("firstName", "John")
        assert updated.first_name == "John"
        assert record.first_name == ""

    def test_populate_by_alias(self):
        record = FormRecord(firstName="Ada", spidrPin="1234")
        assert record.first_name == "Ada"
        assert record.get("spidr_pin") == "1234"

    def test_to_report_uses_aliases(self, valid_record):
        report = valid_record.to_report()
        assert list(report) == [
            "firstName", "lastName", "phoneNumber", "email", "airFryerCost", "spidrPin",
        ]
        assert report["phoneNumber"] == "(123) 456-7890"


class TestFormSessionEditing:
    """Tests para la edición de campos."""

    def test_type_text_formats(self, session):
        assert session.type_text("phone_number", "1234") == "(123) 4"
        assert session.value("phoneNumber") == "(123) 4"

    def test_set_field_whole_value(self, session):
        assert session.set_field("air_fryer_cost", "$12.50") == "12.50"

    def test_set_field_over_limit_keeps_previous(self, session):
        session.set_field("spidr_pin", "1234567890123456")
        assert session.set_field("spidr_pin", "12345678901234567") == "1234-5678-9012-3456"

    def test_backspace(self, session):
        session.type_text("spidr_pin", "12345")
        assert session.backspace("spidr_pin") == "1234"

    def test_clear_field(self, session):
        session.type_text("first_name", "John")
        assert session.clear_field("first_name") == ""

    def test_editing_clears_field_error(self, session):
        """Test editar un campo borra su error sin revalidar."""
        session.submit()
        assert "first_name" in session.errors

        session.type_text("first_name", "J")
        assert "first_name" not in session.errors
        assert "last_name" in session.errors

    def test_unknown_field(self, session):
        with pytest.raises(ValueError, match="Unknown field: nickname"):
            session.type_text("nickname", "x")

    def test_record_replaced_not_mutated(self, session):
        before = session.record
        session.type_text("first_name", "John")
        assert before.first_name == ""
        assert session.record is not before


class TestFormSessionSubmit:
    """Tests para submit."""

    def test_empty_submit(self, session, reporter):
        """Test envío vacío: seis errores y nada reportado."""
        result = session.submit()

        assert not result.success
        assert result.message == FAILURE_MESSAGE
        assert len(result.errors) == 6
        assert result.errors["first_name"] == MSG_FIRST_NAME_REQUIRED
        assert result.record is None
        assert reporter.count == 0

    def test_invalid_email(self, session, reporter):
        _fill_valid(session)
        session.clear_field("email")
        session.type_text("email", "invalid-email")

        result = session.submit()

        assert result.errors == {"email": MSG_EMAIL_INVALID}
        assert session.errors == {"email": MSG_EMAIL_INVALID}
        assert reporter.count == 0

    def test_valid_submit_reports_once(self, valid_record):
        """Test envío válido: el reporter recibe el registro exacto una vez."""
        reporter = MagicMock()
        session = FormSession(reporter=reporter)
        _fill_valid(session)

        result = session.submit()

        assert result.success
        assert result.message == SUCCESS_MESSAGE
        assert result.errors == {}
        reporter.report.assert_called_once_with(valid_record)
        assert result.record == valid_record
        assert session.submitted == 1

    def test_errors_replaced_on_resubmit(self, session):
        session.submit()
        _fill_valid(session)
        result = session.submit()
        assert result.success
        assert session.errors == {}

    def test_reset(self, session):
        _fill_valid(session)
        session.submit()
        session.reset()
        assert session.record == FormRecord()
        assert session.errors == {}


class TestReporters:
    """Tests para los reporters."""

    def test_recording_reporter(self, valid_record):
        reporter = RecordingReporter()
        reporter.report(valid_record)
        assert reporter.records == [valid_record]
        assert reporter.count == 1

    def test_console_reporter_prints_data(self, valid_record, capsys):
        from spidrform.reporting import ConsoleReporter

        ConsoleReporter().report(valid_record)

        captured = capsys.readouterr()
        assert "Form Data:" in captured.out
        assert "spidrPin" in captured.out
        assert "1234-5678-9012-3456" in captured.out

    def test_default_reporter_is_console(self):
        from spidrform.reporting import ConsoleReporter

        assert isinstance(FormSession().reporter, ConsoleReporter)
