from __future__ import annotations

import pytest

from core.errors import OptionsError
from core.options import NAN, ProcessorOptions
from core.validation import is_valid_date, validate_options


def test_defaults_are_valid() -> None:
    options = ProcessorOptions()
    assert validate_options(options) is options


def test_stale_days_must_be_a_number() -> None:
    with pytest.raises(OptionsError, match="did not parse to a valid float"):
        validate_options(ProcessorOptions(days_before_stale=NAN))
    with pytest.raises(OptionsError, match="valid float"):
        validate_options(ProcessorOptions(days_before_stale="ten"))


def test_close_days_and_operations_must_be_numbers() -> None:
    with pytest.raises(OptionsError, match="valid integer"):
        validate_options(ProcessorOptions(days_before_close=NAN))
    with pytest.raises(OptionsError, match='"None" did not parse to a valid integer'):
        validate_options(ProcessorOptions(operations_per_run=None))


def test_booleans_are_not_numbers() -> None:
    with pytest.raises(OptionsError, match="valid integer"):
        validate_options(ProcessorOptions(operations_per_run=True))


def test_start_date_is_checked_only_when_set() -> None:
    validate_options(ProcessorOptions(start_date=""))
    validate_options(ProcessorOptions(start_date="2020-01-01T17:00:00Z"))
    validate_options(ProcessorOptions(start_date="Tue, 15 Nov 1994 12:45:26 GMT"))
    with pytest.raises(OptionsError, match='"not a date" did not parse to a valid date'):
        validate_options(ProcessorOptions(start_date="not a date"))


def test_is_valid_date() -> None:
    assert is_valid_date("2021-06-15")
    assert is_valid_date("2021-06-15T10:00:00+02:00")
    assert is_valid_date("2021-06-15T10:00:00.000Z")
    assert is_valid_date("2020")
    assert is_valid_date("2021-06")
    assert not is_valid_date("2021-13")
    assert not is_valid_date("20")
    assert not is_valid_date("2021-13-45")
    assert not is_valid_date("")


def test_close_reason_must_be_known() -> None:
    for reason in ("", "completed", "not_planned"):
        validate_options(ProcessorOptions(close_issue_reason=reason))

    with pytest.raises(OptionsError) as excinfo:
        validate_options(ProcessorOptions(close_issue_reason="archived"))
    message = str(excinfo.value)
    assert '"archived"' in message
    assert "completed" in message
    assert "not_planned" in message


def test_first_failure_wins() -> None:
    options = ProcessorOptions(days_before_stale=NAN, close_issue_reason="archived")
    with pytest.raises(OptionsError, match="valid float"):
        validate_options(options)


def test_reduced_precision_start_date_is_accepted() -> None:
    validate_options(ProcessorOptions(start_date="2021-06"))
    with pytest.raises(OptionsError, match='"2021-13" did not parse to a valid date'):
        validate_options(ProcessorOptions(start_date="2021-13"))
