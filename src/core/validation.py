"""Validation of merged processor options.

Checks run in a fixed order and the first failure raises; nothing after it
is evaluated. The order is part of the contract: a run with several bad
options always reports the same one.
"""

from __future__ import annotations

import math
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any

from core.errors import OptionsError
from core.options import ProcessorOptions

VALID_CLOSE_REASONS = ("", "completed", "not_planned")
_REDUCED_ISO_FORMATS = ("%Y", "%Y-%m")


def is_real_number(value: Any) -> bool:
    """Return True for ints and floats that are not NaN (bools excluded)."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def is_valid_date(value: str) -> bool:
    """Return True when ``value`` parses as ISO 8601 or RFC 2822."""

    try:
        datetime.fromisoformat(value)
        return True
    except ValueError:
        pass
    # Reduced-precision ISO dates: year, or year and month.
    for fmt in _REDUCED_ISO_FORMATS:
        try:
            datetime.strptime(value, fmt)
            return True
        except ValueError:
            continue
    try:
        parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        return False
    return True


def validate_options(options: ProcessorOptions) -> ProcessorOptions:
    """Raise OptionsError on the first invalid option, else return options."""

    for value in (options.days_before_stale,):
        if not is_real_number(value):
            raise OptionsError(f'Option "{value}" did not parse to a valid float')

    for value in (options.days_before_close, options.operations_per_run):
        if not is_real_number(value):
            raise OptionsError(f'Option "{value}" did not parse to a valid integer')

    # Empty or unset start dates keep the default behaviour.
    start_date = options.start_date or ""
    if start_date != "":
        if not isinstance(start_date, str) or not is_valid_date(start_date):
            raise OptionsError(f'Option "{start_date}" did not parse to a valid date')

    if options.close_issue_reason not in VALID_CLOSE_REASONS:
        valid = ", ".join(reason for reason in VALID_CLOSE_REASONS if reason)
        raise OptionsError(
            f'Unrecognized close-issue-reason "{options.close_issue_reason}", '
            f"valid values are: {valid}"
        )

    return options
