"""Exceptions raised while resolving processor options."""

from __future__ import annotations


class OptionsError(ValueError):
    """Raised when an option cannot be read, merged, or validated.

    The message is surfaced to the operator as the failure reason of the run,
    so it should name the offending value.
    """
