"""GitHub Actions runtime adapter.

Translates log records into workflow commands, writes step outputs and
reports failure. Formatting lives here so the core never depends on the
runner's wire format.
"""

from __future__ import annotations

import logging
import sys
import uuid
from typing import Iterable, Optional, TextIO

LOGGER = logging.getLogger(__name__)

FAILED_EXIT_CODE = 1


def escape_data(value: str) -> str:
    """Escape a workflow command payload so multi-line text survives."""

    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _command_for(levelno: int) -> Optional[str]:
    if levelno >= logging.ERROR:
        return "error"
    if levelno >= logging.WARNING:
        return "warning"
    if levelno < logging.INFO:
        return "debug"
    return None


class WorkflowCommandFormatter(logging.Formatter):
    """Render records as workflow commands and redact known secrets.

    INFO records stay plain text; DEBUG, WARNING and ERROR become
    ``::debug::``, ``::warning::`` and ``::error::`` lines.
    """

    def __init__(self, secrets: Iterable[str], fmt: str = "%(message)s") -> None:
        super().__init__(fmt=fmt)
        self._secrets = sorted({secret for secret in secrets if secret}, key=len, reverse=True)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for secret in self._secrets:
            message = message.replace(secret, "***")
        command = _command_for(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_data(message)}"


def add_mask(secret: str, stream: TextIO = sys.stdout) -> None:
    """Ask the runner to mask ``secret`` in every later log line."""

    if secret:
        stream.write(f"::add-mask::{escape_data(secret)}\n")


class GithubOutput:
    """Step output writer that satisfies the OutputPort contract."""

    def __init__(self, path: Optional[str], stream: TextIO = sys.stdout) -> None:
        self._path = path
        self._stream = stream

    def set_output(self, name: str, value: str) -> None:
        if not self._path:
            # Local runs have no output file; show the value instead.
            self._stream.write(f"{name}={value}\n")
            return

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with open(self._path, "a", encoding="utf-8") as handle:
            handle.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
        LOGGER.debug("Output %s written", name)


def set_failed(message: str) -> int:
    """Report ``message`` as the failure reason and return the exit code."""

    LOGGER.error(message)
    return FAILED_EXIT_CODE
