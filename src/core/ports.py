"""Ports (interfaces) used around option resolution.

Ports define the minimal contracts for the external issue processor, the
cross-run state store and the output sink so the runner can be reused with
different backends.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from core.models import RateLimit


class StatePort(Protocol):
    """Cross-run bookkeeping that brackets the processor's execution."""

    def restore(self) -> None:
        ...

    def persist(self) -> None:
        ...


class IssueProcessorPort(Protocol):
    """Operations required from the external issue processor."""

    stale_issues: Sequence[Any]
    closed_issues: Sequence[Any]

    def get_rate_limit(self) -> Optional[RateLimit]:
        ...

    def process_issues(self) -> None:
        ...


class OutputPort(Protocol):
    """Named run outputs."""

    def set_output(self, name: str, value: str) -> None:
        ...
