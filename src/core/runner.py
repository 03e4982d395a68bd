"""Run orchestration around the external issue processor.

The runner enforces a strict order:
1) Restore cross-run state
2) Snapshot the API rate limit
3) Let the processor handle issues and pull requests
4) Snapshot the rate limit again and report usage
5) Persist state
6) Publish stale and closed items as JSON outputs

It only relies on ports, so it never talks to GitHub itself.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, Optional, Sequence

from core.models import RateLimit
from core.ports import IssueProcessorPort, OutputPort, StatePort

LOGGER = logging.getLogger(__name__)

STALE_OUTPUT = "staled-issues-prs"
CLOSED_OUTPUT = "closed-issues-prs"


def _jsonable(item: Any) -> Any:
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return dataclasses.asdict(item)
    to_dict = getattr(item, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if hasattr(item, "__dict__"):
        return vars(item)
    raise TypeError(f"Object of type {type(item).__name__} is not JSON serializable")


def serialize_items(items: Sequence[Any]) -> str:
    """Serialize processor results to JSON text."""

    return json.dumps(list(items), default=_jsonable)


def _log_rate_status(rate_limit: RateLimit) -> None:
    LOGGER.debug(
        "Github API rate status: limit=%s, used=%s, remaining=%s",
        rate_limit.limit,
        rate_limit.used,
        rate_limit.remaining,
    )


class ActionRunner:
    """Drives one processor run between state restore and persist."""

    def __init__(
        self,
        processor: IssueProcessorPort,
        state: StatePort,
        outputs: OutputPort,
    ) -> None:
        self._processor = processor
        self._state = state
        self._outputs = outputs

    def run(self) -> None:
        self._state.restore()

        rate_limit_at_start: Optional[RateLimit] = self._processor.get_rate_limit()
        if rate_limit_at_start:
            _log_rate_status(rate_limit_at_start)

        self._processor.process_issues()

        rate_limit_at_end = self._processor.get_rate_limit()
        if rate_limit_at_end:
            _log_rate_status(rate_limit_at_end)
            if rate_limit_at_start:
                LOGGER.info(
                    "Github API rate used: %s",
                    rate_limit_at_start.remaining - rate_limit_at_end.remaining,
                )
            LOGGER.info(
                "Github API rate remaining: %s; reset at: %s",
                rate_limit_at_end.remaining,
                rate_limit_at_end.reset,
            )

        self._state.persist()

        self._outputs.set_output(STALE_OUTPUT, serialize_items(self._processor.stale_issues))
        self._outputs.set_output(CLOSED_OUTPUT, serialize_items(self._processor.closed_issues))
