"""In-memory state adapter.

Satisfies the StatePort contract for runs that do not carry bookkeeping
between executions.
"""

from __future__ import annotations

import logging

LOGGER = logging.getLogger(__name__)


class InMemoryState:
    """State store that keeps nothing across runs."""

    def __init__(self) -> None:
        self.restored = False
        self.persisted = False

    def restore(self) -> None:
        self.restored = True
        LOGGER.debug("No persisted state to restore")

    def persist(self) -> None:
        self.persisted = True
        LOGGER.debug("State is not persisted between runs")
