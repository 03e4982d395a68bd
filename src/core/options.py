"""Processor options and their defaults.

We keep option parsing outside the core, but this dataclass defines the
shape the external issue processor expects so adapters can build it safely.
Each attribute carries its input kind in the field metadata; the named input
(``days-before-stale``) and the JSON key (``daysBeforeStale``) are derived
from the attribute name.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Tuple

from core.option_keys import to_camel_case

NAN = float("nan")

STRING = "string"
FLOAT = "float"
INT = "int"
BOOL = "bool"
STRING_ARRAY = "string_array"

REDACTED = "***"


def _option(default: Any, kind: str) -> Any:
    return field(default=default, metadata={"kind": kind})


@dataclass
class ProcessorOptions:
    """Fully resolved run configuration handed to the issue processor.

    Issue/PR specific overrides default to ``NAN`` (numbers) or ``None``
    (tri-state flags), meaning "inherit the general option".
    """

    repo_token: str = _option("", STRING)
    stale_issue_message: str = _option("", STRING)
    stale_pr_message: str = _option("", STRING)
    close_issue_message: str = _option("", STRING)
    close_pr_message: str = _option("", STRING)

    days_before_stale: float = _option(60.0, FLOAT)
    days_before_issue_stale: float = _option(NAN, FLOAT)
    days_before_pr_stale: float = _option(NAN, FLOAT)
    days_before_close: float = _option(7, INT)
    days_before_issue_close: float = _option(NAN, INT)
    days_before_pr_close: float = _option(NAN, INT)

    stale_issue_label: str = _option("Stale", STRING)
    close_issue_label: str = _option("", STRING)
    exempt_issue_labels: str = _option("", STRING)
    stale_pr_label: str = _option("Stale", STRING)
    close_pr_label: str = _option("", STRING)
    exempt_pr_labels: str = _option("", STRING)
    only_labels: str = _option("", STRING)
    only_issue_labels: str = _option("", STRING)
    only_pr_labels: str = _option("", STRING)
    any_of_labels: str = _option("", STRING)
    any_of_issue_labels: str = _option("", STRING)
    any_of_pr_labels: str = _option("", STRING)

    operations_per_run: float = _option(30, INT)

    remove_stale_when_updated: bool = _option(True, BOOL)
    remove_issue_stale_when_updated: Optional[bool] = _option(None, BOOL)
    remove_pr_stale_when_updated: Optional[bool] = _option(None, BOOL)

    debug_only: bool = _option(False, BOOL)
    ascending: bool = _option(False, BOOL)
    delete_branch: bool = _option(False, BOOL)
    start_date: Optional[str] = _option(None, STRING)

    exempt_milestones: str = _option("", STRING)
    exempt_issue_milestones: str = _option("", STRING)
    exempt_pr_milestones: str = _option("", STRING)
    exempt_all_milestones: bool = _option(False, BOOL)
    exempt_all_issue_milestones: Optional[bool] = _option(None, BOOL)
    exempt_all_pr_milestones: Optional[bool] = _option(None, BOOL)

    exempt_assignees: str = _option("", STRING)
    exempt_issue_assignees: str = _option("", STRING)
    exempt_pr_assignees: str = _option("", STRING)
    exempt_all_assignees: bool = _option(False, BOOL)
    exempt_all_issue_assignees: Optional[bool] = _option(None, BOOL)
    exempt_all_pr_assignees: Optional[bool] = _option(None, BOOL)

    enable_statistics: bool = _option(True, BOOL)
    labels_to_remove_when_stale: str = _option("", STRING)
    labels_to_remove_when_unstale: str = _option("", STRING)
    labels_to_add_when_unstale: str = _option("", STRING)

    ignore_updates: bool = _option(False, BOOL)
    ignore_issue_updates: Optional[bool] = _option(None, BOOL)
    ignore_pr_updates: Optional[bool] = _option(None, BOOL)

    exempt_draft_pr: bool = _option(False, BOOL)
    close_issue_reason: str = _option("not_planned", STRING)
    include_only_assigned: bool = _option(False, BOOL)
    only_matching_filter: List[str] = field(
        default_factory=list, metadata={"kind": STRING_ARRAY}
    )

    def to_dict(self, camel_case: bool = True, redact_token: bool = True) -> Dict[str, Any]:
        """Return a JSON-ready mapping of every option.

        NaN sentinels become ``None`` so the result serializes as ``null``.
        """

        result: Dict[str, Any] = {}
        for spec in OPTION_SPECS:
            value = getattr(self, spec.name)
            if isinstance(value, float) and math.isnan(value):
                value = None
            elif isinstance(value, list):
                value = list(value)
            if spec.name == "repo_token" and redact_token and value:
                value = REDACTED
            result[spec.json_key if camel_case else spec.name] = value
        return result


@dataclass(frozen=True)
class OptionSpec:
    """Naming and coercion details for one option."""

    name: str
    kind: str

    @property
    def input_name(self) -> str:
        return self.name.replace("_", "-")

    @property
    def json_key(self) -> str:
        return to_camel_case(self.name)


OPTION_SPECS: Tuple[OptionSpec, ...] = tuple(
    OptionSpec(name=item.name, kind=item.metadata["kind"]) for item in fields(ProcessorOptions)
)

_NAME_BY_JSON_KEY: Dict[str, str] = {spec.json_key: spec.name for spec in OPTION_SPECS}


def default_options() -> ProcessorOptions:
    """Return a fresh options record populated with every default."""

    return ProcessorOptions()


def field_for_key(key: str) -> Optional[str]:
    """Map a kebab, snake or camel-cased key to its option attribute."""

    return _NAME_BY_JSON_KEY.get(to_camel_case(key))
