"""Helpers for working with option key names."""

from __future__ import annotations

import re

INPUT_ENV_PREFIX = "INPUT_"

_DELIMITED_CHAR = re.compile(r"[-_](\w)")


def to_camel_case(key: str) -> str:
    """Return ``key`` with every ``-x``/``_x`` pair collapsed to ``X``.

    ``days-before-stale`` and ``days_before_stale`` both become
    ``daysBeforeStale``; keys that are already camel-cased pass through.
    """

    return _DELIMITED_CHAR.sub(lambda match: match.group(1).upper(), key)


def input_env_name(name: str) -> str:
    """Return the environment variable the runner uses for a named input."""

    return f"{INPUT_ENV_PREFIX}{name.replace(' ', '_').upper()}"
