"""Named-input adapter.

Reads the action's named inputs from the runner environment (``INPUT_*``
variables) and coerces each one to its option kind. Every coercion returns
``None`` when the input should count as "not provided".
"""

from __future__ import annotations

import json
import logging
import os
import re
from typing import Any, Callable, Dict, List, Mapping, Optional

from core.option_keys import input_env_name
from core.options import BOOL, FLOAT, INT, OPTION_SPECS, STRING, STRING_ARRAY

LOGGER = logging.getLogger(__name__)

_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"[+-]?\d+")


def read_input(name: str, environ: Mapping[str, str]) -> str:
    """Return the raw value of a named input, or an empty string."""

    return environ.get(input_env_name(name), "").strip()


def to_optional_string(raw: str) -> Optional[str]:
    return raw or None


def to_optional_float(raw: str) -> Optional[float]:
    """Parse the leading number of ``raw``; zero counts as not provided."""

    match = _FLOAT_PREFIX.match(raw)
    if not match:
        return None
    return float(match.group(0)) or None


def to_optional_int(raw: str) -> Optional[int]:
    """Parse the leading integer of ``raw``; zero counts as not provided."""

    match = _INT_PREFIX.match(raw)
    if not match:
        return None
    return int(match.group(0)) or None


def to_optional_bool(raw: str) -> Optional[bool]:
    """Return True/False for the literal strings, None for anything else.

    None keeps "not set, inherit the general flag" apart from an explicit
    ``false``.
    """

    if raw == "true":
        return True
    if raw == "false":
        return False
    return None


def to_optional_string_array(raw: str) -> Optional[List[str]]:
    """Parse a JSON list of terms, falling back to a single raw term."""

    if not raw:
        return None
    try:
        parsed = json.loads(raw)
    except ValueError:
        return [raw]
    if not isinstance(parsed, list):
        LOGGER.debug("Input %r is not a JSON list, using it as a single term", raw)
        return [raw]
    return [item if isinstance(item, str) else json.dumps(item) for item in parsed]


_COERCERS: Dict[str, Callable[[str], Any]] = {
    STRING: to_optional_string,
    FLOAT: to_optional_float,
    INT: to_optional_int,
    BOOL: to_optional_bool,
    STRING_ARRAY: to_optional_string_array,
}


def get_input_options(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Read and coerce every named input; absent inputs map to None."""

    if environ is None:
        environ = os.environ
    return {
        spec.name: _COERCERS[spec.kind](read_input(spec.input_name, environ))
        for spec in OPTION_SPECS
    }
