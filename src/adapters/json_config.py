"""JSON override adapter.

The ``json-config`` input carries a single JSON object whose keys may be
kebab, snake or camel-cased. Values are passed through untouched; the merge
step decides whether they override.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

from core.errors import OptionsError
from core.options import field_for_key

LOGGER = logging.getLogger(__name__)


def get_json_options(json_config: str) -> Dict[str, Any]:
    """Parse the JSON block and map its keys to option attributes."""

    if not json_config or not json_config.strip():
        return {}

    try:
        payload = json.loads(json_config)
    except json.JSONDecodeError as exc:
        raise OptionsError(f"json-config is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise OptionsError("json-config must be a JSON object")

    options: Dict[str, Any] = {}
    for key, value in payload.items():
        name = field_for_key(key)
        if name is None:
            LOGGER.warning("Ignoring unknown json-config key %r", key)
            continue
        options[name] = value
    return options
