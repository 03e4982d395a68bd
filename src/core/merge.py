"""Layered option merging (core domain)."""

from __future__ import annotations

import math
from dataclasses import fields
from typing import Any, Mapping

from core.errors import OptionsError
from core.options import ProcessorOptions

_OPTION_NAMES = frozenset(item.name for item in fields(ProcessorOptions))


def is_absent(value: Any) -> bool:
    """Return True when ``value`` means "not supplied by this source".

    Only ``None``, a float NaN and the empty string are absent. ``0``,
    ``False`` and empty lists are real values and always override.
    """

    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and len(value) == 0


def merge_options(base: ProcessorOptions, *sources: Mapping[str, Any]) -> ProcessorOptions:
    """Fold ``sources`` into ``base`` in order and return ``base``.

    Later sources win, but only for values they actually carry; an absent
    value leaves whatever an earlier source (or the default) put there.
    """

    for source in sources:
        for name, value in source.items():
            if name not in _OPTION_NAMES:
                raise OptionsError(f"Unknown option \"{name}\"")
            if is_absent(value):
                continue
            setattr(base, name, value)
    return base
