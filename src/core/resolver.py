"""Options resolution pipeline.

defaults -> named inputs -> JSON overrides -> validation -> filter compilation.
The result is handed by reference to the issue processor and not changed
afterwards.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Mapping

from core.errors import OptionsError
from core.filters import compile_filter_terms
from core.merge import merge_options
from core.models import RepoContext
from core.options import ProcessorOptions, default_options
from core.validation import validate_options

LOGGER = logging.getLogger(__name__)


def _filter_terms(value: Any) -> List[str]:
    # A bare string from the JSON block counts as a single term.
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(term, str) for term in value):
        raise OptionsError(f'Option "{value}" is not a list of filter terms')
    return value


def resolve_options(
    input_options: Mapping[str, Any],
    json_options: Mapping[str, Any],
    repo: RepoContext,
) -> ProcessorOptions:
    """Build, validate and finalize the options for one run."""

    options = merge_options(default_options(), input_options, json_options)
    LOGGER.debug("Merged options:\n%s", json.dumps(options.to_dict(), indent=2, default=str))
    validate_options(options)

    terms = _filter_terms(options.only_matching_filter)
    LOGGER.debug("Only-matching filter terms: %s", terms)
    options.only_matching_filter = compile_filter_terms(terms, repo)
    LOGGER.debug("Compiled filter terms: %s", options.only_matching_filter)

    LOGGER.info("Resolved options:\n%s", json.dumps(options.to_dict(), indent=2))
    return options
