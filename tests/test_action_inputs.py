from __future__ import annotations

import math

from adapters.action_inputs import (
    get_input_options,
    read_input,
    to_optional_bool,
    to_optional_float,
    to_optional_int,
    to_optional_string,
    to_optional_string_array,
)
from core.merge import merge_options
from core.options import default_options


def test_read_input_uses_runner_variable_and_strips() -> None:
    environ = {"INPUT_STALE-ISSUE-LABEL": "  wontfix \n"}
    assert read_input("stale-issue-label", environ) == "wontfix"
    assert read_input("stale-pr-label", environ) == ""


def test_string_coercion() -> None:
    assert to_optional_string("hello") == "hello"
    assert to_optional_string("") is None


def test_number_coercion_parses_leading_prefix() -> None:
    assert to_optional_float("10") == 10.0
    assert to_optional_float("1.5days") == 1.5
    assert to_optional_float("-2") == -2.0
    assert to_optional_float("abc") is None
    assert to_optional_int("7") == 7
    assert to_optional_int("7.9") == 7
    assert to_optional_int("") is None


def test_zero_counts_as_not_provided() -> None:
    assert to_optional_float("0") is None
    assert to_optional_float("0.0") is None
    assert to_optional_int("0") is None


def test_bool_coercion_is_tri_state() -> None:
    assert to_optional_bool("true") is True
    assert to_optional_bool("false") is False
    assert to_optional_bool("") is None
    assert to_optional_bool("True") is None
    assert to_optional_bool("yes") is None


def test_string_array_coercion() -> None:
    assert to_optional_string_array("") is None
    assert to_optional_string_array('["label:bug", "author:me"]') == ["label:bug", "author:me"]
    assert to_optional_string_array("label:bug") == ["label:bug"]
    assert to_optional_string_array('"label:bug"') == ['"label:bug"']


def test_get_input_options_reads_every_option() -> None:
    environ = {
        "INPUT_DAYS-BEFORE-STALE": "10",
        "INPUT_DEBUG-ONLY": "true",
        "INPUT_ONLY-MATCHING-FILTER": "label:bug",
    }
    options = get_input_options(environ)
    assert options["days_before_stale"] == 10.0
    assert options["debug_only"] is True
    assert options["only_matching_filter"] == ["label:bug"]
    assert options["days_before_close"] is None
    assert options["ignore_pr_updates"] is None
    assert options["repo_token"] is None


def test_zero_input_does_not_override_earlier_value() -> None:
    inputs = get_input_options({"INPUT_DAYS-BEFORE-CLOSE": "0"})
    options = merge_options(default_options(), inputs)
    assert options.days_before_close == 7

    options = merge_options(default_options(), {"days_before_close": 3}, inputs)
    assert options.days_before_close == 3


def test_non_decimal_number_forms_are_not_provided() -> None:
    assert to_optional_float("Infinity") is None
    assert to_optional_float("-Infinity") is None
    assert to_optional_int("0x10") is None
