from __future__ import annotations

import logging

import pytest

from adapters.json_config import get_json_options
from core.errors import OptionsError


def test_empty_input_is_an_empty_source() -> None:
    assert get_json_options("") == {}
    assert get_json_options("   ") == {}
    assert get_json_options("{}") == {}


def test_keys_are_mapped_to_option_names() -> None:
    options = get_json_options(
        '{"days-before-stale": 5, "stale_pr_label": "idle", "deleteBranch": true}'
    )
    assert options == {
        "days_before_stale": 5,
        "stale_pr_label": "idle",
        "delete_branch": True,
    }


def test_values_are_used_as_is() -> None:
    options = get_json_options('{"days-before-close": 0, "only-labels": "", "start-date": null}')
    assert options["days_before_close"] == 0
    assert options["only_labels"] == ""
    assert options["start_date"] is None


def test_unknown_keys_are_dropped_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        options = get_json_options('{"colour": "blue", "ascending": true}')
    assert options == {"ascending": True}
    assert "colour" in caplog.text


def test_malformed_json_raises() -> None:
    with pytest.raises(OptionsError, match="json-config"):
        get_json_options("{not json")


def test_non_object_json_raises() -> None:
    with pytest.raises(OptionsError, match="JSON object"):
        get_json_options('["days-before-stale"]')
