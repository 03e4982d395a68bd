"""Application entry point for stale-options."""

from __future__ import annotations

import argparse
import importlib
import json
import logging
import os
import sys
from typing import Any, Callable, Mapping, Optional, TextIO

from art import tprint

import settings
from adapters.action_inputs import get_input_options, read_input
from adapters.json_config import get_json_options
from adapters.memory_state import InMemoryState
from adapters.workflow_commands import (
    GithubOutput,
    WorkflowCommandFormatter,
    add_mask,
    set_failed,
)
from core.errors import OptionsError
from core.models import RepoContext
from core.options import ProcessorOptions
from core.ports import IssueProcessorPort, OutputPort, StatePort
from core.resolver import resolve_options
from core.runner import ActionRunner

NAME = "STALE"
FONT = "tarty-1"

LOGGER = logging.getLogger(__name__)

ProcessorFactory = Callable[[ProcessorOptions, StatePort], IssueProcessorPort]
StateFactory = Callable[[ProcessorOptions], StatePort]


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _collect_redaction_values(environ: Mapping[str, str]) -> list[str]:
    values = []
    for name in settings.REDACT_ENV_NAMES:
        value = environ.get(name, "").strip()
        if value:
            values.append(value)
    return sorted(set(values), key=len, reverse=True)


def _configure_logging(environ: Mapping[str, str], stream: TextIO) -> None:
    level = getattr(logging, str(settings.LOG_LEVEL).upper(), logging.INFO)
    secrets = _collect_redaction_values(environ)
    for secret in secrets:
        add_mask(secret, stream)

    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(WorkflowCommandFormatter(secrets))
    logging.basicConfig(level=level, handlers=[handler], force=True)


def load_factory(path: str) -> Callable[..., Any]:
    """Import ``module:attribute`` and return the attribute."""

    module_name, sep, attribute = path.partition(":")
    if not sep or not module_name or not attribute:
        raise OptionsError(f'Factory "{path}" must look like module:attribute')
    module = importlib.import_module(module_name)
    try:
        return getattr(module, attribute)
    except AttributeError as exc:
        raise OptionsError(f'Module "{module_name}" has no attribute "{attribute}"') from exc


def resolve_from_environment(
    environ: Optional[Mapping[str, str]] = None,
    repository: Optional[str] = None,
) -> ProcessorOptions:
    """Resolve the run's options from named inputs and the JSON block."""

    if environ is None:
        environ = os.environ
    if repository is None:
        repository = environ.get("GITHUB_REPOSITORY") or settings.GITHUB_REPOSITORY

    repo = RepoContext.from_full_name(repository)
    input_options = get_input_options(environ)
    json_options = get_json_options(read_input(settings.JSON_CONFIG_INPUT, environ))
    return resolve_options(input_options, json_options, repo)


def run_action(
    processor_factory: ProcessorFactory,
    state_factory: Optional[StateFactory] = None,
    environ: Optional[Mapping[str, str]] = None,
    outputs: Optional[OutputPort] = None,
    repository: Optional[str] = None,
) -> int:
    """Resolve options, run the processor and return the exit code.

    Any failure, including one raised by the processor, marks the run as
    failed with the error's message.
    """

    try:
        options = resolve_from_environment(environ, repository)
        state = state_factory(options) if state_factory else InMemoryState()
        processor = processor_factory(options, state)
        if outputs is None:
            outputs = GithubOutput(settings.GITHUB_OUTPUT)
        ActionRunner(processor, state, outputs).run()
    except Exception as exc:
        LOGGER.debug("Run failed", exc_info=True)
        return set_failed(str(exc))
    return 0


def _resolve(args: argparse.Namespace) -> int:
    try:
        options = resolve_from_environment(repository=args.repository)
    except OptionsError as exc:
        return set_failed(str(exc))
    print(json.dumps(options.to_dict(camel_case=not args.snake_case), indent=2))
    return 0


def _run(args: argparse.Namespace) -> int:
    _print_banner()
    try:
        processor_factory = load_factory(args.processor)
        state_factory = load_factory(args.state) if args.state else None
    except (ImportError, OptionsError) as exc:
        return set_failed(str(exc))

    LOGGER.info("Starting stale run for %s", args.repository or settings.GITHUB_REPOSITORY)
    return run_action(processor_factory, state_factory, repository=args.repository)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="stale-options")
    parser.add_argument(
        "--repository",
        help="owner/repo used to scope filter terms (defaults to GITHUB_REPOSITORY)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser("resolve", help="Print the resolved options as JSON")
    resolve_parser.add_argument(
        "--snake-case",
        action="store_true",
        help="Use Python attribute names instead of camel-cased keys",
    )

    run_parser = subparsers.add_parser("run", help="Resolve options and run an issue processor")
    run_parser.add_argument(
        "--processor",
        required=True,
        help="module:factory building the issue processor from (options, state)",
    )
    run_parser.add_argument(
        "--state",
        help="module:factory building the state store from options",
    )

    args = parser.parse_args(argv)
    if args.command == "resolve":
        # stdout carries the JSON document.
        _configure_logging(os.environ, sys.stderr)
        return _resolve(args)
    _configure_logging(os.environ, sys.stdout)
    return _run(args)


if __name__ == "__main__":
    sys.exit(main())
