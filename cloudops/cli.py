#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Command line entry point: ``cloudops``.

Reads a ``config.properties`` parameter file (plus ``-p key=value``
overrides), dispatches the selected operation once and prints the rendered
outcome. Exit status is 0 on success, 1 on any dispatch failure and 2 when
the parameter file or configuration cannot be read.
"""

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from ._version import __version__
from .core.config import DispatcherConfig, get_config
from .core.data.models import ParameterSet
from .core.dispatcher import run_dispatch
from .core.operations.registry import create_default_registry
from .core.reporter import render_outcome
from .core.utils.exceptions import CloudOpsError, ExceptionFormatter
from .core.utils.logger import configure_logging

DEFAULT_PARAMETER_FILE = "config.properties"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _parse_assignment(text: str) -> Dict[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f"expected key=value, got '{text}'")
    return {key.strip(): value}


def _parse_seconds(text: str) -> float:
    try:
        value = float(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected a number of seconds, got '{text}'") from e
    if value < 0:
        raise argparse.ArgumentTypeError("seconds cannot be negative")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cloudops",
        description="Dispatch one cloud or deployment operation to a remote gRPC service.",
    )
    parser.add_argument(
        "-c", "--config",
        help=f"parameter file in .properties format (default: ./{DEFAULT_PARAMETER_FILE} if present)",
    )
    parser.add_argument(
        "-o", "--operation",
        help="operation to run; overrides the selector parameter in the file",
    )
    parser.add_argument(
        "-p", "--param",
        dest="params",
        action="append",
        default=[],
        type=_parse_assignment,
        metavar="KEY=VALUE",
        help="set or override one parameter (repeatable)",
    )
    parser.add_argument("--address", help="compute/deployment service host:port")
    parser.add_argument("--module-address", help="generic module service host:port")
    parser.add_argument(
        "--timeout",
        type=_parse_seconds,
        help="per-call deadline in seconds (0 disables the deadline)",
    )
    parser.add_argument(
        "--close-timeout",
        type=_parse_seconds,
        help="seconds to wait for in-flight calls when closing the channel",
    )
    parser.add_argument("--log-level", help="debug, info, warning or error")
    parser.add_argument("--json", action="store_true", help="print the outcome as JSON")
    parser.add_argument(
        "--list",
        action="store_true",
        help="list operations and their parameters, then exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _load_parameters(args: argparse.Namespace) -> ParameterSet:
    overrides: Dict[str, str] = {}
    for assignment in args.params:
        overrides.update(assignment)

    if args.config:
        base = ParameterSet.from_properties_file(args.config)
    elif Path(DEFAULT_PARAMETER_FILE).is_file():
        base = ParameterSet.from_properties_file(DEFAULT_PARAMETER_FILE)
    else:
        base = ParameterSet()
    return base.merged(overrides)


def _resolve_config(args: argparse.Namespace) -> DispatcherConfig:
    config = get_config().with_overrides(
        address=args.address,
        module_address=args.module_address,
        close_timeout=args.close_timeout,
        log_level=args.log_level,
    )
    if args.timeout is not None:
        config = replace(config, call_timeout=args.timeout or None)
    return config


def _print_operations(out) -> None:
    for spec in create_default_registry():
        names = ", ".join(param.describe() for param in spec.parameters)
        print(f"{spec.selector.value:<22} {spec.title:<18} {names}", file=out)


def main(argv: Optional[Sequence[str]] = None, out=None) -> int:
    out = out if out is not None else sys.stdout
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.list:
        _print_operations(out)
        return EXIT_OK

    try:
        config = _resolve_config(args)
        parameters = _load_parameters(args)
    except CloudOpsError as e:
        print(f"error: {ExceptionFormatter.format_exception_summary(e)}", file=sys.stderr)
        return EXIT_USAGE

    configure_logging(config.log_level)
    outcome = run_dispatch(parameters, config=config, selector=args.operation)
    record = render_outcome(outcome)

    if args.json:
        print(json.dumps(record.as_dict(), indent=2, sort_keys=True), file=out)
    else:
        print(record.text, file=out)
    return EXIT_OK if outcome.ok else EXIT_FAILURE


def run(argv: Optional[List[str]] = None) -> None:
    sys.exit(main(argv))


if __name__ == "__main__":
    run()
