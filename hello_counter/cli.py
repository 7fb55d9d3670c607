# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: MIT

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import AppConfig, default_ui_path, include_paths_from_env
from .wiring import create_app, run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hello-counter",
        description="Show the Hello window: a greeting button and a counter.",
    )
    parser.add_argument(
        "--ui",
        dest="ui_path",
        type=Path,
        default=None,
        help="Path to the .slint file declaring the Hello component. Defaults to the bundled one.",
    )
    parser.add_argument(
        "--style",
        dest="style",
        default=None,
        help="Widget style to apply when compiling (for example, 'material').",
    )
    parser.add_argument(
        "--include",
        dest="include_paths",
        action="append",
        type=Path,
        default=None,
        help=(
            "Additional include paths to pass to the Slint compiler. "
            "May be provided multiple times. Entries from SLINT_INCLUDE_PATH are appended."
        ),
    )
    parser.add_argument(
        "--counter",
        dest="counter",
        type=int,
        default=0,
        help="Initial value of the counter.",
    )
    parser.add_argument(
        "--quiet",
        dest="quiet",
        action="store_true",
        help="Suppress compiler warnings.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        dest="verbose",
        action="count",
        default=0,
        help="Log more. Pass twice for debug output.",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> AppConfig:
    return AppConfig(
        ui_path=args.ui_path or default_ui_path(),
        style=args.style,
        include_paths=(args.include_paths or []) + include_paths_from_env(),
        initial_counter=args.counter,
        quiet=bool(args.quiet),
    )


def _log_level(verbose: int) -> int:
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=_log_level(args.verbose),
        format="%(levelname)s %(name)s: %(message)s",
    )

    app = create_app(config_from_args(args))
    run(app)
    return 0


__all__ = ["main", "build_parser", "config_from_args"]
