# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: MIT

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

INCLUDE_PATH_ENV = "SLINT_INCLUDE_PATH"


def default_ui_path() -> Path:
    """Returns the `hello.slint` file shipped with the package."""
    return Path(__file__).parent / "ui" / "hello.slint"


def include_paths_from_env(environ: Mapping[str, str] | None = None) -> List[Path]:
    """Splits `SLINT_INCLUDE_PATH` the way `PATH` is split, ignoring empty entries."""
    if environ is None:
        environ = os.environ
    raw = environ.get(INCLUDE_PATH_ENV)
    if not raw:
        return []
    return [Path(entry) for entry in raw.split(os.pathsep) if entry]


@dataclass(slots=True)
class AppConfig:
    ui_path: Path = field(default_factory=default_ui_path)
    style: str | None = None
    include_paths: List[Path] = field(default_factory=list)
    initial_counter: int = 0
    quiet: bool = False


__all__ = ["AppConfig", "INCLUDE_PATH_ENV", "default_ui_path", "include_paths_from_env"]
