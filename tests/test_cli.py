# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import Any

import pytest

from hello_counter import cli
from hello_counter.config import INCLUDE_PATH_ENV, AppConfig, default_ui_path


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(INCLUDE_PATH_ENV, raising=False)
    config = cli.config_from_args(cli.build_parser().parse_args([]))
    assert config == AppConfig()


def test_arguments(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(INCLUDE_PATH_ENV, os.pathsep.join(["/from/env"]))
    args = cli.build_parser().parse_args(
        [
            "--ui",
            "other.slint",
            "--style",
            "fluent",
            "--include",
            "inc1",
            "--include",
            "inc2",
            "--counter",
            "-3",
            "--quiet",
        ]
    )
    config = cli.config_from_args(args)
    assert config.ui_path == Path("other.slint")
    assert config.style == "fluent"
    assert config.include_paths == [Path("inc1"), Path("inc2"), Path("/from/env")]
    assert config.initial_counter == -3
    assert config.quiet


def test_main_creates_and_runs(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[Any] = []
    sentinel = object()

    def fake_create_app(config: AppConfig) -> object:
        calls.append(("create", config))
        return sentinel

    monkeypatch.setattr(cli, "create_app", fake_create_app)
    monkeypatch.setattr(cli, "run", lambda app: calls.append(("run", app)))
    monkeypatch.delenv(INCLUDE_PATH_ENV, raising=False)

    assert cli.main(["--counter", "5"]) == 0
    assert calls == [
        ("create", AppConfig(ui_path=default_ui_path(), initial_counter=5)),
        ("run", sentinel),
    ]


def test_invalid_counter() -> None:
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["--counter", "many"])
