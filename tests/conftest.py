# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: MIT

import typing

import pytest

import slint
from hello_counter import AppConfig, create_app


@pytest.fixture
def notifications() -> list[str]:
    return []


@pytest.fixture
def app(notifications: list[str]) -> typing.Iterator[slint.Component]:
    instance = create_app(AppConfig(quiet=True), notify=notifications.append)
    yield instance
    del instance
