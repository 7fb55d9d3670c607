# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: MIT

r"""
.. include:: ../README.md
"""

from .config import AppConfig as AppConfig
from .wiring import GREETING as GREETING
from .wiring import attach as attach
from .wiring import create_app as create_app
from .wiring import emit as emit
from .wiring import load_hello as load_hello
from .wiring import post as post
from .wiring import run as run

__all__ = [
    "AppConfig",
    "GREETING",
    "attach",
    "create_app",
    "emit",
    "load_hello",
    "post",
    "run",
]
