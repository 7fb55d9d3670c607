# Copyright © SixtyFPS GmbH <info@slint.dev>
# SPDX-License-Identifier: MIT

from __future__ import annotations

import logging
import types
from typing import Any, Callable

import slint
from slint import core

from .config import AppConfig

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]

GREETING = "Hello from Python"


def _declared_callbacks(cls: type) -> set[str]:
    names = set()
    for klass in cls.__mro__:
        for value in vars(klass).values():
            info = getattr(value, "slint.callback", None)
            if info is not None and "global_name" not in info:
                names.add(info["name"].replace("_", "-"))
    return names


def _callback_name(component: slint.Component, signal_name: str) -> str:
    name = signal_name.replace("_", "-")
    if name not in _declared_callbacks(type(component)):
        raise AttributeError(
            f"{type(component).__name__} has no callback named {signal_name!r}"
        )
    return name


def attach(
    component: slint.Component, signal_name: str, handler: Callable[[], Any]
) -> None:
    """Registers `handler` to be invoked whenever the callback `signal_name` of `component` fires.

    A callback holds a single handler: attaching replaces whatever handler was set before, including
    the ones installed with `@slint.callback`. The name may be given as spelled in the `.slint` file
    (`plus-clicked`) or as exposed to Python (`plus_clicked`), and must be one the component class
    binds with `@slint.callback`; anything else raises `AttributeError`.
    """

    name = _callback_name(component, signal_name)
    logger.debug("Attaching %r to %s.%s", handler, type(component).__name__, name)
    # The @slint.callback methods shadow the generated callback properties, so go through the instance.
    component.__instance__.set_callback(name, handler)


def emit(component: slint.Component, signal_name: str) -> Any:
    """Fires the callback `signal_name` on the calling thread, as if the UI had triggered it."""

    name = _callback_name(component, signal_name)
    return component.__instance__.invoke(name)


def post(component: slint.Component, signal_name: str) -> None:
    """Fires the callback `signal_name` from any thread. The handler runs later, on the thread
    that runs the event loop."""

    name = _callback_name(component, signal_name)
    instance = component.__instance__

    def fire() -> None:
        instance.invoke(name)

    core.invoke_from_event_loop(fire)


def run(component: slint.Component) -> None:
    """Shows the window of `component` and spins the event loop until it is quit, for example
    when the last window is closed."""

    logger.info("Running event loop for %s", type(component).__name__)
    component.run()
    logger.debug("Event loop for %s returned", type(component).__name__)


def increment(component: Any) -> None:
    component.counter = component.counter + 1


def decrement(component: Any) -> None:
    component.counter = component.counter - 1


def load_hello(config: AppConfig) -> types.SimpleNamespace:
    """Compiles the UI description and returns the namespace with the generated `Hello` class.

    Raises `slint.CompileError` if the file does not compile."""

    logger.debug("Loading %s (style: %s)", config.ui_path, config.style or "default")
    return slint.load_file(
        config.ui_path,
        quiet=config.quiet,
        style=config.style,
        include_paths=list(config.include_paths) or None,
    )


def build_app_class(hello: type[slint.Component]) -> type[slint.Component]:
    class HelloApp(hello):  # type: ignore[valid-type, misc]
        def __init__(self, notify: Notifier = print, **kwargs: Any) -> None:
            self.notify = notify
            super().__init__(**kwargs)

        @slint.callback
        def foobar(self) -> None:
            self.notify(GREETING)

        @slint.callback
        def plus_clicked(self) -> None:
            increment(self)

        @slint.callback
        def minus_clicked(self) -> None:
            decrement(self)

    return HelloApp


def create_app(config: AppConfig, notify: Notifier = print) -> slint.Component:
    """Loads the UI and instantiates the one `HelloApp` of the process, with its handlers
    attached and `counter` set to `config.initial_counter`."""

    module = load_hello(config)
    app_class = build_app_class(module.Hello)
    app = app_class(notify=notify, counter=config.initial_counter)
    logger.debug("Created %s with counter=%d", app_class.__name__, app.counter)
    return app


__all__ = [
    "GREETING",
    "Notifier",
    "attach",
    "emit",
    "post",
    "run",
    "increment",
    "decrement",
    "load_hello",
    "build_app_class",
    "create_app",
]
