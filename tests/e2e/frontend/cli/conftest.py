"""Fixtures and helpers for end-to-end tests of the ``calque`` CLI.

Provides test-only commands (`log-demo` emits one record per entry of
`DEMO_RECORDS`, `color-demo` echoes styled text) plus fixtures to register
them, obtain a CliRunner and run inside an isolated filesystem.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from calque.entrypoints.cli.main import calque

# pylint: disable=redefined-outer-name

# (logger name, level, message), emitted in order by `log-demo`
DEMO_RECORDS = [
    ("calque.demo", logging.DEBUG, "demo debug"),
    ("calque.demo", logging.INFO, "demo info"),
    ("calque.demo", logging.WARNING, "demo warning"),
    ("calque.demo", logging.ERROR, "demo error"),
    ("calque.demo", logging.CRITICAL, "demo critical"),
    ("babel.numbers", logging.WARNING, "locale data warning"),
    ("some.thirdparty", logging.DEBUG, "third-party debug"),
    ("some.thirdparty", logging.INFO, "third-party info"),
    ("some.thirdparty", logging.WARNING, "third-party warning"),
    ("calque.demo", logging.DEBUG, "trailing debug"),
]


@click.command()
def log_demo():
    """Emit every record in DEMO_RECORDS."""
    for name, level, message in DEMO_RECORDS:
        logging.getLogger(name).log(level, message)


@click.command()
def color_demo():
    """Echo one styled line to stdout."""
    click.secho("styled line", fg="red")


def _unregister(group, name: str) -> None:
    """Remove *name* from a Click-Extra group, including its help sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for section in getattr(group, "_sections", []):
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register 'log-demo' and 'color-demo' for the duration of a test."""
    calque.add_command(log_demo, name="log-demo")
    calque.add_command(color_demo, name="color-demo")
    try:
        yield
    finally:
        _unregister(calque, "log-demo")
        _unregister(calque, "color-demo")


@pytest.fixture(autouse=True)
def reset_logger_levels():
    """Undo per-logger levels that -L applied during a test."""
    names = ("babel", "calque", "calque.demo", "some.thirdparty")
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


@pytest.fixture
def runner():
    """Return a CliRunner whose flight recorder writes to ./latest.log."""
    return CliRunner(env={"CALQUE_LOG_PATH": "latest.log"})


@pytest.fixture
def fs(runner):
    """Run the test inside runner.isolated_filesystem()."""
    with runner.isolated_filesystem():
        yield
