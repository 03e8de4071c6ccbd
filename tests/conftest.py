"""Shared test fixtures for xconsole test suite."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from xconsole import binder as _binder_mod
from xconsole.engine import ExtendedConsole


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent


# ---------------------------------------------------------------------------
# Recording sink
# ---------------------------------------------------------------------------
class RecordingSink:
    """Sink double recording (channel, parts) for every call.

    Each channel returns the recorded tuple so pass-through of the sink's
    return value can be asserted.
    """

    def __init__(self):
        self.calls = []

    def _record(self, channel, parts):
        entry = (channel, parts)
        self.calls.append(entry)
        return entry

    def log(self, *parts):
        return self._record('log', parts)

    def warn(self, *parts):
        return self._record('warn', parts)

    def error(self, *parts):
        return self._record('error', parts)

    def info(self, *parts):
        return self._record('info', parts)

    def on(self, channel):
        """Parts of every call on one channel."""
        return [parts for ch, parts in self.calls if ch == channel]

    def clear(self):
        self.calls.clear()


@pytest.fixture
def sink():
    """A fresh RecordingSink."""
    return RecordingSink()


@pytest.fixture
def make_console(sink):
    """Factory building an initialized ExtendedConsole on the recording sink.

    Construction warnings are cleared so tests only see dispatch calls;
    pass ``keep_warnings=True`` to keep them.
    """
    def _make(config=None, keep_warnings=False, init=True, **options):
        engine = ExtendedConsole(config, sink=sink, **options)
        if init:
            engine.init_sync()
        if not keep_warnings:
            sink.clear()
        return engine
    return _make


# ---------------------------------------------------------------------------
# Environment and singleton isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _clean_env():
    """Run every test without PYTHON_ENV so dev mode defaults to off."""
    env = {k: v for k, v in os.environ.items() if k != "PYTHON_ENV"}
    with patch.dict(os.environ, env, clear=True):
        yield


@pytest.fixture(autouse=True)
def _reset_ambient_console():
    """Restore the module-level console and ambient namespace after each test."""
    old_engine = _binder_mod._engine
    old_attrs = dict(vars(_binder_mod.console))
    yield
    _binder_mod._engine = old_engine
    vars(_binder_mod.console).clear()
    vars(_binder_mod.console).update(old_attrs)


@pytest.fixture
def project_dir(tmp_path):
    """A temporary project directory with a nested subdirectory."""
    nested = tmp_path / "project" / "src" / "pkg"
    nested.mkdir(parents=True)
    return tmp_path / "project"
