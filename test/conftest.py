"""
Pytest configuration and fixtures for hookloader tests
"""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))  # noqa: PTH100, PTH118, PTH119, PTH120

from hookloader.plugins.host import InMemoryHookHost  # noqa: E402
from hookloader.plugins.registrar import Registrar  # noqa: E402


class RecordingHost:
    """Host double that records every registration call in order."""

    def __init__(self):
        self.calls = []

    def register_filter(self, hook_name, callback, priority, accepted_args):
        self.calls.append(("filter", hook_name, callback, priority, accepted_args))

    def register_action(self, hook_name, callback, priority, accepted_args):
        self.calls.append(("action", hook_name, callback, priority, accepted_args))


class Component:
    """Plain object owning callbacks, as a plugin class would."""

    def __init__(self):
        self.seen = []

    def render(self, content):
        return f"<p>{content}</p>"

    def setup(self):
        self.seen.append("setup")

    def record(self, *args):
        self.seen.append(args)


@pytest.fixture
def recording_host():
    return RecordingHost()


@pytest.fixture
def host():
    return InMemoryHookHost()


@pytest.fixture
def registrar(recording_host):
    return Registrar(recording_host)


@pytest.fixture
def component():
    return Component()
