"""Shared test fixtures for Ejectd tests."""
import json

import pytest

from ejectd.core import config as config_mod
from ejectd.core.config import EjectdConfig
from ejectd.core.executor import CommandResult


class FakeRunner:
    """Stand-in for run_command that answers from a table of canned results.

    Unknown commands fail with return code 1, like a missing device would.
    """

    def __init__(self):
        self.responses = {}
        self.calls = []

    def add(self, cmd, stdout="", returncode=0, stderr=""):
        self.responses[tuple(cmd)] = CommandResult(stdout=stdout, stderr=stderr, returncode=returncode)
        return self

    def __call__(self, cmd):
        self.calls.append(list(cmd))
        return self.responses.get(
            tuple(cmd), CommandResult(stdout="", stderr="unexpected command", returncode=1)
        )

    def calls_to(self, *prefix):
        """Recorded calls whose argv starts with ``prefix``."""
        return [call for call in self.calls if tuple(call[:len(prefix)]) == prefix]


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    """Keep EJECTD_* variables and the global config out of every test."""
    for name in [
        "EJECTD_MOCK",
        "EJECTD_MOUNT_POINT_LIMIT",
        "EJECTD_INVALID_PAUSE",
        "EJECTD_COMMAND_TIMEOUT",
        "EJECTD_LSBLK",
        "EJECTD_FINDMNT",
        "EJECTD_UDISKSCTL",
    ]:
        monkeypatch.delenv(name, raising=False)
    config_mod.set_config(None)
    yield
    config_mod.set_config(None)


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def config():
    """Default config without the pause after invalid input."""
    return EjectdConfig(invalid_pause=0)


@pytest.fixture
def lsblk_json():
    """Build ``lsblk -J`` output from device dicts."""
    def build(*devices):
        return json.dumps({"blockdevices": list(devices)}, ensure_ascii=False)
    return build
