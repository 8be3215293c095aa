import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

SETTINGS_ENV = ("COMMAND_PREFIX", "DEFAULT_TIMEZONE", "NUDGE_TO_PAST", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch):
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
