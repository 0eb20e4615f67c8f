from __future__ import annotations

import os
from pathlib import Path

import pytest

# IMPORTANT: this runs at import time (before snapstate is imported by tests)
BASE = Path(os.getenv("PYTEST_TMP_BASE", "/tmp")) / "snapstate_pytest"
STATE_ROOT = BASE / "current"
COMMON_ROOT = BASE / "common"

# Tests MUST NOT rely on the user's shell env.
os.environ["SNAP_DATA"] = str(STATE_ROOT)
os.environ["SNAP_COMMON"] = str(COMMON_ROOT)
for name in (
    "SNAPSTATE_STATE_ROOT_VAR",
    "SNAPSTATE_COMMON_ROOT_VAR",
    "SNAPSTATE_LOG_LEVEL",
):
    os.environ.pop(name, None)


@pytest.fixture
def snap_roots(monkeypatch):
    """Point the snap roots at the example deployment layout."""
    monkeypatch.setenv("SNAP_DATA", "/var/snap/myservice/current")
    monkeypatch.setenv("SNAP_COMMON", "/var/snap/myservice/common")
    return "/var/snap/myservice/current", "/var/snap/myservice/common"
