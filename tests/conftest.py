from pathlib import Path

import pytest

from tablestatus.engine.snapshot_loader import load_snapshot

SNAPSHOT_DIR = Path(__file__).parent / "data" / "snapshots"


@pytest.fixture
def snapshot_dir():
    return SNAPSHOT_DIR


@pytest.fixture
def load_named_snapshot():
    def _load(name: str):
        return load_snapshot(SNAPSHOT_DIR / f"{name}.json")
    return _load
