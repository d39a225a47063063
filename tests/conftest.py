from __future__ import annotations

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def its90_csv() -> Path:
    return DATA_DIR / "its90_points.csv"
