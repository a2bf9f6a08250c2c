from pathlib import Path

import pytest

SAMPLE_DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@pytest.fixture
def sample_workouts_csv() -> Path:
    return SAMPLE_DATA_DIR / "workouts.csv"


@pytest.fixture
def sample_health_json() -> Path:
    return SAMPLE_DATA_DIR / "health-metrics.json"


@pytest.fixture
def write_file(tmp_path):
    """Write text (or bytes) to a file under tmp_path and return its path as str."""
    def _write(name, content):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return str(path)
    return _write
