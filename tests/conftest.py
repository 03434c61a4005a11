import os
import pytest

from analyzer.events import EventStore


class _TestConfig:
    LOG_DIR = ""
    REPORT_DIR = ""
    DASHBOARD_HOST = "127.0.0.1"
    DASHBOARD_PORT = 5000
    BLOCK_SIZE = 1024
    SUPPORTED_PRECISIONS = ("float32", "float64")
    PRECISION = "float64"
    HIGH_THRESHOLD = 0.95
    LOW_THRESHOLD = 0.85
    CHART_WIDTH = 180
    CHART_HEIGHT = 100
    MIN_CHART_DIMENSION = 32
    Y_MAX = None


@pytest.fixture
def mock_config(tmp_path):
    cfg = _TestConfig()
    cfg.LOG_DIR = str(tmp_path / "logs")
    cfg.REPORT_DIR = str(tmp_path / "reports")
    return cfg


@pytest.fixture
def event_store():
    return EventStore()


@pytest.fixture
def mixed_file(tmp_path):
    # 4 text blocks, 4 random blocks, 4 zero blocks at the default block size
    text = (b"Meeting notes from the weekly standup session. " * 100)[:4096]
    path = tmp_path / "mixed.bin"
    path.write_bytes(text + os.urandom(4096) + b"\x00" * 4096)
    return str(path)


@pytest.fixture
def random_file(tmp_path):
    path = tmp_path / "random.bin"
    path.write_bytes(os.urandom(8192))
    return str(path)


@pytest.fixture
def empty_file(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    return str(path)
