import sys
from datetime import datetime
from pathlib import Path
import pytest

# Ensure project root on sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from vimeo_balancer import cli  # noqa: E402
from vimeo_balancer.logging_utils import get_logger  # noqa: E402

# Bind the stream handler once, outside any per-test capture
get_logger()

WEEK = ["a", "b", "c", "d", "e", "f", "g"]


class FixedRandom:
    """randint stand-in that always returns the same offset (clamped)."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return min(max(self.value, a), b)


def clock_for(weekday):
    # 2024-01-07 is a Sunday
    day = datetime(2024, 1, 7 + weekday, 9, 30)
    return lambda: day


@pytest.fixture()
def week_videos():
    return list(WEEK)


@pytest.fixture(autouse=True)
def isolated_default_config(tmp_path, monkeypatch):
    path = tmp_path / "home-config" / "config.json"
    monkeypatch.setattr(cli, "DEFAULT_CONFIG_PATH", path)
    return path


@pytest.fixture()
def run_cli(capsys):
    def _run(argv):
        try:
            code = cli.run_cli(argv)
        except SystemExit as e:
            code = e.code
        captured = capsys.readouterr()
        return code, captured.out, captured.err

    return _run


@pytest.fixture()
def weekday_clock():
    return clock_for


@pytest.fixture()
def fixed_random():
    return FixedRandom
