import os
import sys

import pytest

# Add the ``src`` directory to the Python path for tests
ROOT_DIR = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, os.path.join(ROOT_DIR, "src"))

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402

from tweenkit.clock import ManualClock  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    """Initialise Pygame in headless mode for tests."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture(autouse=True)
def log_to_tmp(tmp_path, monkeypatch):
    """Keep the package log file out of the working tree."""
    from tweenkit import logs

    monkeypatch.chdir(tmp_path)
    logs.configure_logging(str(tmp_path / "tweenkit.log"))
    yield


@pytest.fixture
def clock():
    return ManualClock()


class Recorder:
    """Callable that remembers every value it was called with."""

    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args[0] if len(args) == 1 else args)

    @property
    def last(self):
        return self.calls[-1]

    def __len__(self):
        return len(self.calls)


@pytest.fixture
def recorder():
    return Recorder()


@pytest.fixture
def make_recorder():
    return Recorder
