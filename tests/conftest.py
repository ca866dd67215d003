import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `forest_fire.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


LAYOUT_KEYS = {"S": "Soil", "T": "Tree", "F": "Fire", "W": "Water"}


class RecordingHost:
    """Host that remembers every call for assertions."""

    def __init__(self):
        self.status_text = ""
        self.painted = []
        self.sounds = []

    def paint_cell(self, x, y, state):
        self.painted.append((x, y, state))

    def play_sound(self, name):
        self.sounds.append(name)

    def set_status(self, text):
        self.status_text = text


@pytest.fixture
def host():
    return RecordingHost()


@pytest.fixture
def scheduler():
    from forest_fire.scheduler import TickScheduler
    return TickScheduler()


@pytest.fixture
def make_model(host, scheduler):
    """Build a model from rows of S/T/F/W letters; row index is y, column index is x."""
    from forest_fire.cell import CellState
    from forest_fire.model import FireModel

    def build(*rows, **kwargs):
        model = FireModel(size=len(rows), host=host, scheduler=scheduler, start=False, **kwargs)
        for y, row in enumerate(rows):
            assert len(row) == len(rows), "layout must be square"
            for x, letter in enumerate(row):
                model.grid.set(x, y, CellState[LAYOUT_KEYS[letter]])
        host.painted.clear()
        return model

    return build


def layout(grid):
    """Inverse of the make_model layout: the grid as a tuple of letter rows."""
    letters = {v: k for k, v in LAYOUT_KEYS.items()}
    return tuple(
        "".join(letters[grid.get(x, y).name] for x in range(grid.size))
        for y in range(grid.size)
    )


@pytest.fixture
def read_layout():
    return layout
