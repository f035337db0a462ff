import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import tile_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from tile_toolkit.builder.layout import GridGeometry
from tile_toolkit.core.models import LetterInventory


# Common test fixtures
@pytest.fixture
def single_a_inventory():
    """Inventory with one A and nothing else."""
    return LetterInventory.empty().with_counts({"A": 1})


@pytest.fixture
def reference_inventory():
    """Default counts with Z cleared: 1145 tiles before spares."""
    return LetterInventory.default().with_counts({"Z": 0})


@pytest.fixture
def default_geometry():
    """Reference geometry: 25mm tiles, 7x10 grid, 10mm padding."""
    return GridGeometry()


@pytest.fixture
def sample_template(tmp_path: Path):
    """Write a small board template SVG and return its path."""
    svg = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 3300 2550">\n'
        '  <rect x="0" y="0" width="3300" height="2550" fill="#c00"/>\n'
        '  <circle cx="1650" cy="1155" r="100" fill="#fff"/>\n'
        '</svg>\n'
    )
    path = tmp_path / "board.svg"
    path.write_text(svg, encoding="utf-8")
    return path
