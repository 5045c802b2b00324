import pytest

from landuse.cells import CellType

from landuse.config import LandUseConfig

from landuse.grid import Grid

from landuse.render import parse


T = CellType.TRANSPORT
D = CellType.ROAD
R = CellType.RESIDENTIAL
O = CellType.OFFICE


@pytest.fixture
def simple_config():
    """One landmark kind and one agent kind which likes it."""
    return LandUseConfig([T], [R], {R: (4,)})


@pytest.fixture
def simple_grid():
    """A 3x3 grid of residential cells around a single transport hub."""
    grid = Grid(3, 3, R)
    grid[1, 1] = T
    return grid


@pytest.fixture
def mixed_config():
    """Two landmark kinds and two agent kinds with differing opinions."""
    return LandUseConfig([T, D], [R, O], {R: (1, -2), O: (3, 1)})


@pytest.fixture
def mixed_grid():
    return parse("""
        T R O R O
        O R O R O
        R O R O R
        O R O R O
        R O R O D
    """)
