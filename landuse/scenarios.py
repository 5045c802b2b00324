"""A reference town-planning scenario.

A 12x12 site crossed by two roads with a transport hub, public buildings and
parks. Residential, office, shop and cafe agents are placed around these
according to :py:data:`REFERENCE_PERCENTAGES`.
"""

from landuse.cells import CellType

from landuse.config import LandUseConfig, AnnealingSchedule

from landuse.render import parse


REFERENCE_CONFIG = LandUseConfig(
    landmark_kinds=[CellType.TRANSPORT, CellType.PUBLIC,
                    CellType.LANDSCAPE, CellType.ROAD],
    agent_kinds=[CellType.RESIDENTIAL, CellType.OFFICE,
                 CellType.COM_SHOP, CellType.COM_CAFE],
    preferences={
        # Transport, Public, Landscape, Road
        CellType.RESIDENTIAL: (1, 2, 3, -5),
        CellType.OFFICE: (4, 1, 0, 2),
        CellType.COM_SHOP: (5, 3, 0, 3),
        CellType.COM_CAFE: (2, 4, 1, -1),
    })

"""The share of the free cells given to each agent kind."""
REFERENCE_PERCENTAGES = {
    CellType.RESIDENTIAL: 0.45,
    CellType.OFFICE: 0.25,
    CellType.COM_SHOP: 0.20,
    CellType.COM_CAFE: 0.10,
}

REFERENCE_SCHEDULE = AnnealingSchedule(initial_temperature=1000.0,
                                       final_temperature=0.1,
                                       cooling_rate=0.001)

REFERENCE_LAYOUT = """
    . . . P P P . . . . . .
    . . . . . . . . . . . .
    . D D D D D D D D D . .
    . . . . . D . . . . . .
    . L L . . D . . . L . .
    . L L . . D . T . L . P
    . L L . . D . . . L . P
    . . . . . D . . . . . P
    . D D D D D D D D D . .
    . . . . . . . . . . . .
    . . . T . . . . . T . .
    . . . . . P P P . . . .
"""


def reference_layout():
    """Get the hand-authored landmark layout (agents not yet placed).

    Returns
    -------
    :py:class:`~landuse.grid.Grid`
        A new 12x12 grid whose non-landmark cells are all EMPTY.
    """
    return parse(REFERENCE_LAYOUT)
