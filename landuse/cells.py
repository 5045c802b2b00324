"""The closed set of land uses which may occupy a grid cell."""

from enum import IntEnum


class CellType(IntEnum):
    """Land use of a single grid cell.

    The integer values are used directly as the contents of
    :py:class:`~landuse.grid.Grid` arrays.
    """
    EMPTY = 0

    # Agents
    RESIDENTIAL = 1
    OFFICE = 2
    COM_SHOP = 3
    COM_CAFE = 4

    # Landmarks
    TRANSPORT = 5
    PUBLIC = 6
    LANDSCAPE = 7
    ROAD = 8
