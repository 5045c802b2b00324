"""Breadth-first distance maps from the landmark cells of a grid."""

from collections import deque, OrderedDict

import numpy as np


"""The distance recorded for cells which no landmark of a kind can reach.

Since grids are fully connected this only occurs when a landmark kind does not
appear on the grid at all.
"""
UNREACHABLE = np.inf

"""The 4-connected neighbourhood (row, col) offsets: up, right, down, left."""
NEIGHBOURS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def distance_map(grid, kind):
    """Compute the distance from every cell to its nearest cell of a given
    kind.

    A multi-source breadth-first search is started simultaneously from every
    cell of the given kind. Only up/down/left/right steps are allowed and
    paths do not wrap around the edges of the grid. Every cell may be crossed,
    regardless of its contents.

    Parameters
    ----------
    grid : :py:class:`~landuse.grid.Grid`
    kind : :py:class:`~landuse.cells.CellType`

    Returns
    -------
    :py:class:`numpy.ndarray`
        A (rows, cols) float array of distances. If the kind does not appear
        on the grid every entry is :py:data:`UNREACHABLE`.
    """
    rows, cols = grid.shape
    distances = np.full((rows, cols), UNREACHABLE)

    # Seed the search with every cell of the requested kind
    queue = deque(grid.positions_of([kind]))
    for position in queue:
        distances[position] = 0.0

    while queue:
        row, col = queue.popleft()
        next_distance = distances[row, col] + 1.0
        for drow, dcol in NEIGHBOURS:
            nrow = row + drow
            ncol = col + dcol
            if 0 <= nrow < rows and 0 <= ncol < cols and \
                    distances[nrow, ncol] > next_distance:
                distances[nrow, ncol] = next_distance
                queue.append((nrow, ncol))

    return distances


def compute_distance_maps(grid, config):
    """Compute a distance map for every landmark kind in a configuration.

    Since landmarks never move during optimisation, this need only be computed
    once per landmark layout.

    Parameters
    ----------
    grid : :py:class:`~landuse.grid.Grid`
    config : :py:class:`~landuse.config.LandUseConfig`

    Returns
    -------
    :py:class:`collections.OrderedDict`
        ``{landmark_kind: distances, ...}`` in the order of
        ``config.landmark_kinds``. See :py:func:`distance_map`.

    Raises
    ------
    InvalidGridError
        If the grid contains kinds not known to the configuration.
    """
    config.validate_grid(grid)
    return OrderedDict((kind, distance_map(grid, kind))
                       for kind in config.landmark_kinds)
