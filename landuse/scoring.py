"""The proximity objective maximised by the annealer.

Each agent cell scores ``preference / distance`` for every landmark kind,
where ``distance`` is taken from that landmark kind's distance map. Landmarks
which are unreachable (i.e. absent from the grid) or which are zero distance
away contribute nothing. The score of a grid is the sum of the scores of all of
its agent cells; empty and landmark cells score nothing themselves.

Since closer landmarks yield larger terms, positive preferences draw agents
towards a landmark kind while negative preferences push them away.
"""

import numpy as np

from landuse.cells import CellType

from landuse.distance import UNREACHABLE


def agent_score(kind, position, distance_maps, config):
    """Get the score contributed by a single agent.

    Parameters
    ----------
    kind : :py:class:`~landuse.cells.CellType`
        An agent kind.
    position : (row, col)
        The (hypothetical) location of the agent.
    distance_maps : {landmark_kind: :py:class:`numpy.ndarray`, ...}
        As produced by :py:func:`~landuse.distance.compute_distance_maps`.
    config : :py:class:`~landuse.config.LandUseConfig`

    Returns
    -------
    float
    """
    score = 0.0
    weights = config.weights(kind)
    for landmark_kind, weight in zip(config.landmark_kinds, weights):
        distance = distance_maps[landmark_kind][position]
        if distance == 0.0 or distance == UNREACHABLE:
            continue
        score += weight / distance
    return float(score)


def score(grid, distance_maps, config):
    """Get the total score of a grid.

    This function does not modify its arguments and, for a given grid and set
    of distance maps, always returns exactly the same value: cells are visited
    in row-major order and landmark kinds in configuration order.

    Parameters
    ----------
    grid : :py:class:`~landuse.grid.Grid`
    distance_maps : {landmark_kind: :py:class:`numpy.ndarray`, ...}
    config : :py:class:`~landuse.config.LandUseConfig`

    Returns
    -------
    float
    """
    total = 0.0
    for row, values in enumerate(grid.cells.tolist()):
        for col, value in enumerate(values):
            if not config.is_agent(value):
                continue
            total += agent_score(CellType(value), (row, col),
                                 distance_maps, config)
    return float(total)


def contribution_maps(distance_maps, config):
    """Tabulate the score every agent kind would contribute at every position.

    The value at ``maps[kind][position]`` is exactly
    ``agent_score(kind, position, distance_maps, config)``; the terms are
    summed in the same order so the two agree bit-for-bit.

    Returns
    -------
    {agent_kind: :py:class:`numpy.ndarray`, ...}
    """
    shape = distance_maps[config.landmark_kinds[0]].shape
    maps = {}
    for kind in config.agent_kinds:
        total = np.zeros(shape)
        for landmark_kind, weight in zip(config.landmark_kinds,
                                         config.weights(kind)):
            distances = distance_maps[landmark_kind]
            usable = (distances != 0.0) & (distances != UNREACHABLE)
            total += np.where(usable,
                              weight / np.where(usable, distances, 1.0),
                              0.0)
        maps[kind] = total
    return maps
