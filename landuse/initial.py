"""Produce initial grids for optimisation.

Agents are dealt out to empty cells according to a table of percentages;
landmarks are either laid out by hand (see :py:mod:`landuse.scenarios`) or
scattered at random by :py:func:`random_layout`.
"""

# This is renamed to ensure that the random module isn't accidentally used
# directly.
import random as default_random

from landuse.cells import CellType

from landuse.grid import Grid

from landuse.exceptions import InvalidGridError, InvalidPercentagesError


def _check_percentages(percentages, config):
    """For internal use. Make sure a percentage table can be realised.

    Raises
    ------
    InvalidPercentagesError
    """
    for kind, fraction in percentages.items():
        if not config.is_agent(kind):
            raise InvalidPercentagesError(
                "{!r} is not an agent kind.".format(kind))
        if fraction < 0.0:
            raise InvalidPercentagesError(
                "Negative percentage {} given for {}".format(
                    fraction, CellType(kind).name))
    if sum(percentages.values()) > 1.0 + 1e-9:
        raise InvalidPercentagesError(
            "Agent percentages sum to {}, more than 1.0".format(
                sum(percentages.values())))


def fill_agents(grid, config, percentages, random=default_random):
    """Assign an agent kind to every empty cell of a grid.

    Of the N empty cells, ``int(percentage * N)`` are given each agent kind.
    Any cells left over due to rounding (or because the percentages sum to
    less than 1.0) are given agent kinds chosen uniformly at random. The
    agents are then shuffled and dealt to the empty cells in row-major order.

    Parameters
    ----------
    grid : :py:class:`~landuse.grid.Grid`
        The grid to fill. This is not modified.
    config : :py:class:`~landuse.config.LandUseConfig`
    percentages : {agent_kind: fraction, ...}
        The fraction of the empty cells to give each agent kind. Omitted agent
        kinds are treated as 0.0.
    random : :py:class:`random.Random`
        Defaults to ``import random`` but can be set to your own instance of
        :py:class:`random.Random` to allow you to control the seed and produce
        deterministic results.

    Returns
    -------
    :py:class:`~landuse.grid.Grid`
        A copy of the grid with no empty cells.

    Raises
    ------
    InvalidGridError
        If the grid contains kinds the configuration does not know about.
    InvalidPercentagesError
    """
    config.validate_grid(grid)
    _check_percentages(percentages, config)

    grid = grid.copy()
    empty_cells = grid.positions_of([CellType.EMPTY])
    available = len(empty_cells)

    agents = []
    for kind in config.agent_kinds:
        agents.extend([kind] * int(percentages.get(kind, 0.0) * available))

    # In case of rounding errors, fill remaining cells with random agents
    while len(agents) < available:
        agents.append(random.choice(config.agent_kinds))

    random.shuffle(agents)
    for position, kind in zip(empty_cells, agents):
        grid[position] = kind

    return grid


def random_layout(rows, cols, config, percentages, random=default_random,
                  landmark_fraction=0.2):
    """Generate a grid with randomly placed landmarks and agents.

    ``int(rows * cols * landmark_fraction)`` cells are set aside for
    landmarks and divided equally (rounding down) between the landmark kinds.
    These are placed at uniformly random distinct positions before the
    remaining cells are filled using :py:func:`fill_agents`.

    Parameters
    ----------
    rows, cols : int
    config : :py:class:`~landuse.config.LandUseConfig`
    percentages : {agent_kind: fraction, ...}
    random : :py:class:`random.Random`
    landmark_fraction : float
        Between 0.0 and 1.0.

    Returns
    -------
    :py:class:`~landuse.grid.Grid`
    """
    if not 0.0 <= landmark_fraction <= 1.0:
        raise InvalidGridError(
            "Landmark fraction must be between 0 and 1, not {}".format(
                landmark_fraction))

    grid = Grid(rows, cols)

    per_kind = (int(rows * cols * landmark_fraction) //
                len(config.landmark_kinds))
    kinds = [kind for kind in config.landmark_kinds for _ in range(per_kind)]
    for position, kind in zip(random.sample(list(grid), len(kinds)), kinds):
        grid[position] = kind

    return fill_agents(grid, config, percentages, random)
