"""Utility functions shared by the annealing kernels."""

import math


def select_swap(agent_positions, random):
    """Choose the two agent cells to be swapped.

    Each cell is chosen independently and uniformly from the supplied list so
    the same cell may be picked twice. Such a swap has no effect but is still
    counted as a (trivially acceptable) step.

    Parameters
    ----------
    agent_positions : [(row, col), ...]
        Every agent cell on the grid. Since swaps only exchange the kinds of
        two agent cells, this list never changes during an anneal.
    random : :py:class:`random.Random`

    Returns
    -------
    ((row, col), (row, col))
    """
    return (random.choice(agent_positions),
            random.choice(agent_positions))


def accept(delta, temperature, random):
    """The Metropolis criterion.

    Improvements are always accepted without consulting the random number
    generator. Otherwise a single uniform draw ``u`` is made and the change is
    accepted if ``exp(delta / temperature) > u``.

    Parameters
    ----------
    delta : float
        The change in score (new score minus current score).
    temperature : float
    random : :py:class:`random.Random`

    Returns
    -------
    bool
    """
    return delta > 0.0 or math.exp(delta / temperature) > random.random()
