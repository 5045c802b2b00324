"""The main annealing algorithm loop."""

import logging

import time

from collections import namedtuple

import numpy as np

# This is renamed to ensure that the random module isn't accidentally used
# directly.
import random as default_random

from landuse.config import AnnealingSchedule

from landuse.exceptions import InvalidGridError, InsufficientAgentsError

from landuse.anneal.python_kernel import PythonKernel as default_kernel


"""
This logger is used by the annealing algorithm to indicate progress.
"""
logger = logging.getLogger(__name__)


class Solution(namedtuple("Solution", "grid score")):
    """A grid together with its score.

    Attributes
    ----------
    grid : :py:class:`~landuse.grid.Grid`
    score : float
    """


def _check_problem(grid, distance_maps, config):
    """For internal use. Check that a grid is ready to be annealed.

    Raises
    ------
    InvalidGridError
        If any cell is empty or unknown, or if the distance maps were not
        computed from this grid's landmarks.
    InsufficientAgentsError
        If fewer than two agent cells exist.
    """
    config.validate_grid(grid, allow_empty=False)

    for kind in config.landmark_kinds:
        if kind not in distance_maps:
            raise InvalidGridError(
                "No distance map given for {}".format(kind.name))
        distances = distance_maps[kind]
        if distances.shape != grid.shape:
            raise InvalidGridError(
                "Distance map for {} is {}x{} but the grid is {}x{}".format(
                    kind.name, distances.shape[0], distances.shape[1],
                    grid.rows, grid.cols))
        if not np.array_equal(distances == 0.0, grid.cells == int(kind)):
            raise InvalidGridError(
                "Distance map for {} does not match the landmarks on the "
                "grid.".format(kind.name))

    num_agents = len(grid.positions_of(config.agent_kinds))
    if num_agents < 2:
        raise InsufficientAgentsError(
            "At least two agent cells are required to anneal, "
            "found {}.".format(num_agents))


def optimise(grid, distance_maps, config, schedule=None,
             random=default_random, kernel=default_kernel, kernel_kwargs={},
             on_progress=None, progress_interval=100):
    """Rearrange the agents on a grid to maximise its score using simulated
    annealing.

    At every step two agent cells are chosen at random and the effect of
    swapping them is evaluated. Swaps which improve the score are always kept;
    other swaps are kept with probability ``exp(delta / temperature)`` (the
    Metropolis criterion). After each step the temperature is multiplied by
    ``(1 - cooling_rate)`` and the anneal stops once the temperature is no
    longer above the schedule's final temperature.

    Since worse solutions are explored along the way, the best solution
    seen at any point is tracked and returned. Only a strictly better score
    replaces the best solution, so among equally good solutions the earliest
    found is kept.

    Landmark cells are never moved and so the supplied distance maps remain
    valid throughout.

    This algorithm produces INFO level logging information describing the
    progress made by the algorithm and DEBUG level progress rows every
    ``progress_interval`` iterations.

    Parameters
    ----------
    grid : :py:class:`~landuse.grid.Grid`
        The initial grid. Every cell must hold a landmark or agent kind. This
        grid is never modified. The optimised grid is handed back as
        ``solution.grid`` and callers which want the grid updated in place
        should replace their grid with it.
    distance_maps : {landmark_kind: :py:class:`numpy.ndarray`, ...}
        As produced by :py:func:`~landuse.distance.compute_distance_maps` for
        this grid.
    config : :py:class:`~landuse.config.LandUseConfig`
    schedule : :py:class:`~landuse.config.AnnealingSchedule` or None
        The temperature schedule. Defaults to ``AnnealingSchedule()``.
    random : :py:class:`random.Random`
        A Python random number generator. Defaults to ``import random`` but
        can be set to your own instance of :py:class:`random.Random` to allow
        you to control the seed and produce deterministic results.
    kernel : :py:class:`~landuse.anneal.kernel.Kernel`
        The annealing kernel to use. Defaults to
        :py:class:`~landuse.anneal.python_kernel.PythonKernel`.
    kernel_kwargs : dict
        Optional kernel-specific keyword arguments to pass to the kernel
        constructor.
    on_progress : callback_function or None
        An (optional) callback function which is called every
        ``progress_interval`` iterations (starting with the first).

        The callback function is passed the following arguments:

        * ``iteration``: the number of swap attempts made before the
          current one (integer)
        * ``temperature``: the temperature used for the current swap attempt
          (float)
        * ``current_score``: the score of the current solution (float)
        * ``best_score``: the best score seen so far (float)
        * ``elapsed``: seconds since the anneal started (float)

        If the callback returns False, the anneal is terminated immediately
        and the best solution found so far is returned.
    progress_interval : int
        The number of iterations between progress reports.

    Returns
    -------
    :py:class:`Solution`
        The best grid seen and its score.

    Raises
    ------
    InvalidGridError
    InsufficientAgentsError
    """
    if schedule is None:
        schedule = AnnealingSchedule()
    if progress_interval < 1:
        raise ValueError("progress_interval must be at least 1")

    _check_problem(grid, distance_maps, config)

    k = kernel(grid, distance_maps, config, random, **kernel_kwargs)
    logger.info("Annealing kernel: %s", kernel.__name__)

    best = Solution(k.get_grid().copy(), k.get_score())

    logger.info("Initial score: %0.3f, initial temperature: %0.3f",
                best.score, schedule.initial_temperature)

    start_time = time.time()

    # Counter for the number of swap attempts made
    iteration = 0
    num_accepted = 0

    temperature = schedule.initial_temperature
    while temperature > schedule.final_temperature:
        accepted, _ = k.step(temperature)
        num_accepted += 1 if accepted else 0

        current_score = k.get_score()
        if current_score > best.score:
            best = Solution(k.get_grid().copy(), current_score)

        if iteration % progress_interval == 0:
            elapsed = time.time() - start_time
            logger.debug("Iteration: %d, "
                         "Temp: %0.2f, "
                         "Score: %0.3f, "
                         "Best: %0.3f, "
                         "Time: %d ms.",
                         iteration, temperature, current_score, best.score,
                         int(elapsed * 1000))

            # Call the user callback, terminating if requested.
            if on_progress is not None:
                ret_val = on_progress(iteration, temperature, current_score,
                                      best.score, elapsed)
                if ret_val is False:
                    iteration += 1
                    break

        iteration += 1
        temperature *= 1.0 - schedule.cooling_rate

    logger.info("Anneal terminated after %d iterations (%d accepted). "
                "Best score: %0.3f",
                iteration, num_accepted, best.score)

    return best
