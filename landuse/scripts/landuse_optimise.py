"""A command-line utility which optimises the reference land use scenario
(or a randomly generated one) and prints the grid before and after.

Installed as "landuse-optimise" by setuptools.
"""

import sys
import time
import random
import logging
import argparse

import landuse

from landuse.config import AnnealingSchedule

from landuse.distance import compute_distance_maps

from landuse.scoring import score

from landuse.initial import fill_agents, random_layout

from landuse.render import render

from landuse.anneal import optimise
from landuse.anneal.python_kernel import PythonKernel
from landuse.anneal.delta_kernel import DeltaKernel

from landuse.exceptions import ConfigurationError

from landuse.scenarios import \
    REFERENCE_CONFIG, REFERENCE_PERCENTAGES, REFERENCE_SCHEDULE, \
    reference_layout


KERNELS = {
    "python": PythonKernel,
    "delta": DeltaKernel,
}


def timed(f, *args, **kwargs):
    """Call a function returning its result and the time taken in ms."""
    before = time.time()
    result = f(*args, **kwargs)
    return result, int((time.time() - before) * 1000)


def main(args=None):
    parser = argparse.ArgumentParser(
        description="Optimise the placement of land uses on a grid using "
                    "simulated annealing")
    parser.add_argument("--version", "-V", action="version",
                        version="%(prog)s {}".format(landuse.__version__))

    parser.add_argument("--seed", "-s", type=int,
                        help="seed for the random number generator "
                             "(default: unseeded)")

    parser.add_argument("--random-layout", "-r", action="store_true",
                        help="place landmarks at random rather than using "
                             "the reference layout")
    parser.add_argument("--rows", type=int, default=12,
                        help="grid rows for a random layout (default: "
                             "%(default)s)")
    parser.add_argument("--cols", type=int, default=12,
                        help="grid columns for a random layout (default: "
                             "%(default)s)")

    parser.add_argument("--initial-temperature", "-t", type=float,
                        default=REFERENCE_SCHEDULE.initial_temperature,
                        help="starting temperature (default: %(default)s)")
    parser.add_argument("--final-temperature", "-f", type=float,
                        default=REFERENCE_SCHEDULE.final_temperature,
                        help="the anneal stops when the temperature falls "
                             "to this value (default: %(default)s)")
    parser.add_argument("--cooling-rate", "-c", type=float,
                        default=REFERENCE_SCHEDULE.cooling_rate,
                        help="fraction by which the temperature is reduced "
                             "after each swap (default: %(default)s)")

    parser.add_argument("--kernel", "-k", choices=sorted(KERNELS),
                        default="python",
                        help="annealing kernel to use (default: "
                             "%(default)s)")
    parser.add_argument("--progress-interval", type=int, default=100,
                        help="iterations between progress reports "
                             "(default: %(default)s)")
    parser.add_argument("--verbose", "-v", action="count", default=0,
                        help="log progress (-v) and per-iteration "
                             "detail (-vv)")

    args = parser.parse_args(args)

    if args.progress_interval < 1:
        parser.error("--progress-interval must be at least 1")

    logging.basicConfig(
        level={0: logging.WARNING, 1: logging.INFO}.get(args.verbose,
                                                        logging.DEBUG))

    r = random.Random()
    r.seed(args.seed)

    config = REFERENCE_CONFIG
    try:
        schedule = AnnealingSchedule(args.initial_temperature,
                                     args.final_temperature,
                                     args.cooling_rate)

        if args.random_layout:
            grid = random_layout(args.rows, args.cols, config,
                                 REFERENCE_PERCENTAGES, r)
        else:
            grid = fill_agents(reference_layout(), config,
                               REFERENCE_PERCENTAGES, r)

        print("Initial Grid:")
        print(render(grid))

        distance_maps, distance_ms = timed(compute_distance_maps,
                                           grid, config)
        print("Distance Maps Computation Time: {} ms".format(distance_ms))

        initial_score, score_ms = timed(score, grid, distance_maps, config)
        print("Initial Score: {:.3f}".format(initial_score))
        print("Initial Score Computation Time: {} ms".format(score_ms))

        solution, optimise_ms = timed(optimise, grid, distance_maps, config,
                                      schedule, random=r,
                                      kernel=KERNELS[args.kernel],
                                      progress_interval=args.progress_interval)
    except ConfigurationError as e:
        sys.stderr.write("{}: error: {}\n".format(parser.prog, str(e)))
        return 1

    grid = solution.grid

    print("")
    print("Optimised Grid:")
    print(render(grid))

    final_score, score_ms = timed(score, grid, distance_maps, config)
    print("Optimised Score: {:.3f}".format(final_score))
    print("Optimised Score Computation Time: {} ms".format(score_ms))
    print("Optimisation Time: {} ms".format(optimise_ms))

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
