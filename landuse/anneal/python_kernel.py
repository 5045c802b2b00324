"""A Python implementation of the annealing kernel which rescores a whole
candidate grid for every swap attempt.
"""

from landuse.scoring import score

from landuse.anneal.kernel import Kernel
from landuse.anneal.utils import select_swap, accept


class PythonKernel(Kernel):
    """An annealing kernel which evaluates every candidate with
    :py:func:`~landuse.scoring.score`.

    For every step a copy of the current grid is made, two agent cells are
    swapped in the copy and the copy is scored in full. This is a direct
    implementation of the annealing step; see
    :py:class:`~landuse.anneal.delta_kernel.DeltaKernel` for a faster kernel.
    """

    def __init__(self, grid, distance_maps, config, random):
        self.grid = grid.copy()
        self.distance_maps = distance_maps
        self.config = config
        self.random = random

        self.agent_positions = self.grid.positions_of(config.agent_kinds)
        self.score = score(self.grid, self.distance_maps, self.config)

    def step(self, temperature):
        a, b = select_swap(self.agent_positions, self.random)

        candidate = self.grid.copy()
        candidate.swap(a, b)
        candidate_score = score(candidate, self.distance_maps, self.config)

        delta = candidate_score - self.score
        if accept(delta, temperature, self.random):
            self.grid = candidate
            self.score = candidate_score
            return (True, delta)
        else:
            return (False, delta)

    def get_grid(self):
        return self.grid

    def get_score(self):
        return self.score
