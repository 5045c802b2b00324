"""An annealing kernel which evaluates swaps incrementally."""

from landuse.scoring import score, contribution_maps

from landuse.anneal.kernel import Kernel
from landuse.anneal.utils import select_swap, accept


class DeltaKernel(Kernel):
    """An annealing kernel which evaluates each swap in constant time.

    Since landmarks never move, the score an agent contributes depends only on
    its own kind and position. This kernel tabulates that contribution for
    every agent kind at every position
    (:py:func:`~landuse.scoring.contribution_maps`) so that the change in
    score caused by a swap is found from just four table lookups::

        delta = (c[kind_a][b] + c[kind_b][a]) - (c[kind_a][a] + c[kind_b][b])

    Swaps are made in place. The running score is accumulated from these
    deltas and so may drift from :py:func:`~landuse.scoring.score` by a few
    units in the last place over a long anneal.

    The kernel makes exactly the same random draws as
    :py:class:`~landuse.anneal.python_kernel.PythonKernel`, though rounding
    differences between the two evaluations mean that their decisions are not
    guaranteed to agree bit-for-bit.
    """

    def __init__(self, grid, distance_maps, config, random):
        self.grid = grid.copy()
        self.random = random

        self.agent_positions = self.grid.positions_of(config.agent_kinds)
        self.contributions = contribution_maps(distance_maps, config)
        self.score = score(self.grid, distance_maps, config)

    def _delta(self, a, b):
        """The change in score caused by swapping the agents at a and b."""
        kind_a = int(self.grid.cells[a])
        kind_b = int(self.grid.cells[b])
        if kind_a == kind_b:
            # Includes the self-swap case
            return 0.0
        c_a = self.contributions[kind_a]
        c_b = self.contributions[kind_b]
        return float((c_a[b] + c_b[a]) - (c_a[a] + c_b[b]))

    def step(self, temperature):
        a, b = select_swap(self.agent_positions, self.random)

        delta = self._delta(a, b)
        if accept(delta, temperature, self.random):
            self.grid.swap(a, b)
            self.score += delta
            return (True, delta)
        else:
            return (False, delta)

    def get_grid(self):
        return self.grid

    def get_score(self):
        return self.score
