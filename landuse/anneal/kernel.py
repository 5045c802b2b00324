# pragma: no cover

"""General interface for an annealing kernel."""


class Kernel(object):
    """A general API for an annealing kernel."""

    def __init__(self, grid, distance_maps, config, random, **kwargs):
        """Initialise the kernel with a placement problem.

        The kernel may assume that the problem has already been checked by
        :py:func:`~landuse.anneal.optimise`: every cell holds a landmark or
        agent kind, at least two agent cells exist and the distance maps
        describe the landmarks of the grid.

        Parameters
        ----------
        grid : :py:class:`~landuse.grid.Grid`
            The initial grid. The kernel must not modify this object.
        distance_maps : {landmark_kind: :py:class:`numpy.ndarray`, ...}
        config : :py:class:`~landuse.config.LandUseConfig`
        random : :py:class:`random.Random`
            The random number generator to use. For a given seed, kernels
            must draw two agent positions (the first then the second cell of
            the swap) for every step followed by a single acceptance draw if,
            and only if, the swap does not improve the score.
        """
        raise NotImplementedError()

    def step(self, temperature):
        """Attempt a single swap of two agent cells.

        Parameters
        ----------
        temperature : float
            The current annealing temperature.

        Returns
        -------
        accepted : bool
            True if the swap was kept.
        delta : float
            The change in score the swap would (or did) produce.
        """
        raise NotImplementedError()

    def get_grid(self):
        """Get the current grid.

        Returns
        -------
        :py:class:`~landuse.grid.Grid`
            The caller must copy this grid if it is to be kept since the
            kernel may modify it in subsequent steps.
        """
        raise NotImplementedError()

    def get_score(self):
        """Get the score of the current grid.

        Returns
        -------
        float
        """
        raise NotImplementedError()
