"""Simulated-annealing optimisation of agent placement.

The annealer is broken into two components: the high-level algorithm
:py:func:`~landuse.anneal.optimise` and an annealing
:py:class:`~landuse.anneal.kernel.Kernel`.

The algorithm checks that the problem is well formed, manages the temperature
schedule, keeps track of the best solution seen and reports progress.

The kernel performs the individual annealing steps: choosing two agents,
evaluating the change in score if they were swapped and accepting or rejecting
the swap. Two kernels are provided:

* :py:class:`~landuse.anneal.python_kernel.PythonKernel` rescores a complete
  candidate grid for every swap attempt.
* :py:class:`~landuse.anneal.delta_kernel.DeltaKernel` tabulates the score of
  every agent kind at every position up-front and evaluates each swap in
  constant time.
"""

from landuse.anneal.algorithm import optimise, Solution  # noqa
