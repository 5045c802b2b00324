"""Simulated-annealing placement of land uses on a fixed grid.

Agents (residential, office, shop, cafe...) are shuffled around a grid of fixed
landmarks (transport, public, landscape, road...) to maximise a
preference-weighted proximity score.
"""

from landuse.version import __version__  # noqa
