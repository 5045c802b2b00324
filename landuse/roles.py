"""The roles a cell type may play on a grid.

Every :py:class:`~landuse.cells.CellType` on a grid plays exactly one of these
roles under a given :py:class:`~landuse.config.LandUseConfig`.
"""

import sentinel

"""A cell which has not (yet) been given a land use."""
Empty = sentinel.create("Empty")

"""A fixed cell which acts as a source of distance during optimisation."""
Landmark = sentinel.create("Landmark")

"""A movable cell which the annealer may swap with other agents."""
Agent = sentinel.create("Agent")
