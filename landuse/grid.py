"""The grid of land uses being optimised."""

import numpy as np

from landuse.cells import CellType

from landuse.exceptions import InvalidGridError


class Grid(object):
    """A fixed-size rectangular grid of :py:class:`~landuse.cells.CellType`
    values.

    Positions are given as ``(row, col)`` tuples with row 0 at the top.

    Attributes
    ----------
    cells : :py:class:`numpy.ndarray`
        A (rows, cols) integer array holding the value of the
        :py:class:`~landuse.cells.CellType` of every cell. This is exposed for
        bulk (vectorised) operations; single cells are best accessed by
        indexing the grid itself.
    """

    __slots__ = ["cells"]

    def __init__(self, rows, cols, fill=CellType.EMPTY):
        """Create a grid where every cell holds the same land use.

        Raises
        ------
        InvalidGridError
            If either dimension is not a positive integer.
        """
        if int(rows) != rows or int(cols) != cols or rows <= 0 or cols <= 0:
            raise InvalidGridError(
                "Grid dimensions must be positive integers, not {}x{}".format(
                    rows, cols))
        self.cells = np.full((int(rows), int(cols)), int(fill), dtype=np.int8)

    @classmethod
    def from_rows(cls, rows):
        """Build a grid from a list of rows of cell types.

        Raises
        ------
        InvalidGridError
            If the rows are ragged or empty or contain unknown values.
        """
        rows = [list(row) for row in rows]
        if len(rows) == 0 or len(set(len(row) for row in rows)) != 1:
            raise InvalidGridError("Rows must be non-empty and equal length.")

        grid = cls(len(rows), len(rows[0]))
        for r, row in enumerate(rows):
            for c, kind in enumerate(row):
                try:
                    grid[r, c] = CellType(kind)
                except ValueError:
                    raise InvalidGridError(
                        "Unknown cell type {!r} at {}".format(kind, (r, c)))
        return grid

    def to_rows(self):
        """Get the grid as a list of lists of
        :py:class:`~landuse.cells.CellType`.
        """
        return [[CellType(v) for v in row] for row in self.cells.tolist()]

    @property
    def rows(self):
        return self.cells.shape[0]

    @property
    def cols(self):
        return self.cells.shape[1]

    @property
    def shape(self):
        return self.cells.shape

    def copy(self):
        """Produce a copy of this grid."""
        grid = Grid.__new__(Grid)
        grid.cells = self.cells.copy()
        return grid

    def __contains__(self, position):
        row, col = position
        return 0 <= row < self.rows and 0 <= col < self.cols

    def __getitem__(self, position):
        """Get the land use at a given (row, col).

        Raises
        ------
        IndexError
            If the position is not within the grid.
        """
        if position not in self:
            raise IndexError(
                "{} is not part of the grid.".format(repr(position)))
        return CellType(int(self.cells[position]))

    def __setitem__(self, position, kind):
        if position not in self:
            raise IndexError(
                "{} is not part of the grid.".format(repr(position)))
        self.cells[position] = int(kind)

    def __iter__(self):
        """Iterate over every position in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield (row, col)

    def __len__(self):
        return self.cells.size

    def swap(self, a, b):
        """Exchange the land uses of the cells at positions a and b.

        Swapping a cell with itself is permitted and has no effect.
        """
        self[a], self[b] = self[b], self[a]

    def positions_of(self, kinds):
        """List the positions holding any of the given kinds in row-major
        order.

        Parameters
        ----------
        kinds : iterable of :py:class:`~landuse.cells.CellType`
        """
        mask = np.isin(self.cells, [int(k) for k in kinds])
        return [(int(r), int(c)) for r, c in np.argwhere(mask)]

    def count(self, kind):
        """Count the cells holding a given kind."""
        return int(np.count_nonzero(self.cells == int(kind)))

    def __eq__(self, other):
        return (isinstance(other, Grid) and
                np.array_equal(self.cells, other.cells))

    def __ne__(self, other):
        return not self == other

    __hash__ = None

    def __repr__(self):
        return "<{} {}x{}>".format(self.__class__.__name__,
                                   self.rows, self.cols)
