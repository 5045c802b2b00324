"""Plain-text rendering of grids.

Every :py:class:`~landuse.cells.CellType` is drawn as a single character and
cells are separated by spaces, e.g.::

    . . . P P P
    . D D D D D
    . L L . . D
"""

from landuse.cells import CellType

from landuse.grid import Grid

from landuse.exceptions import InvalidGridError


"""The character used to draw each kind of cell."""
GLYPHS = {
    CellType.EMPTY: ".",
    CellType.RESIDENTIAL: "R",
    CellType.OFFICE: "O",
    CellType.COM_SHOP: "S",
    CellType.COM_CAFE: "C",
    CellType.TRANSPORT: "T",
    CellType.PUBLIC: "P",
    CellType.LANDSCAPE: "L",
    CellType.ROAD: "D",
}

_KINDS = {glyph: kind for kind, glyph in GLYPHS.items()}


def render(grid):
    """Draw a grid as text, one line per row."""
    return "\n".join(" ".join(GLYPHS[kind] for kind in row)
                     for row in grid.to_rows())


def parse(text):
    """Read a grid drawn in the format produced by :py:func:`render`.

    Blank lines are ignored as is any whitespace between cells, so cells need
    not be separated by spaces.

    Raises
    ------
    InvalidGridError
        If an unknown character is found or the rows differ in length.
    """
    rows = []
    for line_num, line in enumerate(text.splitlines(), 1):
        glyphs = "".join(line.split())
        if not glyphs:
            continue
        try:
            rows.append([_KINDS[glyph] for glyph in glyphs])
        except KeyError as e:
            raise InvalidGridError(
                "Unknown cell {} on line {}".format(e, line_num))
    return Grid.from_rows(rows)
