"""Turns grids of RGB cells into colored text for the terminal

Each cell becomes one glyph from RAMP picked by brightness, drawn in the
cell's own 24-bit color. Color escapes are only written when the color
changes within a row, which keeps frames several times smaller than
coloring every cell.
"""

import numpy

from termframe import terminalcontrol

# dark to bright
RAMP = " .:-=+*#%@"

def luma(grid):
    """Returns the brightness proxy 3R + 6G + B for every cell

    >>> luma(numpy.array([[[255, 255, 255], [10, 0, 0]]], dtype=numpy.uint8)).tolist()
    [[2550, 30]]
    """
    grid = numpy.asarray(grid, dtype=numpy.int32)
    return 3 * grid[..., 0] + 6 * grid[..., 1] + grid[..., 2]

def glyph_indices(grid, ramp=RAMP):
    """Returns the ramp index of every cell, 0 for black up to len(ramp) - 1"""
    top = len(ramp) - 1
    return numpy.clip(luma(grid) * top // (255 * 10), 0, top)

def formatted_row(row, ramp=RAMP):
    r"""Returns one row of cells as text, ending in a reset and CRLF

    >>> formatted_row(numpy.array([[255, 0, 0], [255, 0, 0], [0, 0, 0]]))
    '\x1b[38;2;255;0;0m::\x1b[38;2;0;0;0m \x1b[0m\r\n'
    """
    text_list = []
    prev_color = None
    for color, idx in zip(numpy.asarray(row).tolist(), glyph_indices(row, ramp).tolist()):
        color = tuple(color[:3])
        if color != prev_color:
            text_list.append(terminalcontrol.fg_color(*color))
            prev_color = color
        text_list.append(ramp[idx])
    text_list.append(terminalcontrol.LINE_END)
    return ''.join(text_list)

def formatted_grid(grid, ramp=RAMP):
    """Returns a whole grid as text, one formatted_row per row

    Every row starts without a current color, so its first cell always
    gets an escape even if the previous row ended in the same color.
    """
    return ''.join(formatted_row(row, ramp) for row in grid)
