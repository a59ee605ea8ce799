"""Fitting pixel frames to the terminal's character grid"""

import logging

import numpy

DEFAULT_SIZE = (80, 24)
MIN_COLUMNS = 20
MIN_ROWS = 10


def terminal_size(query):
    """Returns the (columns, rows) reported by calling query

    Falls back to DEFAULT_SIZE when the query fails or the terminal is
    smaller than MIN_COLUMNS x MIN_ROWS.
    """
    try:
        columns, rows = query()
    except (OSError, ValueError) as e:
        logging.debug('terminal size query failed (%r), using %r', e, DEFAULT_SIZE)
        return DEFAULT_SIZE
    if columns < MIN_COLUMNS or rows < MIN_ROWS:
        logging.debug('terminal size %dx%d too small, using %r', columns, rows, DEFAULT_SIZE)
        return DEFAULT_SIZE
    return columns, rows

def grid_size(columns, rows):
    """Returns the (columns, rows) to draw into, leaving the last line alone

    Writing the final line's CRLF there would scroll the whole screen.
    """
    return columns, rows - 1

def scale_frame(frame, columns, rows):
    """Nearest-neighbor resamples an (H, W, 3 or 4) frame to (rows, columns, 3)

    Cell (x, y) takes the pixel at (x * W // columns, y * H // rows); any
    alpha channel is dropped.

    >>> frame = numpy.arange(4 * 4 * 3, dtype=numpy.uint8).reshape(4, 4, 3)
    >>> scale_frame(frame, 2, 2)[:, :, 0].tolist()
    [[0, 6], [24, 30]]
    """
    frame = numpy.asarray(frame)
    height, width = frame.shape[:2]
    ys = numpy.arange(rows) * height // rows
    xs = numpy.arange(columns) * width // columns
    return frame[ys[:, numpy.newaxis], xs[numpy.newaxis, :], :3]
