"""A small engine to drive a Terminal with: an animated test pattern

Arrow keys move the marker for as long as they're held, digits pick a
palette, use (space) pauses, escape quits.
"""

import logging

import numpy

from termframe import events
from termframe import keys

MOVES = {
    keys.KEY_LEFTARROW: (-1, 0),
    keys.KEY_RIGHTARROW: (1, 0),
    keys.KEY_UPARROW: (0, -1),
    keys.KEY_DOWNARROW: (0, 1),
}

class Demo(object):
    """

    Geometry of the frame is fixed; the terminal does the scaling

    """
    def __init__(self, width=160, height=100, max_frames=None):
        self.width = width
        self.height = height
        self.max_frames = max_frames
        self.tick = 0
        self.frames = 0
        self.palette = 0
        self.paused = False
        self.held = set()
        self.marker = [width // 2, height // 2]
        ys, xs = numpy.mgrid[0:height, 0:width]
        self.xs = xs / float(width)
        self.ys = ys / float(height)

    def process_event(self, e):
        """Returns True if the engine should stop"""
        logging.debug('processing event %r', e)
        if isinstance(e, events.KeyUp):
            self.held.discard(e.key)
            return False
        if e.key == keys.KEY_ESCAPE:
            return True
        if e.key in MOVES:
            self.held.add(e.key)
        elif e.key == keys.KEY_USE:
            self.paused = not self.paused
        elif ord('0') <= e.key <= ord('9'):
            self.palette = e.key - ord('0')
        return False

    def step(self, new_events):
        """Advances one frame, returns it, or None when done"""
        for e in new_events:
            if self.process_event(e):
                return None
        if self.max_frames is not None and self.frames >= self.max_frames:
            return None
        for key in self.held:
            dx, dy = MOVES[key]
            self.marker[0] = min(max(self.marker[0] + dx, 0), self.width - 1)
            self.marker[1] = min(max(self.marker[1] + dy, 0), self.height - 1)
        if not self.paused:
            self.tick += 1
        self.frames += 1
        return self.paint()

    def paint(self):
        t = self.tick / 20.0
        v = (numpy.sin(self.xs * 10 + t) + numpy.sin(self.ys * 8 - t)
             + numpy.sin((self.xs + self.ys) * 6 + t / 2)) / 3
        phase = self.palette * numpy.pi / 5
        frame = numpy.empty((self.height, self.width, 3), dtype=numpy.uint8)
        for channel, offset in enumerate((0, 2 * numpy.pi / 3, 4 * numpy.pi / 3)):
            frame[:, :, channel] = (numpy.sin(v * numpy.pi + phase + offset) + 1) * 127.5
        x, y = self.marker
        frame[max(y - 3, 0):y + 4, max(x - 3, 0):x + 4] = 255
        return frame
