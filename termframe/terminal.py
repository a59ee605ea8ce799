"""Terminal wrapper which renders pixel frames and reports key events"""

import logging
import os
import sys
import termios
import time
import tty

from termframe import bytesource
from termframe import engine
from termframe import keys
from termframe import keysynth
from termframe import scaling
from termframe import termformat
from termframe import terminalcontrol


class Terminal(engine.FrameConsumer, engine.EventSource):
    """

    Draws frames to a terminal and polls it for key events

    takes in:
     -(H, W, 3 or 4) uint8 pixel frames, via draw_frame
     -raw keyboard bytes from in_stream
    outputs:
     -frames scaled to the whole terminal, one colored glyph per cell
     -KeyDown events as keys arrive and KeyUp events once they go quiet

    Use as a context manager: entering puts the terminal in raw mode, clears
    it and hides the cursor, exiting puts all of that back.

    """
    def __init__(self, in_stream=None, out_stream=None, title=None,
                 size_query=None, dwell=keysynth.DWELL,
                 raw=None, clock=time.monotonic):
        """

        in_stream must respond to in_stream.read(1) with bytes (text streams
        with a .buffer, like sys.stdin, are read through it)
        out_stream must respond to out_stream.write('some message')
        raw: whether to put in_stream in raw mode; by default only if it's a tty
        size_query: returns the terminal (columns, rows); by default asks the
         terminal out_stream is connected to
        """
        if in_stream is None:
            in_stream = sys.stdin
        if out_stream is None:
            out_stream = sys.stdout
        self.in_stream = in_stream
        self.out_stream = out_stream
        self.title = title
        self.size_query = size_query
        self.dwell = dwell
        self.raw = in_stream.isatty() if raw is None else raw
        self.clock = clock
        self.original_attrs = None
        self.source = None
        self.synthesizer = None

    def __enter__(self):
        logging.debug('-------entering Terminal %r------', self)
        if self.raw:
            fd = self.in_stream.fileno()
            self.original_attrs = termios.tcgetattr(fd)
            tty.setraw(fd)
        self.source = bytesource.NonBlockingByteSource(getattr(self.in_stream, 'buffer', self.in_stream))
        self.synthesizer = keysynth.EventSynthesizer(keys.KeyDecoder(self.source),
                                                     dwell=self.dwell, clock=self.clock)
        self._control(terminalcontrol.session_start)
        if self.title is not None:
            self.set_title(self.title)
        return self

    def __exit__(self, type, value, traceback):
        self.cleanup()

    def _write(self, data):
        try:
            self.out_stream.write(data)
            self.out_stream.flush()
        except (OSError, ValueError) as e:
            logging.debug('write to terminal failed, dropping %d characters: %r', len(data), e)
            return False
        return True

    def _control(self, writer, *args):
        """Calls a terminalcontrol writer on out_stream, returns whether it worked"""
        try:
            writer(*args + (self.out_stream,))
            self.out_stream.flush()
        except (OSError, ValueError) as e:
            logging.debug('%s failed: %r', writer.__name__, e)
            return False
        return True

    def _query_size(self):
        fileno = getattr(self.out_stream, 'fileno', None)
        if fileno is None:
            return scaling.DEFAULT_SIZE
        return os.get_terminal_size(fileno())

    def screen_size(self):
        """Returns the (columns, rows) frames are scaled to"""
        return scaling.grid_size(*scaling.terminal_size(self.size_query or self._query_size))

    def draw_frame(self, frame):
        """Renders frame over the whole screen, returns whether it was written"""
        columns, rows = self.screen_size()
        grid = scaling.scale_frame(frame, columns, rows)
        return self._write(terminalcontrol.CURSOR_HOME + termformat.formatted_grid(grid))

    def set_title(self, title):
        self.title = title
        return self._control(terminalcontrol.set_title, title)

    def get_event(self):
        """Returns a KeyDown, a KeyUp or None, never waiting for input"""
        if self.synthesizer is None:
            return None
        return self.synthesizer.poll()

    @property
    def input_closed(self):
        return self.synthesizer is not None and self.synthesizer.closed

    def cleanup(self):
        self._control(terminalcontrol.session_end)
        if self.original_attrs is not None:
            termios.tcsetattr(self.in_stream.fileno(), termios.TCSAFLUSH, self.original_attrs)
            self.original_attrs = None
        logging.debug('-------left Terminal %r------', self)
