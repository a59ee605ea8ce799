"""Render pixel frames to a color terminal and read key events from it"""

from termframe.events import Event, KeyDown, KeyUp
from termframe.engine import FrameConsumer, EventSource, run_loop
from termframe.terminal import Terminal

__all__ = ['Event', 'KeyDown', 'KeyUp', 'FrameConsumer', 'EventSource',
           'run_loop', 'Terminal']
