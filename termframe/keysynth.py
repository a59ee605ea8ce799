"""Synthesizes key releases for a keyboard that only reports presses

A terminal sends bytes when a key goes down (and again on autorepeat) but
never when it comes up. EventSynthesizer remembers when each key was last
seen and reports it released once it has been quiet for the dwell time.
"""

import logging
import time

from termframe import events

DWELL = 0.060  # seconds


class EventSynthesizer(object):
    """Produces KeyDown and KeyUp events from a KeyDecoder

    held maps key codes to the time of their latest down signal, oldest
    first, so the first entry is always the next one due for release.
    """
    def __init__(self, decoder, dwell=DWELL, clock=time.monotonic):
        self.decoder = decoder
        self.dwell = dwell
        self.clock = clock
        self.held = {}

    @property
    def closed(self):
        """True once the input is gone; no KeyDown will ever follow"""
        return self.decoder.closed

    def poll(self):
        """Returns at most one KeyUp or KeyDown event, or None. Never blocks."""
        now = self.clock()
        if self.held:
            key, pressed_at = next(iter(self.held.items()))
            if now - pressed_at >= self.dwell:
                del self.held[key]
                logging.debug('releasing key %r after %.3fs', key, now - pressed_at)
                return events.KeyUp(key)

        key = self.decoder.decode()
        if key is None:
            return None
        # pop first so a refreshed key moves to the back of the line
        self.held.pop(key, None)
        self.held[key] = now
        return events.KeyDown(key)
