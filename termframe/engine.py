"""What an engine needs from a display: somewhere to draw, something to poll

An engine is handed a FrameConsumer and an EventSource rather than
subclassing anything; run_loop is a plain fixed-rate loop tying them to a
step function.
"""

import logging
import time


class FrameConsumer(object):
    def draw_frame(self, frame):
        """Displays one (H, W, 3 or 4) uint8 frame"""
        raise NotImplementedError()


class EventSource(object):
    def get_event(self):
        """Returns the next KeyDown or KeyUp, or None if there isn't one yet"""
        raise NotImplementedError()


def pending_events(source):
    """Polls source until it has nothing more to give"""
    events = []
    while True:
        e = source.get_event()
        if e is None:
            return events
        events.append(e)

def run_loop(consumer, source, step, fps=35, clock=time.monotonic, sleep=time.sleep):
    """Runs step once per frame until it returns None

    step is called with the list of events that arrived since the last
    frame and returns the next frame to draw. Returns the number of frames
    drawn.
    """
    if fps <= 0:
        raise ValueError('fps must be positive, got %r' % (fps,))
    period = 1.0 / fps
    frames = 0
    while True:
        started = clock()
        frame = step(pending_events(source))
        if frame is None:
            logging.debug('engine stopped after %d frames', frames)
            return frames
        consumer.draw_frame(frame)
        frames += 1
        remaining = period - (clock() - started)
        if remaining > 0:
            sleep(remaining)
