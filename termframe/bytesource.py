"""Non-blocking access to a blocking byte stream

A daemon thread does the blocking reads and feeds a bounded queue, so the
render loop can poll for input without ever waiting on the keyboard.
"""

import logging
import queue
import threading

QUEUE_CAPACITY = 128

EMPTY = 'empty'
CLOSED = 'closed'

_CLOSE_MARKER = object()


class NonBlockingByteSource(object):
    """Polls bytes read from in_stream by a background thread

    in_stream must respond to in_stream.read(1), returning a length one bytes
    object, or b'' at end of stream.
    """
    def __init__(self, in_stream, capacity=QUEUE_CAPACITY):
        self.in_stream = in_stream
        self.queue = queue.Queue(maxsize=capacity)
        self.closed = False
        self.thread = threading.Thread(target=self._read_loop, name='termframe-reader')
        self.thread.daemon = True
        self.thread.start()

    def _read_loop(self):
        while True:
            try:
                data = self.in_stream.read(1)
            except (OSError, ValueError) as e:
                logging.debug('input read failed, closing byte source: %r', e)
                break
            if not data:
                logging.debug('end of input stream, closing byte source')
                break
            # blocks while the queue is full, which throttles reading
            self.queue.put(data[0])
        self.queue.put(_CLOSE_MARKER)

    def try_take(self):
        """Returns the next byte as an int, EMPTY, or CLOSED without blocking"""
        if self.closed:
            return CLOSED
        try:
            item = self.queue.get_nowait()
        except queue.Empty:
            return EMPTY
        if item is _CLOSE_MARKER:
            self.closed = True
            return CLOSED
        return item

    def join(self, timeout=None):
        """Waits for the reader thread to finish, returns whether it has"""
        self.thread.join(timeout)
        return not self.thread.is_alive()
