"""Decoding of raw keyboard bytes into logical key codes

Key codes are ints. Digits and y/n keep their (lower case) ASCII code, the
other keys get the constants below.
"""

import logging

from termframe import bytesource

ESC = 0x1b

KEY_TAB = 9
KEY_ENTER = 13
KEY_ESCAPE = 27
KEY_USE = 0xa2
KEY_FIRE = 0xa3
KEY_LEFTARROW = 0xac
KEY_UPARROW = 0xad
KEY_RIGHTARROW = 0xae
KEY_DOWNARROW = 0xaf

key_sequences = {
    b'\x1b[A': KEY_UPARROW,
    b'\x1b[B': KEY_DOWNARROW,
    b'\x1b[C': KEY_RIGHTARROW,
    b'\x1b[D': KEY_LEFTARROW,
    b'\x1bOP': KEY_USE,  # F1
    b' ': KEY_USE,
    b'\r': KEY_ENTER,
    b'\n': KEY_ENTER,
    b'\x1b': KEY_ESCAPE,
    b'\t': KEY_TAB,
    b',': KEY_FIRE,
}

LITERAL_KEYS = b'0123456789yn'


def map_key(seq):
    """Returns the key code for a byte sequence, or None

    >>> map_key(b'\\x1b[A') == KEY_UPARROW
    True
    >>> map_key(b'Y') == ord('y')
    True
    >>> map_key(b'q') is None
    True
    """
    if seq in key_sequences:
        return key_sequences[seq]
    if len(seq) == 1 and seq.lower() in LITERAL_KEYS:
        return seq.lower()[0]
    return None


class KeyDecoder(object):
    """Turns bytes polled from a byte source into key codes

    source must respond to source.try_take(), returning an int, or
    bytesource.EMPTY or bytesource.CLOSED when there is nothing to read.
    """
    def __init__(self, source):
        self.source = source
        self.closed = False

    def _take(self):
        b = self.source.try_take()
        if b == bytesource.CLOSED:
            self.closed = True
            return None
        if b == bytesource.EMPTY:
            return None
        return b

    def decode(self):
        """Returns the next key code, or None if no key could be decoded

        Never waits: an escape sequence is finished with whatever
        continuation bytes have already arrived, so a lone ESC decodes as the
        escape key.
        """
        if self.closed:
            return None
        b = self._take()
        if b is None:
            return None
        seq = bytearray([b])
        if b == ESC:
            for _ in range(2):
                b = self._take()
                if b is None:
                    break
                seq.append(b)
        key = map_key(bytes(seq))
        if key is None:
            logging.debug('ignoring unrecognized input %r', bytes(seq))
        return key
