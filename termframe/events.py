"""Language for describing key events that happen in a terminal"""

class Event(object):
    pass

class KeyEvent(Event):
    __slots__ = ['key']
    def __init__(self, key):
        self.key = key
    def __eq__(self, other):
        return type(self) == type(other) and self.key == other.key
    def __ne__(self, other):
        return not self == other
    def __hash__(self):
        return hash((type(self).__name__, self.key))
    def __repr__(self):
        return "<%s %r>" % (type(self).__name__, self.key)

class KeyDown(KeyEvent):
    """A key was pressed (or repeated by the terminal's autorepeat)"""
    __slots__ = []

class KeyUp(KeyEvent):
    """A key is considered released

    Terminals never report releases; these are synthesized by
    termframe.keysynth once a key has gone quiet."""
    __slots__ = []
