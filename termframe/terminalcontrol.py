"""
Terminal control sequences

see: https://en.wikipedia.org/wiki/ANSI_escape_code#CSI_codes

Every upper case sequence below also gets a lower case function that writes
it to an out_stream, e.g. ``hide_cursor(sys.stdout)``.
"""

import logging

CURSOR_HOME = "\x1b[H"
CLEAR_SCREEN = "\x1b[2J"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"
RESET_ATTRIBUTES = "\x1b[0m"
LINE_END = RESET_ATTRIBUTES + "\r\n"

SESSION_START = CLEAR_SCREEN + CURSOR_HOME + HIDE_CURSOR
SESSION_END = RESET_ATTRIBUTES + CLEAR_SCREEN + CURSOR_HOME + SHOW_CURSOR

FG_COLOR_FMT = "\x1b[38;2;%d;%d;%dm"
TITLE_FMT = "\x1b]0;%s\x07"


### Produce simple functions for all escape sequences

def produce_convenience_function(name, seq):
    def func(out_stream):
        out_stream.write(seq)
    func.__name__ = name.lower()
    func.__doc__ = "Writes %s to out_stream" % name
    return func

for name, value in list(globals().items()):
    if name.upper() == name and not name.startswith('_') and not name.endswith('_FMT'):
        globals()[name.lower()] = produce_convenience_function(name, value)

### Parameterized sequences

def fg_color(r, g, b):
    """Returns the 24-bit foreground color sequence

    >>> fg_color(255, 0, 16)
    '\\x1b[38;2;255;0;16m'
    """
    return FG_COLOR_FMT % (r, g, b)

def set_title(title, out_stream):
    """Writes the OSC window title sequence"""
    # BEL terminates the OSC, so it can't appear inside the title
    title = title.replace('\x07', '')
    logging.debug('setting window title to %r', title)
    out_stream.write(TITLE_FMT % title)
