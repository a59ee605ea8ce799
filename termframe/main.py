"""Command line entry point: runs the demo engine in this terminal"""

import argparse
import logging
import sys
import termios

from termframe.demo import Demo
from termframe.engine import run_loop
from termframe.terminal import Terminal

def frame_size(s):
    try:
        width, height = [int(n) for n in s.lower().split('x')]
    except ValueError:
        raise argparse.ArgumentTypeError('expected WIDTHxHEIGHT, got %r' % s)
    if width < 1 or height < 1:
        raise argparse.ArgumentTypeError('frame size must be positive')
    return width, height

def positive_int(s):
    try:
        n = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError('expected a whole number, got %r' % s)
    if n < 1:
        raise argparse.ArgumentTypeError('must be at least 1, got %d' % n)
    return n

def parse_args(argv):
    parser = argparse.ArgumentParser(
        prog='termframe',
        description='Render an animated test pattern to the terminal. '
                    'Arrows move, digits change palette, space pauses, escape quits.')
    parser.add_argument('--fps', type=positive_int, default=35,
                        help='frames per second (default: %(default)s)')
    parser.add_argument('--title', default='termframe',
                        help='window title (default: %(default)s)')
    parser.add_argument('--log', metavar='FILE',
                        help='write debug logging to FILE')
    parser.add_argument('--frames', type=positive_int, default=None,
                        help='stop after this many frames')
    parser.add_argument('--size', type=frame_size, default=(160, 100), metavar='WxH',
                        help='size of the frames the engine draws (default: 160x100)')
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    if args.log:
        logging.basicConfig(filename=args.log, level=logging.DEBUG)
    width, height = args.size
    demo = Demo(width, height, max_frames=args.frames)
    try:
        with Terminal(title=args.title) as term:
            run_loop(term, term, demo.step, fps=args.fps)
    except termios.error as e:
        sys.stderr.write('terminal raw mode: %s\n' % (e,))
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
