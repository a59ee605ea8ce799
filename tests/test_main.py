import io
import termios
import unittest
from unittest import mock

from termframe import main
from termframe.terminal import Terminal


class TestParseArgs(unittest.TestCase):
    def test_defaults(self):
        args = main.parse_args([])
        self.assertEqual(args.fps, 35)
        self.assertEqual(args.title, 'termframe')
        self.assertIsNone(args.log)
        self.assertIsNone(args.frames)
        self.assertEqual(args.size, (160, 100))

    def test_size(self):
        self.assertEqual(main.parse_args(['--size', '320x200']).size, (320, 200))

    def test_bad_fps(self):
        with mock.patch('sys.stderr', io.StringIO()):
            self.assertRaises(SystemExit, main.parse_args, ['--fps', '0'])
            self.assertRaises(SystemExit, main.parse_args, ['--fps', '-5'])
            self.assertRaises(SystemExit, main.parse_args, ['--fps', 'fast'])

    def test_bad_frames(self):
        with mock.patch('sys.stderr', io.StringIO()):
            self.assertRaises(SystemExit, main.parse_args, ['--frames', '0'])

    def test_bad_size(self):
        with mock.patch('sys.stderr', io.StringIO()):
            self.assertRaises(SystemExit, main.parse_args, ['--size', 'big'])
            self.assertRaises(SystemExit, main.parse_args, ['--size', '0x10'])


class TestMain(unittest.TestCase):
    def test_runs_frames_then_exits(self):
        out = io.StringIO()
        def fake_terminal(title):
            return Terminal(io.BytesIO(b''), out, title=title, size_query=lambda: (20, 10))
        with mock.patch.object(main, 'Terminal', fake_terminal):
            self.assertEqual(main.main(['--frames', '2', '--fps', '1000', '--size', '16x16']), 0)
        text = out.getvalue()
        # session start, two frames, session end
        self.assertEqual(text.count('\x1b[H\x1b['), 4)
        self.assertIn('\x1b]0;termframe\x07', text)
        self.assertTrue(text.endswith('\x1b[?25h'))

    def test_raw_mode_failure(self):
        def broken_terminal(title):
            raise termios.error(25, 'Inappropriate ioctl for device')
        with mock.patch.object(main, 'Terminal', broken_terminal):
            with mock.patch('sys.stderr', io.StringIO()) as err:
                self.assertEqual(main.main([]), 1)
        self.assertIn('terminal raw mode', err.getvalue())


if __name__ == '__main__':
    unittest.main()
