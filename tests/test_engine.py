import unittest

import numpy

from termframe import engine, keys
from termframe.demo import Demo
from termframe.events import KeyDown, KeyUp
from termframe.engine import pending_events, run_loop

from fakes import FakeClock


class ScriptedSource(engine.EventSource):
    def __init__(self, batches):
        self.batches = [list(b) for b in batches]
    def get_event(self):
        if self.batches and self.batches[0]:
            return self.batches[0].pop(0)
        if self.batches:
            self.batches.pop(0)
        return None


class RecordingConsumer(engine.FrameConsumer):
    def __init__(self):
        self.frames = []
    def draw_frame(self, frame):
        self.frames.append(frame)


class TestCapabilities(unittest.TestCase):
    def test_abstract(self):
        self.assertRaises(NotImplementedError, engine.FrameConsumer().draw_frame, None)
        self.assertRaises(NotImplementedError, engine.EventSource().get_event)


class TestRunLoop(unittest.TestCase):
    def test_pending_events_drains(self):
        source = ScriptedSource([[KeyDown(1), KeyUp(1)], [KeyDown(2)]])
        self.assertEqual(pending_events(source), [KeyDown(1), KeyUp(1)])
        self.assertEqual(pending_events(source), [KeyDown(2)])
        self.assertEqual(pending_events(source), [])

    def test_events_reach_step_once_per_frame(self):
        source = ScriptedSource([[KeyDown(1)], [], [KeyDown(2), KeyUp(1)]])
        consumer = RecordingConsumer()
        seen = []
        def step(evs):
            seen.append(evs)
            return None if len(seen) == 4 else len(seen)
        clock = FakeClock()
        drawn = run_loop(consumer, source, step, fps=10, clock=clock, sleep=clock.advance)
        self.assertEqual(drawn, 3)
        self.assertEqual(consumer.frames, [1, 2, 3])
        self.assertEqual(seen, [[KeyDown(1)], [], [KeyDown(2), KeyUp(1)], []])

    def test_rejects_non_positive_fps(self):
        for fps in (0, -1):
            self.assertRaises(ValueError, run_loop, RecordingConsumer(), ScriptedSource([]),
                              lambda evs: None, fps=fps)

    def test_sleeps_out_the_frame(self):
        clock = FakeClock()
        sleeps = []
        def sleep(seconds):
            sleeps.append(seconds)
            clock.advance(seconds)
        frames = iter([1, 2, None])
        def step(evs):
            clock.advance(0.01)
            return next(frames)
        run_loop(RecordingConsumer(), ScriptedSource([]), step, fps=20, clock=clock, sleep=sleep)
        self.assertEqual(len(sleeps), 2)
        for s in sleeps:
            self.assertAlmostEqual(s, 0.04)


class TestDemo(unittest.TestCase):
    def test_frame_shape(self):
        frame = Demo(64, 48).step([])
        self.assertEqual(frame.shape, (48, 64, 3))
        self.assertEqual(frame.dtype, numpy.uint8)

    def test_escape_stops(self):
        self.assertIsNone(Demo().step([KeyDown(keys.KEY_ESCAPE)]))

    def test_max_frames(self):
        demo = Demo(16, 16, max_frames=2)
        self.assertIsNotNone(demo.step([]))
        self.assertIsNotNone(demo.step([]))
        self.assertIsNone(demo.step([]))

    def test_marker_moves_while_held(self):
        demo = Demo(100, 100)
        demo.step([KeyDown(keys.KEY_RIGHTARROW)])
        demo.step([])
        self.assertEqual(demo.marker, [52, 50])
        demo.step([KeyUp(keys.KEY_RIGHTARROW)])
        self.assertEqual(demo.marker, [52, 50])

    def test_marker_stays_on_frame(self):
        demo = Demo(10, 10)
        demo.step([KeyDown(keys.KEY_UPARROW)])
        for _ in range(20):
            demo.step([])
        self.assertEqual(demo.marker, [5, 0])

    def test_marker_drawn_white(self):
        demo = Demo(40, 40)
        frame = demo.step([])
        self.assertEqual(frame[20, 20].tolist(), [255, 255, 255])

    def test_use_pauses(self):
        demo = Demo(16, 16)
        first = demo.step([KeyDown(keys.KEY_USE)])
        second = demo.step([])
        self.assertEqual(first.tobytes(), second.tobytes())

    def test_digit_changes_palette(self):
        a, b = Demo(32, 32), Demo(32, 32)
        self.assertNotEqual(a.step([]).tobytes(), b.step([KeyDown(ord('3'))]).tobytes())
        self.assertEqual(b.palette, 3)


if __name__ == '__main__':
    unittest.main()
