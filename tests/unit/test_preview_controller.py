import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "renderer"))
sys.path.insert(0, str(ROOT / "packages" / "sinks"))

from synthsun_core.performance import BudgetStatus
from synthsun_core.preview_controller import PreviewController
from synthsun_renderer import SunsetRenderer
from synthsun_renderer.scene import SceneParams

SMALL = SceneParams(
    width=32,
    height=24,
    sun_position_y=11.0,
    sun_radius=4.0,
    n_vert_lines=8,
    lines_top=12,
    lines_max_distance=4,
    lines_min_distance=2,
    sun_reflection_a=5.0,
    sun_reflection_b=17.0,
)


class FakeSurface:
    def __init__(self, quit_after_polls):
        self.quit_after_polls = quit_after_polls
        self.polls = 0
        self.presented = []

    def poll_quit(self):
        self.polls += 1
        return self.polls > self.quit_after_polls

    def present(self, frame):
        self.presented.append(frame.offset)


class FakePerformance:
    def __init__(self, delay_ms):
        self.delay_ms = delay_ms
        self.samples = 0

    def sample(self, fps, delay_ms):
        self.samples += 1
        return BudgetStatus(
            cpu_percent=1.0,
            rss_mb=10.0,
            fps=fps,
            overloaded=False,
            warning="above_fps_target",
            recommended_delay_ms=self.delay_ms,
        )


class PreviewControllerTests(unittest.TestCase):
    def setUp(self):
        self.sleeps = []

    def _controller(self, surface, **kwargs):
        kwargs.setdefault("frame_delay_ms", 0)
        return PreviewController(SunsetRenderer(SMALL), surface, sleep=self.sleeps.append, **kwargs)

    def test_offsets_wrap(self):
        surface = FakeSurface(quit_after_polls=6)
        stats = self._controller(surface).run()
        self.assertEqual(surface.presented, [0, 1, 2, 3, 0, 1])
        self.assertEqual(stats.frames, 6)
        self.assertEqual(stats.next_offset, 2)

    def test_quit_before_first_frame(self):
        surface = FakeSurface(quit_after_polls=0)
        stats = self._controller(surface).run()
        self.assertEqual(stats.frames, 0)
        self.assertEqual(surface.presented, [])

    def test_max_frames(self):
        surface = FakeSurface(quit_after_polls=100)
        stats = self._controller(surface).run(max_frames=3)
        self.assertEqual(stats.frames, 3)
        self.assertEqual(surface.presented, [0, 1, 2])

    def test_frame_delay(self):
        surface = FakeSurface(quit_after_polls=2)
        self._controller(surface, frame_delay_ms=20).run()
        self.assertEqual(self.sleeps, [0.02, 0.02])

    def test_no_sleep_without_delay(self):
        self._controller(FakeSurface(quit_after_polls=3)).run()
        self.assertEqual(self.sleeps, [])

    def test_budget_adjusts_delay(self):
        perf = FakePerformance(delay_ms=50)
        surface = FakeSurface(quit_after_polls=4)
        stats = self._controller(surface, performance=perf, sample_every=2).run()
        self.assertEqual(perf.samples, 2)
        self.assertEqual(stats.frame_delay_ms, 50)
        self.assertEqual(self.sleeps, [0.05, 0.05, 0.05])
        self.assertIsNotNone(stats.last_budget)

    def test_step(self):
        surface = FakeSurface(quit_after_polls=0)
        controller = self._controller(surface)
        self.assertEqual([controller.step() for _ in range(5)], [0, 1, 2, 3, 0])


if __name__ == "__main__":
    unittest.main()
