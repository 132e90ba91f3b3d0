import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from synthsun_renderer.grid import grid_segments, horizontal_segments, scan_line_rows, vertical_segments
from synthsun_renderer.models import Point, Segment
from synthsun_renderer.scene import DEFAULT_SCENE


class VerticalLineTests(unittest.TestCase):
    def test_count_is_constant(self):
        for v in (0, 1, 17, 49):
            segments = grid_segments(v)
            verticals = [s for s in segments if s.start.y != s.end.y]
            self.assertEqual(len(verticals), DEFAULT_SCENE.n_vert_lines + 1)

    def test_centre_line(self):
        segments = vertical_segments()
        self.assertEqual(segments[40], Segment(Point(320, 480), Point(320, 240)))

    def test_lines_converge(self):
        segments = vertical_segments()
        self.assertEqual(segments[0], Segment(Point(-4480, 480), Point(0, 240)))
        self.assertEqual(segments[-1], Segment(Point(5120, 480), Point(640, 240)))
        for seg in segments:
            self.assertEqual(seg.end.y, DEFAULT_SCENE.lines_top)
            self.assertLessEqual(abs(seg.end.x - 320), abs(seg.start.x - 320))


class HorizontalLineTests(unittest.TestCase):
    def test_fixed_lines(self):
        rows = scan_line_rows(0)
        self.assertEqual(rows[:2], [240, 240])
        self.assertEqual(scan_line_rows(10)[:2], [240, 242])
        self.assertEqual(scan_line_rows(49)[:2], [240, 249])

    def test_first_scan_line(self):
        self.assertEqual(scan_line_rows(0)[2], 251)

    def test_spacing_grows_towards_viewer(self):
        rows = scan_line_rows(0)[1:]
        gaps = [b - a for a, b in zip(rows, rows[1:])]
        self.assertGreater(len(gaps), 5)
        self.assertEqual(gaps, sorted(gaps))
        for gap in gaps:
            self.assertGreaterEqual(gap, DEFAULT_SCENE.lines_min_distance)
            self.assertLessEqual(gap, DEFAULT_SCENE.lines_max_distance)

    def test_offset_scrolls_lines_down(self):
        still = scan_line_rows(0)
        moved = scan_line_rows(20)
        self.assertEqual(len(still), len(moved))
        for a, b in zip(still[2:], moved[2:]):
            self.assertGreater(b, a)

    def test_near_lines_scroll_faster(self):
        still = scan_line_rows(0)[2:]
        moved = scan_line_rows(40)[2:]
        shifts = [b - a for a, b in zip(still, moved)]
        self.assertEqual(shifts, sorted(shifts))

    def test_segments_span_canvas(self):
        for seg in horizontal_segments(7):
            self.assertEqual(seg.start.x, 0)
            self.assertEqual(seg.end.x, DEFAULT_SCENE.width)
            self.assertEqual(seg.start.y, seg.end.y)
            self.assertGreaterEqual(seg.start.y, DEFAULT_SCENE.lines_top)


if __name__ == "__main__":
    unittest.main()
