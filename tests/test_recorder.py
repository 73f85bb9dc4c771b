import unittest
import sys
import os
import numpy as np

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from spanning_maze.viz.recorder import VideoRecorder

class TestRecorder(unittest.TestCase):
    def test_inactive_is_noop(self):
        rec = VideoRecorder(active=False)
        self.assertIsNone(rec.output_file)
        rec.capture_frame(None) # never touches the surface
        rec.stop()
        self.assertEqual(rec.frame_count, 0)

    def test_default_filename(self):
        name = VideoRecorder.default_filename(prefix="gen", directory="no_such_dir_here")
        self.assertTrue(name.startswith("gen_"))
        self.assertTrue(name.endswith(".mp4"))

    def test_frame_conversion(self):
        # surfarray layout: (width, height, 3) RGB
        view = np.zeros((4, 2, 3), dtype=np.uint8)
        view[3, 1] = (255, 0, 0) # red pixel at x=3, y=1
        frame = VideoRecorder.to_bgr(view)
        self.assertEqual(frame.shape, (2, 4, 3))
        self.assertEqual(tuple(frame[1, 3]), (0, 0, 255))

if __name__ == '__main__':
    unittest.main()
