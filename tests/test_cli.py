import os
import tempfile
import unittest
from contextlib import redirect_stderr
from io import StringIO

from PIL import Image

from tinysixel.app.cli import main, parse_args


class CliTest(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmpdir = self._tmp.name
        self.output = os.path.join(self.tmpdir, "out.six")

    def tearDown(self):
        self._tmp.cleanup()

    def _read_output(self):
        with open(self.output, "rb") as handle:
            return handle.read()

    def test_defaults(self):
        args = parse_args(["picture.png"])
        self.assertIsNone(args.colors)
        self.assertFalse(args.no_dither)
        self.assertFalse(args.hls)

    def test_demo(self):
        self.assertEqual(main(["--demo", "--width", "12", "--output", self.output]), 0)
        data = self._read_output()
        self.assertTrue(data.startswith(b'\x1bPq"1;1;12;12'))
        self.assertTrue(data.endswith(b"\x1b\\"))

    def test_demo_without_raster_attributes(self):
        code = main(["--demo", "--width", "12", "--no-raster-attributes", "--output", self.output])
        self.assertEqual(code, 0)
        self.assertTrue(self._read_output().startswith(b"\x1bPq#0;1;0;50;100"))

    def test_demo_colors_set_hue_registers(self):
        code = main(["--demo", "--width", "12", "--colors", "4", "--output", self.output])
        self.assertEqual(code, 0)
        data = self._read_output()
        self.assertIn(b"#3;1;270;50;100", data)
        self.assertNotIn(b"#4;1;", data)

    def test_demo_rescaled_hue(self):
        code = main(["--demo", "--width", "12", "--colors", "2", "--rescale-hue", "--output", self.output])
        self.assertEqual(code, 0)
        self.assertIn(b"#1;1;50;50;100", self._read_output())

    def test_demo_rejects_image_only_flags(self):
        for flag in ("--hls", "--no-dither"):
            with redirect_stderr(StringIO()) as err:
                self.assertEqual(main(["--demo", flag, "--output", self.output]), 2)
            self.assertIn(flag, err.getvalue())

    def test_rescale_hue_needs_demo(self):
        with redirect_stderr(StringIO()):
            self.assertEqual(main(["in.png", "--rescale-hue"]), 2)

    def test_image_file(self):
        path = os.path.join(self.tmpdir, "in.png")
        Image.new("RGB", (8, 8), (0, 255, 0)).save(path)
        code = main([path, "--hls", "--colors", "4", "--no-raster-attributes", "--output", self.output])
        self.assertEqual(code, 0)
        self.assertTrue(self._read_output().startswith(b"\x1bPq#0;1;240;50;100"))

    def test_missing_input(self):
        with redirect_stderr(StringIO()) as err:
            self.assertEqual(main([]), 2)
        self.assertIn("Missing file path", err.getvalue())

    def test_path_and_demo(self):
        with redirect_stderr(StringIO()):
            self.assertEqual(main(["in.png", "--demo"]), 2)

    def test_errors_are_reported(self):
        with redirect_stderr(StringIO()) as err:
            code = main([os.path.join(self.tmpdir, "missing.png"), "--output", self.output])
        self.assertEqual(code, 2)
        self.assertIn("File not found", err.getvalue())


if __name__ == "__main__":
    unittest.main()
