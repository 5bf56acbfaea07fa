import unittest

from tinysixel import InvalidDimensionsError, SixelImage


def make_image(rows):
    image = SixelImage(len(rows[0]), len(rows))
    for y, row in enumerate(rows):
        for x, color in enumerate(row):
            image.set(x, y, color)
    return image


class SixelImageConstructionTest(unittest.TestCase):
    def test_new_image_is_filled_with_register_zero(self):
        for width, height in [(1, 6), (3, 12), (7, 18)]:
            image = SixelImage(width, height)
            self.assertEqual(image.width, width)
            self.assertEqual(image.height, height)
            self.assertEqual(image.strip_count, height // 6)
            for y in range(height):
                for x in range(width):
                    self.assertEqual(image.get(x, y), 0)

    def test_height_must_be_multiple_of_six(self):
        for height in (1, 5, 7, 13):
            with self.assertRaises(InvalidDimensionsError):
                SixelImage(4, height)

    def test_zero_height_is_rejected(self):
        with self.assertRaises(InvalidDimensionsError):
            SixelImage(4, 0)

    def test_negative_width_is_rejected(self):
        with self.assertRaises(ValueError):
            SixelImage(-1, 6)

    def test_from_pixels(self):
        image = SixelImage.from_pixels(list(range(12)), 2)
        self.assertEqual(image.height, 6)
        self.assertEqual(image.get(1, 0), 1)
        self.assertEqual(image.get(0, 5), 10)

    def test_from_pixels_rejects_partial_rows(self):
        with self.assertRaises(InvalidDimensionsError):
            SixelImage.from_pixels([0] * 13, 2)

    def test_from_pixels_zero_width(self):
        image = SixelImage.from_pixels([], 0, height=6)
        self.assertEqual((image.width, image.height), (0, 6))
        self.assertEqual(image.to_bytes(), b"-")
        with self.assertRaises(InvalidDimensionsError):
            SixelImage.from_pixels([], 0)

    def test_from_pixels_with_height(self):
        image = SixelImage.from_pixels([3] * 12, 2, height=6)
        self.assertEqual(image.get(1, 5), 3)
        with self.assertRaises(InvalidDimensionsError):
            SixelImage.from_pixels([3] * 12, 2, height=12)

    def test_from_pixels_rejects_wrong_height(self):
        with self.assertRaises(InvalidDimensionsError):
            SixelImage.from_pixels([0] * 10, 2)


class SixelImageAccessTest(unittest.TestCase):
    def test_get_returns_what_was_set(self):
        image = SixelImage(3, 6)
        for color in (0, 1, 255, 359, 0xFFFF):
            image.set(2, 5, color)
            self.assertEqual(image.get(2, 5), color)

    def test_set_only_touches_one_pixel(self):
        image = SixelImage(3, 6)
        image.set(1, 2, 9)
        self.assertEqual(sum(image.pixels), 9)

    def test_out_of_range_coordinates(self):
        image = SixelImage(3, 6)
        for x, y in [(3, 0), (0, 6), (-1, 0), (0, -1)]:
            with self.assertRaises(IndexError):
                image.get(x, y)
            with self.assertRaises(IndexError):
                image.set(x, y, 1)

    def test_out_of_range_color(self):
        image = SixelImage(3, 6)
        for color in (-1, 0x10000):
            with self.assertRaises(ValueError):
                image.set(0, 0, color)

    def test_pixels_is_a_copy(self):
        image = SixelImage(1, 6)
        pixels = image.pixels
        pixels[0] = 4
        self.assertEqual(image.get(0, 0), 0)


class ColorsInStripTest(unittest.TestCase):
    def test_first_seen_order(self):
        image = make_image([[1, 2], [2, 1], [1, 1], [3, 3], [1, 1], [1, 1]])
        self.assertEqual(image.colors_in_strip(0), [1, 2, 3])

    def test_row_major_order(self):
        image = make_image([[5, 5], [5, 8], [7, 5], [5, 5], [5, 5], [5, 5]])
        self.assertEqual(image.colors_in_strip(0), [5, 8, 7])

    def test_strips_are_independent(self):
        rows = [[1, 1]] * 6 + [[7, 7], [7, 4], [7, 7], [7, 7], [1, 7], [7, 7]]
        image = make_image(rows)
        self.assertEqual(image.colors_in_strip(0), [1])
        self.assertEqual(image.colors_in_strip(1), [7, 4, 1])

    def test_many_colors(self):
        image = SixelImage(500, 6)
        for x in range(500):
            image.set(x, 3, x + 1)
        self.assertEqual(image.colors_in_strip(0), [0] + list(range(1, 501)))

    def test_invalid_strip(self):
        image = SixelImage(2, 12)
        with self.assertRaises(IndexError):
            image.colors_in_strip(2)
        with self.assertRaises(IndexError):
            image.colors_in_strip(-1)


if __name__ == "__main__":
    unittest.main()
