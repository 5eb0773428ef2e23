import unittest
from tomb.core.rotate import wrap_position
from tomb.core.dice import SliceDie


class TestWrapPosition(unittest.TestCase):
    """
    Tests for `wrap_position`, the modulo arithmetic behind every rotation:
      - Negative offsets rewind (they are never treated as positive).
      - Offsets larger than the face count, in either direction, wrap around.
      - The result is always within [0, faces).
    """

    def test_rewind_from_first_face_wraps_to_last(self):
        self.assertEqual(wrap_position(0, -1, 6), 5)

    def test_negative_offset_is_not_treated_as_positive(self):
        # +2 from position 3 would be 5; -2 must land on 1
        self.assertEqual(wrap_position(3, -2, 6), 1)

    def test_large_offsets_wrap(self):
        self.assertEqual(wrap_position(0, -7, 6), wrap_position(0, -1, 6))
        self.assertEqual(wrap_position(5, 1, 6), 0)
        self.assertEqual(wrap_position(3, 600, 6), 3)
        self.assertEqual(wrap_position(2, -1000003, 5), (2 - 3) % 5)

    def test_zero_offset_keeps_position(self):
        self.assertEqual(wrap_position(4, 0, 5), 4)

    def test_result_always_in_range(self):
        for faces in (1, 2, 6, 20):
            for position in range(faces):
                for offset in range(-3 * faces, 3 * faces + 1):
                    result = wrap_position(position, offset, faces)
                    self.assertTrue(0 <= result < faces)
                    self.assertEqual(result, wrap_position(position, offset % faces, faces))

    def test_rejects_non_integer_offsets(self):
        with self.assertRaises(TypeError):
            wrap_position(0, 1.5, 6)
        with self.assertRaises(TypeError):
            wrap_position(0, True, 6)


class TestRotateOverGrades(unittest.TestCase):
    """
    Rotation through a five-letter grade die, forwards and backwards, with and without looping.
    """
    GRADES = ['A', 'B', 'C', 'D', 'F']

    def test_rotate_forward(self):
        self.assertEqual(SliceDie(self.GRADES).rotated(2).value(), 'C')

    def test_rotate_backward(self):
        self.assertEqual(SliceDie.with_position(self.GRADES, 2).rotated(-2).value(), 'A')

    def test_rotate_forward_loop(self):
        self.assertEqual(SliceDie.with_position(self.GRADES, 2).rotated(3).value(), 'A')

    def test_rotate_backward_loop(self):
        self.assertEqual(SliceDie(self.GRADES).rotated(-3).value(), 'C')


if __name__ == '__main__':
    unittest.main()
