import unittest

from gradecalc.core.grades import DEFAULT_CREDITS, DEFAULT_GRADE, GRADE_POINTS, GRADE_SYMBOLS, to_grade_point


class GradeScaleTests(unittest.TestCase):
    def test_scale_values(self):
        self.assertEqual(to_grade_point("AP"), 10)
        self.assertEqual(to_grade_point("AA"), 10)
        self.assertEqual(to_grade_point("BC"), 7)
        self.assertEqual(to_grade_point("FR"), 0)

    def test_symbol_order(self):
        self.assertEqual(GRADE_SYMBOLS, ("AP", "AA", "AB", "BB", "BC", "CC", "CD", "DD", "FR"))

    def test_defaults(self):
        self.assertEqual(DEFAULT_GRADE, "BC")
        self.assertEqual(DEFAULT_CREDITS, 6)

    def test_scale_is_read_only(self):
        with self.assertRaises(TypeError):
            GRADE_POINTS["AA"] = 11

    def test_unknown_symbol(self):
        with self.assertRaises(ValueError):
            to_grade_point("A+")


if __name__ == "__main__":
    unittest.main()
