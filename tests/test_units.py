import unittest

from cooler_core.units import inch, mm, parse_length, to_inches


class TestUnits(unittest.TestCase):
    def test_inch_conversion(self):
        self.assertAlmostEqual(inch(23), 584.2)
        self.assertAlmostEqual(to_inches(inch(6)), 6.0)
        self.assertEqual(mm(12), 12.0)

    def test_parse_plain_numbers_are_mm(self):
        self.assertEqual(parse_length(12), 12.0)
        self.assertEqual(parse_length(5.2), 5.2)
        self.assertAlmostEqual(parse_length("5.2"), 5.2)

    def test_parse_units(self):
        self.assertAlmostEqual(parse_length("23 in"), 584.2)
        self.assertAlmostEqual(parse_length("5.2mm"), 5.2)
        self.assertAlmostEqual(parse_length("2 cm"), 20.0)
        self.assertAlmostEqual(parse_length('6"'), 152.4)
        self.assertAlmostEqual(parse_length("6 Inches"), 152.4)

    def test_parse_fractions(self):
        # 1/4 in ply, 1 1/2 in hanger offset
        self.assertAlmostEqual(parse_length("1/4 in"), 6.35)
        self.assertAlmostEqual(parse_length("1 1/2 in"), 38.1)
        self.assertAlmostEqual(parse_length("3/4in"), 19.05)

    def test_parse_signed_values(self):
        self.assertAlmostEqual(parse_length("-1 1/2 in"), -38.1)
        self.assertAlmostEqual(parse_length("+1 1/2 in"), 38.1)
        self.assertAlmostEqual(parse_length("-1/4 in"), -6.35)
        self.assertAlmostEqual(parse_length("-5.2mm"), -5.2)

    def test_parse_rejects_garbage(self):
        with self.assertRaises(ValueError):
            parse_length("about a foot")
        with self.assertRaises(ValueError):
            parse_length("3 ft")


if __name__ == '__main__':
    unittest.main()
