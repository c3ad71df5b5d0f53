from unittest import TestCase

from fecresults.exceptions import InvalidYearError
from fecresults.lib import (is_presidential_year, parse_years, split_args,
    validate_year)

class TestYears(TestCase):
    def test_is_presidential_year(self):
        for year in (2000, 2004, 2008, 2012):
            self.assertTrue(is_presidential_year(year))
        for year in (2002, 2006, 2010, 2014):
            self.assertFalse(is_presidential_year(year))

    def test_validate_year(self):
        self.assertEqual(validate_year(2012), 2012)
        self.assertEqual(validate_year("2012"), 2012)
        self.assertEqual(validate_year(" 2010 "), 2010)

    def test_validate_year_invalid(self):
        for value in ("twenty-twelve", None, 0, -2000, 2013, "2013", 2012.5,
                      True):
            self.assertRaises(InvalidYearError, validate_year, value)

    def test_invalid_year_is_value_error(self):
        self.assertRaises(ValueError, validate_year, 2013)

    def test_parse_years(self):
        self.assertEqual(parse_years("2008,2012"), [2008, 2012])
        # Order is preserved
        self.assertEqual(parse_years("2012, 2002 ,2008"), [2012, 2002, 2008])
        self.assertRaises(InvalidYearError, parse_years, "2008,2009")
        self.assertRaises(InvalidYearError, parse_years, " , ")

    def test_split_args(self):
        self.assertEqual(split_args("a, b ,c"), ['a', 'b', 'c'])
        self.assertEqual(split_args("a|b", separator='|'), ['a', 'b'])
        self.assertEqual(split_args(""), [])
