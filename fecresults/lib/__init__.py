import functools

from fecresults.exceptions import InvalidYearError


def is_presidential_year(year):
    """Presidential elections are held in years divisible by 4"""
    return int(year) % 4 == 0


def validate_year(year):
    """
    Check that a value can be used as a federal election year.

    Args:
        year: Year as an integer or a string of digits, e.g. "2012".

    Returns:
        The year as an integer.

    Raises:
        InvalidYearError if the year isn't a positive, even integer.

    """
    if isinstance(year, bool):
        raise InvalidYearError("Invalid year '{}'".format(year))

    try:
        as_int = int(year)
    except (TypeError, ValueError):
        raise InvalidYearError("Invalid year '{}'".format(year))

    # Reject fractional values like 2012.5 that int() would truncate
    if not isinstance(year, str) and as_int != year:
        raise InvalidYearError("Invalid year '{}'".format(year))
    year = as_int

    if year <= 0:
        raise InvalidYearError("Year must be positive, got {}".format(year))

    if year % 2:
        raise InvalidYearError("Federal general elections are held in even "
            "years, got {}".format(year))

    return year


def split_args(raw_args, separator=','):
    """Helper for parsing command-line options"""
    return [arg.strip() for arg in raw_args.split(separator) if arg.strip()]


def parse_years(raw_years):
    """
    Parse a comma-separated list of years, e.g. "2008,2012".

    Order is preserved so results are generated in the order given.

    """
    years = [validate_year(y) for y in split_args(raw_years)]
    if not years:
        raise InvalidYearError("No years specified")
    return years


def compose(*functions):
    """
    Compose an arbitary number of functions

    Implementation by Mathieu Larose
    https://mathieularose.com/function-composition-in-python

    """
    def compose2(f, g):
        return lambda x: f(g(x))
    return functools.reduce(compose2, functions)
