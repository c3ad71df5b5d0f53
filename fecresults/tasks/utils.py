import click

from fecresults.exceptions import InvalidYearError
from fecresults.lib import compose, parse_years

def years_callback(ctx, param, value):
    """Convert a comma-separated --years option into a list of years"""
    if value is None:
        return None

    try:
        return parse_years(value)
    except InvalidYearError as e:
        raise click.BadParameter(str(e))

YEAR_OPTIONS = [
    click.option('--years', '-y', callback=years_callback,
        help="Comma-separated election years, e.g. 2008,2012. Defaults to "
        "the YEARS setting"),
]

def default_year_options(f):
    """Decorator that adds the default options for a year-based command"""
    decorator_stack = compose(*YEAR_OPTIONS)
    return decorator_stack(f)
