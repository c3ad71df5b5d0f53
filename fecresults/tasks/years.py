import click

from fecresults.config import settings
from fecresults.lib import is_presidential_year
from .utils import default_year_options

@click.command(name='years', help="Show the election years results are "
    "generated for")
@default_year_options
def list(years=None):
    """
    Show election years in processing order, marking presidential years.
    """
    if years is None:
        years = settings.YEARS

    for year in years:
        if is_presidential_year(year):
            click.echo("* {} (presidential)".format(year))
        else:
            click.echo("* {}".format(year))
    click.echo("{} years, {} presidential".format(len(years),
        len([y for y in years if is_presidential_year(y)])))
