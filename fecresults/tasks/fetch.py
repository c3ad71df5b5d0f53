import sys

import click

from fecresults.base.fetch import ResultsFetcher
from fecresults.base.generator import load_generator
from fecresults.exceptions import ConfigurationError
from .utils import default_year_options

@click.command(help="Generate congressional, summary and presidential "
    "results for each election year")
@default_year_options
@click.option('--generator', '-g', help="Dotted path to the results "
    "generator class. Defaults to the RESULTS_GENERATOR setting")
def fetch(years=None, generator=None):
    """
    Generate results for each election year.

    With no options, results are generated for every year in the YEARS
    setting using the class named by the RESULTS_GENERATOR setting.
    Presidential results are only generated for years divisible by 4.

    Errors raised while generating results aren't caught and stop the run.
    """
    try:
        generator_cls = load_generator(generator) if generator else None
        fetcher = ResultsFetcher(generator_cls=generator_cls, years=years)
        # Resolve the configured generator before any output is written
        fetcher.load()
    except ConfigurationError as e:
        sys.exit(str(e))

    fetcher.run()
