import logging
import sys

import click

from fecresults import config
from .fetch import fetch
from . import years

@click.group()
@click.option('--verbose', '-v', is_flag=True, help="Log each generator call")
def cli(verbose=False):
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING
    logging.basicConfig(
        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    # basicConfig leaves the level alone when handlers are already installed
    logging.getLogger().setLevel(level)

    if config.settings_error is not None:
        sys.exit(str(config.settings_error))

cli.add_command(fetch)
cli.add_command(years.list)
