import logging
import sys

from fecresults.config import settings
from fecresults.lib import is_presidential_year, validate_year
from .generator import load_generator

logger = logging.getLogger(__name__)


class ResultsFetcher(object):
    """
    Generate congressional, summary and presidential results for a
    sequence of election years.

    A fresh generator is created for each year.  Errors raised by the
    generator aren't handled here, so a failure stops the run and no later
    years are processed.

    Args:
        generator_cls: Class, or other callable, that takes a ``year``
            keyword argument and returns a results generator.  Defaults to
            the class named by the ``RESULTS_GENERATOR`` setting.
        years: Iterable of election years, processed in the given order.
            Defaults to the ``YEARS`` setting.
        stream: File-like object where progress messages are written.
            Defaults to standard output.

    """
    def __init__(self, generator_cls=None, years=None, stream=None):
        if years is None:
            years = settings.YEARS
        # Validate everything up front so a bad year doesn't stop a run
        # partway through.
        self.years = [validate_year(year) for year in years]
        self._generator_cls = generator_cls
        self._stream = stream

    @property
    def generator_cls(self):
        if self._generator_cls is None:
            self._generator_cls = load_generator(settings.RESULTS_GENERATOR)
        return self._generator_cls

    def load(self):
        """
        Resolve the results generator without generating anything.

        Raises:
            GeneratorImportError if the configured generator can't be loaded.

        """
        return self.generator_cls

    @property
    def stream(self):
        # Look up stdout lazily so it can be swapped out, e.g. by click's
        # test runner.
        return self._stream or sys.stdout

    def run(self):
        """
        Generate results for each year.

        Returns:
            List of the years that were processed.

        """
        generator_cls = self.generator_cls
        processed = []

        for year in self.years:
            self.fetch_year(generator_cls, year)
            processed.append(year)

        return processed

    def fetch_year(self, generator_cls, year):
        self.stream.write("Year: {}.\n".format(year))
        self.stream.flush()

        # Grab congress and the summary.
        generator = generator_cls(year=year)
        logger.debug("Generating congressional results for %s", year)
        generator.congress()
        logger.debug("Generating summary for %s", year)
        generator.summary()

        if is_presidential_year(year):
            logger.debug("Generating presidential results for %s", year)
            generator.president()


def fetch_results(generator_cls=None, years=None, stream=None):
    """Generate results for each year.  See ``ResultsFetcher``."""
    return ResultsFetcher(generator_cls, years, stream).run()
