from importlib import import_module

from fecresults.exceptions import GeneratorImportError
from fecresults.lib import is_presidential_year

GENERATOR_OPERATIONS = ('congress', 'summary', 'president')
"""Methods every results generator must provide"""


class BaseResultsGenerator(object):
    """
    Interface for generating election results for a single year.

    The driver constructs one generator per year, with the year as its only
    option, and calls its methods without arguments.  What gets generated and
    where it's written is entirely up to the implementation.

    Generators don't have to subclass this, but they need to provide the
    same constructor and methods.

    """
    def __init__(self, year):
        self.year = year

    @property
    def is_presidential_year(self):
        return is_presidential_year(self.year)

    def congress(self):
        """Generate House and Senate results for the year"""
        raise NotImplementedError

    def summary(self):
        """Generate a summary of the year's results"""
        raise NotImplementedError

    def president(self):
        """
        Generate presidential results for the year.

        Only called for presidential years.
        """
        raise NotImplementedError


def _split_path(path):
    if ':' in path:
        module_name, _, attr = path.partition(':')
    else:
        module_name, _, attr = path.rpartition('.')

    if not module_name or not attr:
        raise GeneratorImportError(path, "expected 'module.ClassName'")

    return module_name, attr


def load_generator(path):
    """
    Resolve a results generator class from its dotted path

    USAGE

       generator_cls = load_generator('fec_results_generator.JsonGenerator')
       generator_cls(year=2012).congress()

    Args:
        path (str): Dotted path to the class, e.g. "package.module.ClassName".
            "package.module:ClassName" is also accepted.

    Returns:
        The generator class.

    Raises:
        GeneratorImportError if the module can't be imported or the class
        doesn't look like a results generator.

    """
    module_name, attr = _split_path(path)

    try:
        module = import_module(module_name)
    except ImportError as e:
        raise GeneratorImportError(path, e)

    try:
        generator_cls = getattr(module, attr)
    except AttributeError:
        raise GeneratorImportError(path, "module '{}' has no attribute "
            "'{}'".format(module_name, attr))

    if not callable(generator_cls):
        raise GeneratorImportError(path, "'{}' is not callable".format(attr))

    missing = [op for op in GENERATOR_OPERATIONS
               if not callable(getattr(generator_cls, op, None))]
    if missing:
        raise GeneratorImportError(path, "missing methods: {}".format(
            ", ".join(missing)))

    return generator_cls
