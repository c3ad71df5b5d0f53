"""Manage configuration for the results generator driver"""

import os
import types
from importlib import import_module

from fecresults.exceptions import SettingsFileError

class Settings(object):
    """
    Encapsulate settings and provide utilities for adding settings from
    elsewhere.

    Later calls override values set by earlier ones, so defaults can be
    loaded first and a local settings file layered on top.

    """
    def from_object(self, obj):
        """Copy uppercase attributes from another object to this one"""
        for key in dir(obj):
            if key.isupper():
                val = getattr(obj, key)
                setattr(self, key, val)

        return self

    def from_module_name(self, name):
        """
        Load settings attributes from a Python module

        Args:
            name (str): The name of a Python module.

        """
        module = import_module(name)
        return self.from_object(module)

    def from_file(self, filename):
        """
        Load settings from a Python file

        Args:
            filename (str): Absolute path to a Python file where settings
                variables are defined.
        """
        config_mod = types.ModuleType('config')
        config_mod.__file__ = filename
        with open(filename) as f:
            exec(compile(f.read(), filename, 'exec'), config_mod.__dict__)
        return self.from_object(config_mod)

    def from_envvar(self, name):
        """
        Load settings from a Python file whose filename is in an environment
        variable

        Args:
            name (str): Environment variable containing the absolute path to
                a Python file where settings variables are defined.

        Raises:
            KeyError if the environment variable isn't set.
        """
        return self.from_file(os.environ[name])


SETTINGS_ENVVAR = 'FECRESULTS_SETTINGS'

def configure(settings, envvar=SETTINGS_ENVVAR):
    """
    Load default settings, then any settings file named by ``envvar``

    Raises:
        SettingsFileError if the settings file can't be read.
    """
    settings.from_module_name('fecresults.default_settings')

    try:
        settings.from_envvar(envvar)
    except KeyError:
        # Defaults are enough to run against the standard generator
        pass
    except (IOError, OSError) as e:
        raise SettingsFileError(os.environ[envvar], e)

    return settings


settings = Settings()
settings_error = None
"""Error raised while reading the settings file, reported by the CLI"""

try:
    configure(settings)
except SettingsFileError as e:
    settings_error = e
