class ConfigurationError(Exception):
    """
    Raised when settings or command-line options can't be used to run the
    results generator.
    """
    pass

class GeneratorImportError(ConfigurationError):
    """
    Raised when a results generator can't be resolved from its dotted path.
    """
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super(GeneratorImportError, self).__init__(path, reason)

    def __str__(self):
        return "Unable to load results generator '{}': {}".format(self.path,
            self.reason)

class InvalidYearError(ConfigurationError, ValueError):
    "Raised for years that can't have federal election results"

class SettingsFileError(ConfigurationError):
    """
    Raised when the settings file named by FECRESULTS_SETTINGS can't be read.
    """
    def __init__(self, filename, reason):
        self.filename = filename
        self.reason = reason
        super(SettingsFileError, self).__init__(filename, reason)

    def __str__(self):
        return "Unable to read settings file '{}': {}".format(self.filename,
            self.reason)
