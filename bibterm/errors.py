"""Exception types for bibterm"""


class BibtermError(Exception):
    """Base class for all bibterm errors"""


class UsageError(BibtermError):
    """Too few arguments were supplied to build a lookup key"""


class ArgumentParseError(BibtermError):
    """A token that should be a number (chapter, verse, range bound) was not"""

    def __init__(self, message: str, token: str = None):
        super().__init__(message)
        self.token = token


class DatasetLoadError(BibtermError):
    """The verse collection could not be loaded"""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class DatasetReadError(DatasetLoadError):
    """Dataset file is missing or unreadable"""


class DatasetFormatError(DatasetLoadError):
    """Dataset file is not a JSON array of verse objects"""


class ConfigError(BibtermError):
    """Configuration file could not be read"""
