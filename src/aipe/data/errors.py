"""Errors raised while reading definitions and snapshot files."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """A definition, snapshot or config file could not be read, parsed or written."""


class DataValidationError(DataError):
    """A class, race, template or snapshot payload has the wrong shape or values."""


class DataReferenceError(DataError):
    """A template names a class or race that is not defined."""
