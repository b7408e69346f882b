"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a snapshot cannot be created."""


class ProgressionError(Exception):
    """Raised when a progression operation receives an unusable snapshot."""
