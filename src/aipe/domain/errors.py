"""Domain-layer exceptions."""


class InvalidStatInputError(ValueError):
    """Raised when a formula receives a negative, non-integer or non-finite input."""
