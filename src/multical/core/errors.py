class MulticalError(Exception):
    """Base error."""

class ValidationError(MulticalError, ValueError):
    """Raised when calendar components are out of range for their calendar."""

class ParseError(MulticalError, ValueError):
    """Raised when a string does not match the template it is parsed with."""
