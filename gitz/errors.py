"""
errors — Exception types raised by gitz.

Everything derives from GitzError so cli.main() has a single place to turn
a failure into a message and a non-zero exit status.
"""


class GitzError(Exception):
    """Base class for fatal, user-facing errors."""


class ConfigError(GitzError):
    """The credential profile could not be read, written or completed."""


class MissingInputError(GitzError):
    """A required flag, positional or environment value is absent."""


class ApiError(GitzError):
    """The HTTP request failed or the response body was not JSON."""


class ResponseShapeError(ApiError):
    """The response decoded as JSON but did not have the expected fields."""
