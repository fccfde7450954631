"""multiheaders exception hierarchy.

Every error raised by the package derives from ``MultiHeadersError`` so
callers can catch one type.
"""


class MultiHeadersError(Exception):
    """Base for all multiheaders-specific errors."""


class ConfigurationError(MultiHeadersError):
    """Raised when a ``HeadersConfig`` is invalid."""


class HeadersNotImplementedError(MultiHeadersError, NotImplementedError):
    """A ``Headers`` capability that is deliberately left unimplemented.

    Also a ``NotImplementedError`` so generic handlers still catch it.
    """
