"""Crumb exception hierarchy.

Header encoding and decoding never fail on malformed *data*; these
types cover caller mistakes such as an unknown expiration policy.
"""


class CrumbError(Exception):
    """Base for all crumb-specific errors."""


class ConfigurationError(CrumbError):
    """Raised when cookie settings are structurally invalid.

    Typically an ``eol`` value that is not one of ``ValidUntil``,
    ``ValidFor`` or ``ValidForSession``.
    """
