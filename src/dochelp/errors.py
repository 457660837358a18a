"""Exception hierarchy for dochelp.

Parsing and table layout are permissive and never raise for content.
Only lookups and misconfigured widgets fail.
"""


class DochelpError(Exception):
    """Base exception for dochelp failures."""


class NotFound(LookupError, DochelpError):
    """A command or sub-command has no documentation source."""


class InvalidConfiguration(ValueError, DochelpError):
    """Table configuration is invalid or a widget has no output sink."""
