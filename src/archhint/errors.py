"""
Exception types raised inside archhint.

None of these cross the completion engine boundary; the engine logs them and
returns no suggestions.
"""


class ArchHintError(Exception):
    """Base class for archhint errors."""


class SchemaLoadError(ArchHintError):
    """The schema file is missing, unreadable or malformed."""
