"""
Refinance exception hierarchy.

All refinance exceptions inherit from RefinanceError, making it easy for
consumers to catch library-level errors while still distinguishing specific
failure modes.
"""


class RefinanceError(Exception):
    """Base exception class for all refinance errors."""


class ConfigurationError(RefinanceError):
    """Raised for configuration errors (missing keys, invalid values)."""


class FileIOError(RefinanceError):
    """Raised for file I/O errors."""


class SnapshotError(FileIOError):
    """Raised when the loan snapshot cannot be written or removed."""
