from __future__ import annotations


class SeedSourceUnavailable(FileNotFoundError):
    """The seed directory itself is missing."""


class MissingExistingSeries(FileNotFoundError):
    """No historical series file exists yet for a package."""


class SeriesFormatError(ValueError):
    """A stored series does not match the expected shape."""
