"""Exception hierarchy for dataset loading and validation."""


class DatasetError(Exception):
    """Base class for every fatal dataset failure."""


class DatasetIOError(DatasetError):
    """A dataset file is missing or cannot be read."""


class FormatError(DatasetError):
    """A dataset file has a malformed or truncated header, dimension or body."""


class ConsistencyError(DatasetError):
    """Paired datasets disagree (item counts, item shape) or are unusable."""
