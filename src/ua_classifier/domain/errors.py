"""Error taxonomy for user-agent classification."""


class ClassificationError(Exception):
    """Base class for classification errors."""


class AdapterUnavailableError(ClassificationError):
    """A classifier library is missing or failed to initialize."""


class MalformedInputError(ClassificationError):
    """A user-agent string is empty or could not be parsed by a classifier."""


class InternalInconsistencyError(ClassificationError):
    """A classifier reported both a bot identity and a human-client identity."""
