"""Custom exception hierarchy for the kindred package."""


class KindredException(Exception):
    """Base exception for Kindred."""


class ConfigValidationError(KindredException):
    """Exception raised when a config is invalid."""


class InvalidTypeError(KindredException):
    """Exception raised when a value's kind can never be stored in a collection."""


class InvalidKindError(KindredException):
    """Exception raised when a value's kind differs from a collection's locked kind."""


class MismatchedKindError(InvalidKindError):
    """Exception raised when collections combined in one operation hold different kinds."""


class EmptyCollectionError(KindredException):
    """Exception raised when reading or removing from an empty collection."""


class InvalidCountError(KindredException):
    """Exception raised when a bulk count is negative or exceeds the collection size."""
