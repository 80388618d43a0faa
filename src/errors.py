class SellerError(Exception):
    """Base class for seller record errors."""


class InvalidInput(SellerError, ValueError):
    """A value has the wrong type or format."""


class OutOfRange(SellerError, ValueError):
    """A value has the right type but violates a bound."""


class InvalidState(SellerError, RuntimeError):
    """An operation does not fit the record's lifecycle state."""


class StorageError(SellerError):
    """The backing store reported a failure."""
