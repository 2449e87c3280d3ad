class QKDError(ValueError):
    """Base class for contract violations inside the key distribution core."""


class FormatError(QKDError):
    """A bit string contained something other than 0, 1 or whitespace."""


class InvariantError(QKDError):
    """Internal components were handed inconsistent data."""
