from ._pchip_error import PCHIPError


class DimensionMismatchError(PCHIPError, ValueError):
    """Raised when sample arrays have incompatible lengths or shapes."""

    pass
