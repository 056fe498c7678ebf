from ._pchip_error import PCHIPError


class ConstraintViolationError(PCHIPError, ValueError):
    """Raised for invalid sample grids (too few points, non-increasing xs)."""

    pass
