class PCHIPError(Exception):
    """Base exception for PCHIP interpolation."""

    pass
