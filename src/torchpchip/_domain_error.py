from ._pchip_error import PCHIPError


class DomainError(PCHIPError, ValueError):
    """Raised when a query lies outside the interpolation range.

    Attributes
    ----------
    value : float
        The offending query abscissa.
    direction : str
        ``"below"`` or ``"above"`` the sample range.
    """

    def __init__(self, value: float, direction: str):
        self.value = value
        self.direction = direction
        super().__init__(
            f"{direction.capitalize()} interpolation range: {value}"
        )
