"""PCHIP (Piecewise Cubic Hermite Interpolating Polynomial) interpolator."""

from typing import Callable, Optional, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._pchip_evaluate import pchip_evaluate
from ._pchip_fit import pchip_fit


@tensorclass(nocast=True)
class Interpolator:
    """Piecewise Cubic Hermite Interpolating Polynomial.

    The interpolant passes through every sample, is monotone wherever the
    data is monotone and has no overshoot near local extrema. On each
    interval it is the cubic Hermite polynomial determined by the two
    end values and the two end derivatives.

    Instances are created by ``pchip_fit`` and never modified afterwards.
    Calling an instance evaluates it (see ``pchip_evaluate``).

    Attributes
    ----------
    xs : Tensor
        Sample abscissas, shape (n_points,). Strictly increasing.
    ys : Tensor
        Sample values, shape (n_points, *value_shape).
    ds : Tensor
        Derivatives at the samples, shape (n_points, *value_shape).
    extrapolate : bool
        If True, queries outside [xs[0], xs[-1]] are evaluated with the
        boundary interval's cubic instead of raising DomainError.
    uniform : bool
        Whether xs is uniformly spaced, which enables direct interval
        lookup instead of binary search.
    """

    xs: Tensor
    ys: Tensor
    ds: Tensor
    extrapolate: bool
    uniform: bool

    def __call__(self, t: Union[float, Tensor]) -> Tensor:
        return pchip_evaluate(self, t)


def pchip(
    x: torch.Tensor,
    y: torch.Tensor,
    dydx: Optional[torch.Tensor] = None,
    extrapolate: bool = False,
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a PCHIP interpolator from data.

    Parameters
    ----------
    x : Tensor
        Data x-coordinates. Must be strictly monotonically increasing.
    y : Tensor
        Data y-values, shape (n_points, *value_shape).
    dydx : Tensor, optional
        Derivatives at the data points. Estimated from the data when
        omitted.
    extrapolate : bool, optional
        Evaluate the boundary cubics outside the data range instead of
        raising DomainError. Default is False.

    Returns
    -------
    interpolant : Callable[[Tensor], Tensor]
        Function that evaluates the interpolant at given points.

    Examples
    --------
    >>> import torch
    >>> x = torch.linspace(0, 1, 10)
    >>> y = torch.sin(x * 2 * torch.pi)
    >>> f = pchip(x, y)
    >>> f(torch.tensor([0.5]))  # Evaluate at x=0.5
    """
    fitted = pchip_fit(x, y, dydx, extrapolate=extrapolate)
    return lambda t: pchip_evaluate(fitted, t)
