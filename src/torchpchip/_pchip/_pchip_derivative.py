"""First derivative of a PCHIP interpolant."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from ._pchip_evaluate import _as_query
from ._pchip_locate import pchip_locate

if TYPE_CHECKING:
    from ._pchip import Interpolator


def pchip_derivative(
    spline: Interpolator,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate the first derivative of a PCHIP interpolant.

    Parameters
    ----------
    spline : Interpolator
        Fitted interpolant from pchip_fit
    t : float or Tensor
        Query points, shape (*query_shape) or scalar

    Returns
    -------
    dydt : Tensor
        Derivative values, shape (*query_shape, *value_shape)

    Raises
    ------
    DomainError
        If any query point is outside [xs[0], xs[-1]] and
        spline.extrapolate is False

    Notes
    -----
    Differentiating the Hermite form with s = (x2-t)/h, u = (t-x1)/h:

        p'(t) = (y2*phi'(u) - y1*phi'(s)) / h + d1*psi'(s) + d2*psi'(u)

    where phi'(s) = 6s(1-s) and psi'(s) = 3s^2 - 2s. At the knots this
    reproduces spline.ds exactly.
    """
    t = _as_query(spline, t)
    index = pchip_locate(spline, t).reshape(-1)
    t_flat = t.reshape(-1)

    xs = spline.xs
    ys = spline.ys
    ds = spline.ds

    x1 = xs[index]
    x2 = xs[index + 1]
    h = x2 - x1

    s = (x2 - t_flat) / h
    u = (t_flat - x1) / h

    if ys.dim() > 1:
        expand = (-1,) + (1,) * (ys.dim() - 1)
        s = s.view(expand)
        u = u.view(expand)
        h = h.view(expand)

    dphi_s = 6 * s * (1 - s)
    dphi_u = 6 * u * (1 - u)
    dpsi_s = s * (3 * s - 2)
    dpsi_u = u * (3 * u - 2)

    dydt = (
        (ys[index + 1] * dphi_u - ys[index] * dphi_s) / h
        + ds[index] * dpsi_s
        + ds[index + 1] * dpsi_u
    )

    return dydt.reshape(t.shape + ys.shape[1:])
