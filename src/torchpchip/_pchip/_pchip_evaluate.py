"""PCHIP evaluation using the cubic Hermite basis."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from ._pchip_locate import pchip_locate

if TYPE_CHECKING:
    from ._pchip import Interpolator


def pchip_evaluate(
    spline: Interpolator,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Evaluate a PCHIP interpolant at query points.

    On the interval [x1, x2] with h = x2 - x1, end values y1, y2 and end
    derivatives d1, d2, the interpolant is

        p(t) = y1*phi((x2-t)/h) + y2*phi((t-x1)/h)
               - d1*h*psi((x2-t)/h) + d2*h*psi((t-x1)/h)

    with phi(s) = 3s^2 - 2s^3 and psi(s) = s^3 - s^2.

    Parameters
    ----------
    spline : Interpolator
        Fitted interpolant from pchip_fit
    t : float or Tensor
        Query points, shape (*query_shape) or scalar

    Returns
    -------
    y : Tensor
        Interpolated values, shape (*query_shape, *value_shape)

    Raises
    ------
    DomainError
        If any query point is outside [xs[0], xs[-1]] and
        spline.extrapolate is False
    """
    t = _as_query(spline, t)
    index = pchip_locate(spline, t)

    y = _hermite(spline, t.reshape(-1), index.reshape(-1))

    # (*query_shape, *value_shape); a scalar query gives a value_shape result
    return y.reshape(t.shape + spline.ys.shape[1:])


def _as_query(spline: Interpolator, t: Union[float, Tensor]) -> Tensor:
    xs = spline.xs
    if isinstance(t, Tensor):
        return t.to(dtype=xs.dtype, device=xs.device)
    return torch.as_tensor(t, dtype=xs.dtype, device=xs.device)


def _hermite(spline: Interpolator, t: Tensor, index: Tensor) -> Tensor:
    """Evaluate the Hermite cubics of the given intervals at flat queries t."""
    xs = spline.xs
    ys = spline.ys
    ds = spline.ds

    x1 = xs[index]
    x2 = xs[index + 1]
    h = x2 - x1

    y1 = ys[index]
    y2 = ys[index + 1]
    d1 = ds[index]
    d2 = ds[index + 1]

    s = (x2 - t) / h  # weight toward the left end point
    u = (t - x1) / h  # weight toward the right end point

    # Broadcast over trailing value dimensions
    if ys.dim() > 1:
        expand = (-1,) + (1,) * (ys.dim() - 1)
        s = s.view(expand)
        u = u.view(expand)
        h = h.view(expand)

    return y1 * _phi(s) + y2 * _phi(u) - d1 * h * _psi(s) + d2 * h * _psi(u)


def _phi(s: Tensor) -> Tensor:
    return s * s * (3 - 2 * s)


def _psi(s: Tensor) -> Tensor:
    return s * s * (s - 1)
