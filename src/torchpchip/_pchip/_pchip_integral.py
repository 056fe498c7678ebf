"""PCHIP definite integral computation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from ._pchip_evaluate import _as_query, _hermite
from ._pchip_locate import pchip_locate

if TYPE_CHECKING:
    from ._pchip import Interpolator


def pchip_integral(
    spline: Interpolator,
    a: Union[float, Tensor],
    b: Union[float, Tensor],
) -> Tensor:
    """
    Compute the definite integral of a PCHIP interpolant from a to b.

    Parameters
    ----------
    spline : Interpolator
        Fitted interpolant from pchip_fit
    a : float or Tensor
        Lower bound of integration (scalar)
    b : float or Tensor
        Upper bound of integration (scalar)

    Returns
    -------
    integral : Tensor
        Definite integral, shape (*value_shape)

    Raises
    ------
    DomainError
        If a or b is outside [xs[0], xs[-1]] and spline.extrapolate is
        False
    ValueError
        If a or b is not a scalar

    Notes
    -----
    Each interval, or part of one, is integrated with Simpson's rule

        integral[x1, x2] = (x2 - x1) / 6 * (p(x1) + 4*p((x1+x2)/2) + p(x2))

    which is exact for cubics, hence exact for the interpolant. If [a, b]
    spans several intervals the two partial end pieces and the whole
    intervals between them are summed. Swapping the bounds flips the
    sign.
    """
    a = _as_query(spline, a)
    b = _as_query(spline, b)

    if a.dim() != 0 or b.dim() != 0:
        raise ValueError(
            f"Integration bounds must be scalars, got shapes "
            f"{tuple(a.shape)} and {tuple(b.shape)}"
        )

    if b < a:
        return -pchip_integral(spline, b, a)

    i = int(pchip_locate(spline, a))
    j = int(pchip_locate(spline, b))

    if i == j:
        return _integrate_segment(spline, i, a, b)

    xs = spline.xs

    total = _integrate_segment(spline, i, a, xs[i + 1]) + _integrate_segment(
        spline, j, xs[j], b
    )

    if j - i > 1:
        total = total + _integrate_whole_segments(spline, i + 1, j)

    return total


def _integrate_segment(
    spline: Interpolator, i: int, x1: Tensor, x2: Tensor
) -> Tensor:
    """Simpson's rule on [x1, x2] using the cubic of interval i."""
    points = torch.stack([x1, (x1 + x2) / 2, x2])
    index = torch.full((3,), i, dtype=torch.long, device=points.device)

    p = _hermite(spline, points, index)

    return (x2 - x1) / 6 * (p[0] + 4 * p[1] + p[2])


def _integrate_whole_segments(
    spline: Interpolator, start: int, stop: int
) -> Tensor:
    """Sum of the exact integrals over intervals start, ..., stop - 1."""
    xs = spline.xs
    ys = spline.ys

    index = torch.arange(start, stop, device=xs.device)
    midpoints = (xs[index] + xs[index + 1]) / 2
    p_mid = _hermite(spline, midpoints, index)

    h = xs[index + 1] - xs[index]
    if ys.dim() > 1:
        h = h.view((-1,) + (1,) * (ys.dim() - 1))

    return torch.sum(h / 6 * (ys[index] + 4 * p_mid + ys[index + 1]), dim=0)
