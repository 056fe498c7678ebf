"""Interval lookup for PCHIP query points."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from .._domain_error import DomainError

if TYPE_CHECKING:
    from ._pchip import Interpolator


def pchip_locate(
    spline: Interpolator,
    t: Union[float, Tensor],
) -> Tensor:
    """
    Find the interval of the interpolant that owns each query point.

    Parameters
    ----------
    spline : Interpolator
        Fitted interpolant from pchip_fit
    t : float or Tensor
        Query points, any shape

    Returns
    -------
    index : Tensor
        Interval indices (int64), same shape as t. Index i denotes
        [xs[i], xs[i+1]] and lies in [0, n_points - 2].

    Raises
    ------
    DomainError
        If any query point is outside [xs[0], xs[-1]] and
        spline.extrapolate is False.

    Notes
    -----
    A query equal to an interior knot xs[i] belongs to interval i - 1; the
    right end point xs[-1] belongs to the last interval. With extrapolation
    enabled, queries below (above) the range map to the first (last)
    interval.

    Uniform grids are located arithmetically, other grids by binary
    search. Both give the same index for every query.
    """
    xs = spline.xs
    n_segments = xs.shape[0] - 1

    t = torch.as_tensor(t, dtype=xs.dtype, device=xs.device)
    query_shape = t.shape
    t_flat = t.reshape(-1)

    if not spline.extrapolate:
        below = t_flat < xs[0]
        if torch.any(below):
            raise DomainError(t_flat[below][0].item(), "below")

        above = t_flat > xs[-1]
        if torch.any(above):
            raise DomainError(t_flat[above][0].item(), "above")

    with torch.no_grad():
        if spline.uniform:
            index = _locate_uniform(xs, t_flat.detach(), n_segments)
        else:
            index = torch.searchsorted(xs.detach(), t_flat.detach()) - 1
            index = torch.clamp(index, 0, n_segments - 1)

    return index.reshape(query_shape)


def _locate_uniform(xs: Tensor, t: Tensor, n_segments: int) -> Tensor:
    step = (xs[-1] - xs[0]) / n_segments

    # Clamp before the integer cast so far-away queries cannot overflow
    position = torch.clamp((t - xs[0]) / step, 0, n_segments)
    index = torch.ceil(position).long() - 1
    index = torch.clamp(index, 0, n_segments - 1)

    # Rounding in the division can land one interval off near a knot
    index = torch.where((index > 0) & (t <= xs[index]), index - 1, index)
    index = torch.where(
        (index < n_segments - 1) & (t > xs[index + 1]), index + 1, index
    )

    return index
