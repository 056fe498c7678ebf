"""PCHIP construction from samples, with estimated or explicit derivatives."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Sequence, Union

import torch
from torch import Tensor

from .._validate_grid import validate_grid
from ._pchip_slopes import pchip_slopes

if TYPE_CHECKING:
    from ._pchip import Interpolator

logger = logging.getLogger(__name__)

# Knot drift from the arithmetic grid, in units of eps * max|x|, below which
# the grid counts as uniform. Capped at a quarter step so that the arithmetic
# lookup is never off by more than one interval.
_UNIFORM_ULPS = 64


def pchip_fit(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
    dydx: Optional[Union[Tensor, Sequence[float]]] = None,
    extrapolate: bool = False,
) -> Interpolator:
    """
    Fit a PCHIP interpolant to data points.

    Parameters
    ----------
    x : Tensor or sequence of float
        Sample abscissas, shape (n_points,). Must be strictly increasing.
    y : Tensor or sequence of float
        Sample values, shape (n_points, *value_shape).
    dydx : Tensor or sequence of float, optional
        Derivatives at the samples, same shape as y. When omitted they
        are estimated with ``pchip_slopes``.
    extrapolate : bool
        Evaluate the boundary cubics outside [x[0], x[-1]] instead of
        raising DomainError. Default is False.

    Returns
    -------
    Interpolator
        Fitted interpolant. Its tensors are copies; later changes to the
        inputs do not affect it.

    Raises
    ------
    DimensionMismatchError
        If the lengths of x and y, or the shapes of y and dydx, disagree.
    ConstraintViolationError
        If x has fewer than 2 points or is not strictly increasing.

    Notes
    -----
    Non-tensor inputs and integer tensors are converted to float64. All
    inputs are promoted to a common floating dtype on the device of x.
    """
    x = _as_float_tensor(x)
    y = _as_float_tensor(y)
    if dydx is not None:
        dydx = _as_float_tensor(dydx)

    dtype = torch.promote_types(x.dtype, y.dtype)
    if dydx is not None:
        dtype = torch.promote_types(dtype, dydx.dtype)

    x = x.to(dtype=dtype)
    y = y.to(dtype=dtype, device=x.device)
    if dydx is not None:
        dydx = dydx.to(dtype=dtype, device=x.device)

    validate_grid(x, y, dydx)

    uniform = _is_uniform(x)

    if dydx is None:
        d = pchip_slopes(x, y)
        source = "estimated"
    else:
        d = dydx.clone()
        source = "explicit"

    logger.debug(
        "pchip_fit: %d points, dtype=%s, %s grid, %s derivatives, "
        "extrapolate=%s",
        x.shape[0],
        dtype,
        "uniform" if uniform else "irregular",
        source,
        extrapolate,
    )

    from ._pchip import Interpolator

    return Interpolator(
        xs=x.clone(),
        ys=y.clone(),
        ds=d,
        extrapolate=bool(extrapolate),
        uniform=uniform,
        batch_size=[],
    )


def _as_float_tensor(
    value: Union[Tensor, Sequence[float]],
) -> Tensor:
    if not isinstance(value, Tensor):
        return torch.as_tensor(value, dtype=torch.float64)
    if not value.is_floating_point():
        return value.to(torch.float64)
    return value


def _is_uniform(x: Tensor) -> bool:
    """Whether every knot lies on the arithmetic grid from x[0] to x[-1]."""
    n_segments = x.shape[0] - 1
    step = (x[-1] - x[0]) / n_segments
    k = torch.arange(n_segments + 1, dtype=x.dtype, device=x.device)
    drift = torch.max(torch.abs(x - (x[0] + k * step)))

    scale = torch.maximum(torch.abs(x[0]), torch.abs(x[-1]))
    tol = torch.minimum(
        _UNIFORM_ULPS * torch.finfo(x.dtype).eps * scale,
        step / 4,
    )

    return bool(drift <= tol)
