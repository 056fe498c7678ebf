"""Structural validation of PCHIP sample grids."""

from typing import Optional

import torch
from torch import Tensor

from ._constraint_violation_error import ConstraintViolationError
from ._dimension_mismatch_error import DimensionMismatchError


def validate_grid(
    x: Tensor,
    y: Tensor,
    dydx: Optional[Tensor] = None,
) -> None:
    """
    Check that sample arrays describe a valid interpolation grid.

    Parameters
    ----------
    x : Tensor
        Sample abscissas, shape (n_points,).
    y : Tensor
        Sample values, shape (n_points, *value_shape).
    dydx : Tensor, optional
        Derivatives at the samples, same shape as y.

    Raises
    ------
    DimensionMismatchError
        If x is not one-dimensional, or the leading dimension of y (or
        the shape of dydx) disagrees with x.
    ConstraintViolationError
        If there are fewer than 2 points or x is not strictly increasing.
    """
    if x.dim() != 1:
        raise DimensionMismatchError(
            f"xs must be one-dimensional, got shape {tuple(x.shape)}"
        )

    n = x.shape[0]

    if n < 2:
        raise ConstraintViolationError(f"Need at least 2 points, got {n}")

    if y.dim() == 0 or y.shape[0] != n:
        raise DimensionMismatchError(
            f"xs and ys must have the same length, got {n} and "
            f"{y.shape[0] if y.dim() > 0 else 0}"
        )

    if dydx is not None and dydx.shape != y.shape:
        raise DimensionMismatchError(
            f"ys and ds must have the same shape, got {tuple(y.shape)} "
            f"and {tuple(dydx.shape)}"
        )

    # NaN fails the comparison as well
    if not torch.all(x[1:] > x[:-1]):
        raise ConstraintViolationError("xs must be strictly increasing")
