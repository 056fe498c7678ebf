"""Monotonicity-preserving derivative estimation for PCHIP."""

import logging

import torch
from torch import Tensor

logger = logging.getLogger(__name__)


def pchip_slopes(x: Tensor, y: Tensor) -> Tensor:
    """
    Estimate the derivative of the interpolant at every sample point.

    Parameters
    ----------
    x : Tensor
        Sample abscissas, shape (n_points,). Must be strictly increasing
        (see ``validate_grid``).
    y : Tensor
        Sample values, shape (n_points, *value_shape).

    Returns
    -------
    d : Tensor
        Derivatives, same shape as y.

    Notes
    -----
    With secants delta[i] = (y[i+1] - y[i]) / h[i]:

    1. Two points: both derivatives equal the single secant.
    2. Interior points: zero where the adjacent secants differ in sign
       or either vanishes (local extremum), otherwise the weighted
       harmonic mean

           d = (wl + wr) / (wl / delta_l + wr / delta_r),
           wl = 2*h_l + h_r,  wr = h_l + 2*h_r

    3. End points: the one-sided three-point formula of ``_edge_slope``.

    References
    ----------
    Fritsch, F. N. and Carlson, R. E. (1980). "Monotone Piecewise Cubic
    Interpolation". SIAM Journal on Numerical Analysis. 17 (2): 238-246.
    """
    n = x.shape[0]
    value_shape = y.shape[1:]
    y_flat = y.reshape(n, -1)  # (n, n_values)

    h = (x[1:] - x[:-1]).unsqueeze(-1)  # (n-1, 1)
    delta = (y_flat[1:] - y_flat[:-1]) / h  # (n-1, n_values)

    if n == 2:
        d = delta.expand(2, -1).clone()
        return d.reshape(y.shape)

    delta_l = delta[:-1]
    delta_r = delta[1:]
    h_l = h[:-1]
    h_r = h[1:]

    flat = (
        (torch.sign(delta_l) != torch.sign(delta_r))
        | (delta_l == 0)
        | (delta_r == 0)
    )

    w_l = 2 * h_l + h_r
    w_r = h_l + 2 * h_r

    # Masked entries get a dummy secant of 1
    delta_l_safe = torch.where(flat, torch.ones_like(delta_l), delta_l)
    delta_r_safe = torch.where(flat, torch.ones_like(delta_r), delta_r)
    harmonic = (w_l + w_r) / (w_l / delta_l_safe + w_r / delta_r_safe)

    interior = torch.where(flat, torch.zeros_like(harmonic), harmonic)

    left = _edge_slope(h[0], h[1], delta[0], delta[1])
    right = _edge_slope(h[-1], h[-2], delta[-1], delta[-2])

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "pchip_slopes: %d points, %d flattened extrema",
            n,
            int(flat.sum()),
        )

    d = torch.cat([left.unsqueeze(0), interior, right.unsqueeze(0)], dim=0)

    return d.reshape(n, *value_shape)


def _edge_slope(
    h1: Tensor, h2: Tensor, delta1: Tensor, delta2: Tensor
) -> Tensor:
    """
    Shape-preserving derivative at an end point.

    Parameters
    ----------
    h1 : Tensor
        Width of the interval adjacent to the end point
    h2 : Tensor
        Width of the next interval
    delta1 : Tensor
        Secant of the adjacent interval
    delta2 : Tensor
        Secant of the next interval

    Returns
    -------
    d : Tensor
        End-point derivative
    """
    d = ((2 * h1 + h2) * delta1 - h2 * delta2) / (h1 + h2)

    sign_d = torch.sign(d)
    sign_1 = torch.sign(delta1)
    sign_2 = torch.sign(delta2)

    # Derivative pointing against the adjacent secant: flatten
    wrong_sign = sign_d != sign_1

    # Secants change sign: at most three times the adjacent secant
    too_steep = (
        ~wrong_sign
        & (sign_1 != sign_2)
        & (torch.abs(d) > torch.abs(3 * delta1))
    )

    d = torch.where(wrong_sign, torch.zeros_like(d), d)
    d = torch.where(too_steep, 3 * delta1, d)

    return d
