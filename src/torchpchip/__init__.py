"""torchpchip: shape-preserving piecewise cubic interpolation for PyTorch.

Convenience Functions
---------------------
pchip
    Create a PCHIP interpolator from data (fit + callable).

Interpolation
-------------
pchip_fit
    Fit a PCHIP interpolant, estimating or taking derivatives.
pchip_evaluate
    Evaluate the interpolant at query points.
pchip_derivative
    Evaluate the first derivative of the interpolant.
pchip_integral
    Compute the definite integral of the interpolant.

Building Blocks
---------------
validate_grid
    Check sample arrays before fitting.
pchip_slopes
    Monotonicity-preserving derivative estimates.
pchip_locate
    Interval lookup for query points.

Data Types
----------
Interpolator
    Piecewise cubic Hermite interpolant.

Exceptions
----------
PCHIPError
    Base exception for PCHIP operations.
DimensionMismatchError
    Sample arrays with incompatible lengths.
ConstraintViolationError
    Too few samples or non-increasing abscissas.
DomainError
    Query point outside the interpolation range.
"""

import logging

from ._constraint_violation_error import ConstraintViolationError
from ._dimension_mismatch_error import DimensionMismatchError
from ._domain_error import DomainError
from ._pchip import (
    Interpolator,
    pchip,
    pchip_derivative,
    pchip_evaluate,
    pchip_fit,
    pchip_integral,
    pchip_locate,
    pchip_slopes,
)
from ._pchip_error import PCHIPError
from ._validate_grid import validate_grid

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConstraintViolationError",
    "DimensionMismatchError",
    "DomainError",
    "Interpolator",
    "PCHIPError",
    "pchip",
    "pchip_derivative",
    "pchip_evaluate",
    "pchip_fit",
    "pchip_integral",
    "pchip_locate",
    "pchip_slopes",
    "validate_grid",
]

__version__ = "0.1.0"
