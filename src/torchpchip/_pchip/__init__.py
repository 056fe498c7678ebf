"""PCHIP (Piecewise Cubic Hermite Interpolating Polynomial) module."""

from ._pchip import Interpolator, pchip
from ._pchip_derivative import pchip_derivative
from ._pchip_evaluate import pchip_evaluate
from ._pchip_fit import pchip_fit
from ._pchip_integral import pchip_integral
from ._pchip_locate import pchip_locate
from ._pchip_slopes import pchip_slopes

__all__ = [
    "Interpolator",
    "pchip",
    "pchip_derivative",
    "pchip_evaluate",
    "pchip_fit",
    "pchip_integral",
    "pchip_locate",
    "pchip_slopes",
]
