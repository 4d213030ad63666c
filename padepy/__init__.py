from .approx import (
    buffer_approx,
    cos,
    cos_inplace,
    cosh,
    cosh_inplace,
    exp,
    exp_inplace,
    log1p,
    log1p_inplace,
    scalar_approx,
    sin,
    sin_inplace,
    sinh,
    sinh_inplace,
    tan,
    tan_inplace,
    tanh,
    tanh_inplace,
)
from .backends import get_backend
from .functions.coefficients import DOMAINS, KERNEL_NAMES

__version__ = "0.1.0"
