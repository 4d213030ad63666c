"""Kernel bodies of the Padé approximants.

Each ``make_*`` factory receives the kernel's coefficients already cast to the
target floating-point type and returns a plain Python function of one
argument. The returned closures are the single source of the arithmetic: the
NumPy rendition calls them directly, while the Numba renditions compile them
with the coefficients frozen as typed constants (one specialization per float
type).

Polynomials are nested Horner-style from the highest-degree coefficient
inward, and ``x2`` is evaluated once per call.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from padepy.functions.coefficients import COEFFICIENTS


def make_cosh(a, b, c, d, e, f, g):
    def cosh(x):
        x2 = x * x
        numerator = -(a + x2 * (b + x2 * (c + d * x2)))
        denominator = -a + x2 * (e + x2 * (-f + g * x2))
        return numerator / denominator

    return cosh


def make_sinh(a, b, c, d, e, f, g):
    def sinh(x):
        x2 = x * x
        numerator = -x * (a + x2 * (b + x2 * (c + x2 * d)))
        denominator = -a + x2 * (e + x2 * (-f + x2 * g))
        return numerator / denominator

    return sinh


def make_tanh(a, b, c, d, e, f):
    def tanh(x):
        x2 = x * x
        numerator = x * (a + x2 * (b + x2 * (c + x2)))
        denominator = a + x2 * (d + x2 * (e + f * x2))
        return numerator / denominator

    return tanh


def make_cos(a, b, c, d, e, f, g):
    def cos(x):
        x2 = x * x
        numerator = -(-a + x2 * (b + x2 * (-c + d * x2)))
        denominator = a + x2 * (e + x2 * (f + x2 * g))
        return numerator / denominator

    return cos


def make_sin(a, b, c, d, e, f, g):
    def sin(x):
        x2 = x * x
        numerator = -x * (-a + x2 * (b + x2 * (-c + x2 * d)))
        denominator = a + x2 * (e + x2 * (f + x2 * g))
        return numerator / denominator

    return sin


def make_tan(a, b, c, d, e, f):
    def tan(x):
        x2 = x * x
        numerator = x * (-a + x2 * (b + x2 * (-c + x2)))
        denominator = -a + x2 * (d + x2 * (-e + f * x2))
        return numerator / denominator

    return tan


def make_exp(a, b, c, d):
    def exp(x):
        numerator = a + x * (b + x * (c + x * (d + x)))
        denominator = a + x * (-b + x * (c + x * (-d + x)))
        return numerator / denominator

    return exp


def make_log1p(a, b, c, d, e, f, g, h, i, j):
    def log1p(x):
        numerator = x * (a + x * (b + x * (c + x * (d + x * e))))
        denominator = a + x * (f + x * (g + x * (h + x * (i + j * x))))
        return numerator / denominator

    return log1p


_FACTORIES: dict[str, Callable[..., Callable]] = {
    "cosh": make_cosh,
    "sinh": make_sinh,
    "tanh": make_tanh,
    "cos": make_cos,
    "sin": make_sin,
    "tan": make_tan,
    "exp": make_exp,
    "log1p": make_log1p,
}


def typed_coefficients(name: str, dtype: np.dtype) -> tuple:
    """Return the coefficients of kernel ``name`` as scalars of ``dtype``."""

    float_type = np.dtype(dtype).type
    return tuple(float_type(value) for value in COEFFICIENTS[name])


def make_kernel(name: str, dtype: np.dtype) -> Callable:
    """Build the scalar kernel ``name`` specialized for ``dtype``.

    Parameters
    ----------
    name:
        Canonical kernel name (see :data:`padepy.functions.coefficients.KERNEL_NAMES`).
    dtype:
        ``numpy.float32`` or ``numpy.float64``. Every constant the kernel
        touches is a scalar of this type, so arithmetic on inputs of the same
        type never widens or narrows.

    Returns
    -------
    Callable
        A pure function ``f(x) -> y``.
    """

    return _FACTORIES[name](*typed_coefficients(name, dtype))
