"""NumPy rendition of the Padé kernels.

These functions accept Python scalars, NumPy scalars and arrays of any shape,
and evaluate the approximant in the input's floating-point type. They return
new values and never mutate their argument. They serve as the ``numpy``
backend, as the fallback for generic mutable sequences, and as the reference
the compiled kernels are tested against.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Callable

import numpy as np

from padepy.functions.pade import make_kernel

SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


def resolve_dtype(dtype) -> np.dtype:
    """Map an input dtype to the float type the kernels compute in.

    Single and double precision are kept as they are; booleans and integers
    are promoted to double precision.

    Raises
    ------
    TypeError
        For any other dtype (half precision, extended precision, complex, ...).
    """

    dtype = np.dtype(dtype)
    if dtype in SUPPORTED_DTYPES:
        return dtype
    if dtype.kind in "biu":
        return np.dtype(np.float64)
    raise TypeError(
        f"Unsupported dtype {dtype}; the kernels support float32 and float64"
    )


def as_float(x):
    """Convert ``x`` to a NumPy scalar or array of a supported float type."""

    arr = np.asarray(x)
    arr = arr.astype(resolve_dtype(arr.dtype), copy=False)
    return arr[()] if arr.ndim == 0 else arr


@lru_cache(maxsize=None)
def _kernel(name: str, dtype: np.dtype) -> Callable:
    return make_kernel(name, dtype)


def evaluate(name: str, x):
    """Evaluate kernel ``name`` at ``x`` (scalar or array).

    Parameters
    ----------
    name:
        Canonical kernel name.
    x:
        Scalar or array-like input.

    Returns
    -------
    numpy.floating or numpy.ndarray
        Approximation with the same float type (and shape) as ``x``.
    """

    x = as_float(x)
    kernel = _kernel(name, x.dtype)
    # Out-of-domain and non-finite inputs are not errors.
    with np.errstate(all="ignore"):
        return kernel(x)


def apply_inplace(name: str, values, count: int) -> None:
    """Replace ``values[i]`` with ``f(values[i])`` for ``i < count``.

    Works with NumPy arrays and with any mutable sequence of numbers. Plain
    sequences are evaluated element by element in double precision.
    """

    if count == 0:
        return
    if isinstance(values, np.ndarray):
        flat = values.reshape(-1)
        flat[:count] = evaluate(name, flat[:count])
        return

    kernel = _kernel(name, np.dtype(np.float64))
    with np.errstate(all="ignore"):
        for i in range(count):
            values[i] = float(kernel(np.float64(values[i])))
