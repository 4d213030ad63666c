"""CPU kernels compiled with Numba.

Kernels are monomorphized: for every float type a separate specialization is
compiled from the bodies in :mod:`padepy.functions.pade`, with the
coefficients frozen as constants of that type. Compilation happens on first
use and is cached per ``(kernel, dtype)``.

The kernels are compiled without ``fastmath`` so that the in-place buffer
kernels produce bit-for-bit the same values as the scalar kernels, and with
NumPy's error model: a zero denominator yields an infinity or NaN instead of
raising ZeroDivisionError, as the NumPy rendition does.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable

import numba as nb
import numpy as np
from numba import prange

from padepy.functions.pade import make_kernel

log = logging.getLogger(__name__)

_NUMBA_TYPES = {
    np.dtype(np.float32): nb.float32,
    np.dtype(np.float64): nb.float64,
}


def numba_type(dtype) -> nb.types.Float:
    """Return the Numba scalar type matching a supported NumPy dtype."""

    return _NUMBA_TYPES[np.dtype(dtype)]


@lru_cache(maxsize=None)
def scalar_kernel(name: str, dtype: np.dtype) -> Callable:
    """Compile the scalar kernel ``name`` for ``dtype``.

    Parameters
    ----------
    name:
        Canonical kernel name.
    dtype:
        ``numpy.float32`` or ``numpy.float64``.

    Returns
    -------
    numba.core.registry.CPUDispatcher
        Dispatcher with the single signature ``dtype(dtype)``.
    """

    nbtype = numba_type(dtype)
    log.debug("Compiling %s scalar kernel for %s", name, np.dtype(dtype).name)
    return nb.njit(nbtype(nbtype), nogil=True, error_model="numpy")(
        make_kernel(name, dtype)
    )


@lru_cache(maxsize=None)
def inplace_kernel(name: str, dtype: np.dtype, parallel: bool = False) -> Callable:
    """Compile the in-place buffer kernel ``name`` for ``dtype``.

    The compiled function has the signature ``(values, count) -> None`` and
    replaces ``values[i]`` with the scalar kernel applied to it for every
    ``i < count``. With ``parallel=True`` the index range is split across
    Numba's thread pool; elements are independent so the result is identical.
    """

    nbtype = numba_type(dtype)
    scalar = scalar_kernel(name, np.dtype(dtype))

    def apply(values, count):
        for i in prange(count):
            values[i] = scalar(values[i])

    log.debug(
        "Compiling %s in-place kernel for %s (parallel=%s)",
        name,
        np.dtype(dtype).name,
        parallel,
    )
    return nb.njit(
        nb.void(nbtype[:], nb.intp),
        nogil=True,
        parallel=parallel,
        error_model="numpy",
    )(apply)


def apply_inplace(
    name: str, values: np.ndarray, count: int, parallel: bool = False
) -> None:
    """Run the compiled in-place kernel on a float32/float64 array.

    ``values`` must be one-dimensional (or a flat view of a contiguous array)
    and hold at least ``count`` elements.
    """

    if count == 0:
        return
    kernel = inplace_kernel(name, values.dtype, parallel)
    kernel(values, count)


def evaluate(name: str, x, dtype) -> np.floating:
    """Evaluate the compiled scalar kernel at ``x`` in the given float type."""

    float_type = np.dtype(dtype).type
    return float_type(scalar_kernel(name, np.dtype(dtype))(float_type(x)))
