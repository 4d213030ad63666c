# pyright: ignore

"""CUDA kernels compiled with Numba.

Device functions are built from the same bodies as the CPU kernels
(:mod:`padepy.functions.pade`) and specialized per float type. The in-place
kernels work directly on device-resident arrays with one thread per element;
nothing is copied to or from the host.

This module imports :mod:`numba.cuda` at import time. It is only loaded by
:func:`padepy.backends.get_backend` once CUDA support has been requested.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Callable

import numpy as np
from numba import cuda

from padepy.env import parse_int_env
from padepy.functions.pade import make_kernel

log = logging.getLogger(__name__)


def threads_per_block() -> int:
    """Threads per block for the in-place kernels (``PADEPY_CUDA_THREADS``)."""

    return parse_int_env("PADEPY_CUDA_THREADS", default=256, minimum=32)


@lru_cache(maxsize=None)
def device_function(name: str, dtype: np.dtype) -> Callable:
    """Compile kernel ``name`` as a CUDA device function for ``dtype``."""

    log.debug("Compiling %s device function for %s", name, np.dtype(dtype).name)
    return cuda.jit(device=True)(make_kernel(name, np.dtype(dtype)))


@lru_cache(maxsize=None)
def inplace_kernel(name: str, dtype: np.dtype) -> Callable:
    """Compile the in-place CUDA kernel ``name`` for ``dtype``.

    Launch as ``kernel[blocks, threads](values, count)``.
    """

    scalar = device_function(name, np.dtype(dtype))

    @cuda.jit
    def apply(values, count):
        i = cuda.grid(1)
        if i < count:
            values[i] = scalar(values[i])

    return apply


def apply_inplace(name: str, values, count: int) -> None:
    """Launch the in-place kernel on a one-dimensional device array."""

    if count == 0:
        return
    threads = threads_per_block()
    blocks = (count + threads - 1) // threads
    inplace_kernel(name, np.dtype(values.dtype))[blocks, threads](values, count)
    cuda.synchronize()


def is_available() -> bool:
    """Return ``True`` if a CUDA device can be used."""

    if not cuda.is_available():
        return False
    try:
        cuda.get_current_device()
    except Exception:
        return False
    return True
