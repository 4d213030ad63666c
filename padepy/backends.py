"""Kernel backends.

A backend is one rendition of the kernel set:

- numpy: the reference kernels in :mod:`padepy.functions.reference`
- numba: per-dtype compiled CPU kernels in :mod:`padepy.functions.cpu_numba`
- cuda: device kernels in :mod:`padepy.functions.cuda_numba` for CUDA device
  arrays; host values are handled by the numba kernels

Backends receive already validated input from :mod:`padepy.approx`: a
canonical kernel name, and for in-place calls a one-dimensional buffer with
at least ``count`` elements.
"""

from __future__ import annotations

from functools import lru_cache

import numpy as np

from padepy import log
from padepy.config import settings
from padepy.env import BACKEND_NAMES
from padepy.functions import cpu_numba, reference

logger = log.kernel_logger(__name__)


def is_device_array(values) -> bool:
    """Return ``True`` for arrays living in CUDA device memory."""

    return hasattr(values, "__cuda_array_interface__") and not isinstance(
        values, np.ndarray
    )


class KernelBackend:
    """Base class for kernel backends."""

    name: str = ""

    def scalar(self, kernel: str, x):  # pragma: no cover
        """Evaluate ``kernel`` at a scalar or array ``x`` and return new values."""

        raise NotImplementedError

    def inplace(self, kernel: str, values, count: int) -> None:  # pragma: no cover
        """Replace the first ``count`` elements of ``values`` by ``kernel(values)``."""

        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class NumpyBackend(KernelBackend):
    """Reference backend built on NumPy expressions."""

    name = "numpy"

    def scalar(self, kernel: str, x):
        return reference.evaluate(kernel, x)

    def inplace(self, kernel: str, values, count: int) -> None:
        if is_device_array(values):
            raise TypeError("The numpy backend cannot transform CUDA device arrays.")
        reference.apply_inplace(kernel, values, count)


class NumbaBackend(KernelBackend):
    """Compiled CPU backend.

    Parameters
    ----------
    parallel_threshold:
        Buffers with at least this many elements are processed by the
        ``prange`` kernel. ``None`` reads ``PADEPY_PARALLEL_THRESHOLD`` on
        every call.
    """

    name = "numba"

    def __init__(self, parallel_threshold: int | None = None):
        self.parallel_threshold = parallel_threshold

    def scalar(self, kernel: str, x):
        x = reference.as_float(x)
        if isinstance(x, np.ndarray):
            out = x.copy()
            self.inplace(kernel, out.reshape(-1), out.size)
            return out
        return cpu_numba.evaluate(kernel, x, x.dtype)

    def inplace(self, kernel: str, values, count: int) -> None:
        if not isinstance(values, np.ndarray):
            if is_device_array(values):
                raise TypeError(
                    "CUDA device arrays need the cuda backend; "
                    "use backend='cuda' or move the data to the host."
                )
            # Plain Python sequences gain nothing from compiled kernels.
            reference.apply_inplace(kernel, values, count)
            return

        threshold = self.parallel_threshold
        if threshold is None:
            threshold = settings().parallel_threshold
        cpu_numba.apply_inplace(kernel, values, count, parallel=count >= threshold)


class CudaBackend(NumbaBackend):
    """CUDA backend for device arrays; host data goes through the CPU kernels."""

    name = "cuda"

    def inplace(self, kernel: str, values, count: int) -> None:
        if is_device_array(values):
            from padepy.functions import cuda_numba

            cuda_numba.apply_inplace(kernel, values, count)
            return
        super().inplace(kernel, values, count)


def _cuda_available() -> bool:
    from padepy.functions import cuda_numba

    return cuda_numba.is_available()


@lru_cache(maxsize=1)
def _cuda_backend() -> KernelBackend:
    if _cuda_available():
        return CudaBackend()
    logger.warning("Numba CUDA not available; falling back to CPU kernels.")
    return NumbaBackend()


def get_backend(name: str | None = None) -> KernelBackend:
    """Return a kernel backend.

    Parameters
    ----------
    name:
        ``"numpy"``, ``"numba"`` or ``"cuda"``. ``None`` uses the
        ``PADEPY_BACKEND`` setting (default ``"numba"``).

    Returns
    -------
    KernelBackend
        The requested backend. A ``"cuda"`` request without a usable device
        returns the numba backend and logs a warning once.

    Raises
    ------
    ValueError
        For unknown backend names.
    """

    if name is None:
        name = settings().backend
    name = name.strip().lower()
    match name:
        case "numpy":
            return NumpyBackend()
        case "numba":
            return NumbaBackend()
        case "cuda":
            return _cuda_backend()
        case _:
            raise ValueError(
                f"Unknown backend {name!r}; expected one of {', '.join(BACKEND_NAMES)}"
            )
