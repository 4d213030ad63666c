"""Public interface of the Padé approximation kernels.

Two generic entry points select a kernel by name:

- :func:`scalar_approx` evaluates a kernel at a scalar (or, for convenience,
  elementwise on an array, returning a new array)
- :func:`buffer_approx` transforms a caller-owned buffer in place

and every kernel is also exposed as a pair of named functions, e.g.
:func:`sin` and :func:`sin_inplace`.

Kernels are accurate only on their documented domain (see
:data:`padepy.functions.coefficients.DOMAINS`); outside of it they return
whatever the rational expression evaluates to. Nothing is clamped or checked
unless ``PADEPY_DOMAIN_CHECK`` is enabled, in which case out-of-domain inputs
are logged.

Examples
--------
>>> import numpy as np
>>> import padepy
>>> float(padepy.sin(0.5))  # doctest: +ELLIPSIS
0.47942...
>>> buf = np.array([0.0, np.pi / 2, np.pi], dtype=np.float32)
>>> padepy.cos_inplace(buf)
>>> buf.dtype
dtype('float32')
"""

from __future__ import annotations

import operator
from collections.abc import MutableSequence

import numpy as np

from padepy.backends import get_backend, is_device_array
from padepy.config import settings
from padepy.domain import check_domain
from padepy.functions.coefficients import canonical_name
from padepy.functions.reference import SUPPORTED_DTYPES


def scalar_approx(name: str, x, *, backend: str | None = None):
    """Evaluate the kernel ``name`` at ``x``.

    Parameters
    ----------
    name:
        Kernel name: ``cosh``, ``sinh``, ``tanh``, ``cos``, ``sin``, ``tan``,
        ``exp`` or ``log1p`` (aliases ``logNPlusOne``/``log_n_plus_one``).
    x:
        Python or NumPy scalar, or an array-like. Python numbers compute in
        double precision; NumPy values keep their float type.
    backend:
        Backend name; ``None`` uses ``PADEPY_BACKEND``.

    Returns
    -------
    numpy.floating or numpy.ndarray
        The approximation, of the same float type as ``x``. Arrays produce a
        new array; ``x`` is never modified.
    """

    kernel = canonical_name(name)
    if settings().domain_check:
        check_domain(kernel, x)
    return get_backend(backend).scalar(kernel, x)


def buffer_approx(
    name: str, values, count: int | None = None, *, backend: str | None = None
) -> None:
    """Apply the kernel ``name`` in place to the first ``count`` elements.

    Equivalent to ``values[i] = scalar_approx(name, values[i])`` for every
    ``i < count``. Elements are transformed independently.

    Parameters
    ----------
    name:
        Kernel name (see :func:`scalar_approx`).
    values:
        A float32/float64 NumPy array (one-dimensional, or C-contiguous of any
        shape and then addressed in flat order), a one-dimensional CUDA device
        array, or any mutable sequence of numbers.
    count:
        Number of leading elements to transform; defaults to all of them.
        Zero is a no-op.
    backend:
        Backend name; ``None`` uses ``PADEPY_BACKEND`` for host data and
        ``cuda`` for device arrays.

    Raises
    ------
    TypeError
        If ``values`` is not a supported buffer or has an unsupported dtype.
    ValueError
        If ``count`` is negative or larger than the buffer, if the array is
        read-only, or if a multi-dimensional array is not C-contiguous.
    """

    kernel = canonical_name(name)

    if is_device_array(values):
        flat = _device_buffer(values)
        size = flat.shape[0]
        if backend is None:
            backend = "cuda"
    elif isinstance(values, np.ndarray):
        flat = _host_buffer(values)
        size = flat.size
    elif isinstance(values, MutableSequence):
        flat = values
        size = len(values)
    else:
        raise TypeError(
            f"Expected a NumPy array, CUDA device array or mutable sequence, "
            f"got {type(values).__name__}"
        )

    count = _resolve_count(count, size)
    if count == 0:
        return
    if settings().domain_check and not is_device_array(flat):
        check_domain(kernel, flat[:count])
    get_backend(backend).inplace(kernel, flat, count)


def _host_buffer(values: np.ndarray) -> np.ndarray:
    if values.dtype not in SUPPORTED_DTYPES:
        raise TypeError(
            f"In-place transforms need a float32 or float64 array, got {values.dtype}"
        )
    if not values.flags.writeable:
        raise ValueError("The buffer is read-only.")
    if values.ndim == 1:
        return values
    if not values.flags.c_contiguous:
        raise ValueError(
            "Multi-dimensional buffers must be C-contiguous to be transformed in place."
        )
    return values.reshape(-1)


def _device_buffer(values):
    if np.dtype(values.dtype) not in SUPPORTED_DTYPES:
        raise TypeError(
            f"In-place transforms need a float32 or float64 array, got {values.dtype}"
        )
    if len(values.shape) != 1:
        raise ValueError("CUDA device buffers must be one-dimensional.")
    return values


def _resolve_count(count, size: int) -> int:
    if count is None:
        return size
    count = operator.index(count)
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count > size:
        raise ValueError(f"count {count} exceeds the buffer size {size}")
    return count


def cosh(x, *, backend: str | None = None):
    """Approximate cosh(x); accurate on [-5, 5]."""
    return scalar_approx("cosh", x, backend=backend)


def sinh(x, *, backend: str | None = None):
    """Approximate sinh(x); accurate on [-5, 5]."""
    return scalar_approx("sinh", x, backend=backend)


def tanh(x, *, backend: str | None = None):
    """Approximate tanh(x); accurate on [-5, 5]."""
    return scalar_approx("tanh", x, backend=backend)


def cos(x, *, backend: str | None = None):
    """Approximate cos(x); accurate on [-pi, pi]."""
    return scalar_approx("cos", x, backend=backend)


def sin(x, *, backend: str | None = None):
    """Approximate sin(x); accurate on [-pi, pi]."""
    return scalar_approx("sin", x, backend=backend)


def tan(x, *, backend: str | None = None):
    """Approximate tan(x); accurate on [-pi/2, pi/2]."""
    return scalar_approx("tan", x, backend=backend)


def exp(x, *, backend: str | None = None):
    """Approximate exp(x); accurate on [-6, 4]."""
    return scalar_approx("exp", x, backend=backend)


def log1p(x, *, backend: str | None = None):
    """Approximate log(1 + x); accurate on [-0.8, 5]."""
    return scalar_approx("log1p", x, backend=backend)


def cosh_inplace(values, count: int | None = None, *, backend: str | None = None):
    """In-place :func:`cosh` over the first ``count`` elements of ``values``."""
    buffer_approx("cosh", values, count, backend=backend)


def sinh_inplace(values, count: int | None = None, *, backend: str | None = None):
    """In-place :func:`sinh` over the first ``count`` elements of ``values``."""
    buffer_approx("sinh", values, count, backend=backend)


def tanh_inplace(values, count: int | None = None, *, backend: str | None = None):
    """In-place :func:`tanh` over the first ``count`` elements of ``values``."""
    buffer_approx("tanh", values, count, backend=backend)


def cos_inplace(values, count: int | None = None, *, backend: str | None = None):
    """In-place :func:`cos` over the first ``count`` elements of ``values``."""
    buffer_approx("cos", values, count, backend=backend)


def sin_inplace(values, count: int | None = None, *, backend: str | None = None):
    """In-place :func:`sin` over the first ``count`` elements of ``values``."""
    buffer_approx("sin", values, count, backend=backend)


def tan_inplace(values, count: int | None = None, *, backend: str | None = None):
    """In-place :func:`tan` over the first ``count`` elements of ``values``."""
    buffer_approx("tan", values, count, backend=backend)


def exp_inplace(values, count: int | None = None, *, backend: str | None = None):
    """In-place :func:`exp` over the first ``count`` elements of ``values``."""
    buffer_approx("exp", values, count, backend=backend)


def log1p_inplace(values, count: int | None = None, *, backend: str | None = None):
    """In-place :func:`log1p` over the first ``count`` elements of ``values``."""
    buffer_approx("log1p", values, count, backend=backend)
