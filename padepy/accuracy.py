"""Accuracy profiling of the kernels against NumPy's transcendental functions.

The tolerances below were fixed from dense sampling of each kernel's accuracy
window and serve as regression thresholds. A sample passes when

    |approx(x) - f(x)| <= atol + rtol * |f(x)|

with ``f`` evaluated in double precision at the (possibly single-precision)
sample ``x``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

import numpy as np
import pandas as pd

from padepy.backends import get_backend
from padepy.functions.coefficients import DOMAINS, KERNEL_NAMES, Domain, canonical_name
from padepy.functions.reference import resolve_dtype

TRUE_FUNCTIONS = {
    "cosh": np.cosh,
    "sinh": np.sinh,
    "tanh": np.tanh,
    "cos": np.cos,
    "sin": np.sin,
    "tan": np.tan,
    "exp": np.exp,
    "log1p": np.log1p,
}


@dataclass(frozen=True)
class Tolerance:
    atol: float
    rtol: float = 0.0


TOLERANCES: dict[str, Tolerance] = {
    "cosh": Tolerance(atol=1e-5, rtol=1e-2),
    "sinh": Tolerance(atol=1e-5, rtol=3e-3),
    "tanh": Tolerance(atol=5e-4),
    "cos": Tolerance(atol=5e-4),
    "sin": Tolerance(atol=5e-4),
    "tan": Tolerance(atol=1e-5, rtol=1e-3),
    "exp": Tolerance(atol=5e-3, rtol=2e-2),
    "log1p": Tolerance(atol=2e-3),
}


@dataclass(frozen=True)
class ErrorProfile:
    """Worst-case error of one kernel over its accuracy window."""

    kernel: str
    dtype: str
    backend: str
    samples: int
    lower: float
    upper: float
    max_abs_error: float
    max_rel_error: float
    worst_input: float
    atol: float
    rtol: float
    passed: bool


def accuracy_window(name: str) -> Domain:
    """Interval used to check kernel ``name`` against its tolerance.

    This is the valid domain, except for ``tan`` whose true value diverges at
    the domain ends; it is checked on ``[-1.5, 1.5]``.
    """

    name = canonical_name(name)
    if name == "tan":
        return Domain(-1.5, 1.5)
    return DOMAINS[name]


def sample_domain(name: str, samples: int = 4097, dtype=np.float64) -> np.ndarray:
    """Evenly spaced samples of the accuracy window, cast to ``dtype``."""

    window = accuracy_window(name)
    return np.linspace(window.lower, window.upper, samples).astype(
        resolve_dtype(dtype)
    )


def error_profile(
    name: str,
    *,
    samples: int = 4097,
    dtype=np.float64,
    backend: str | None = None,
) -> ErrorProfile:
    """Measure the error of kernel ``name`` over its accuracy window.

    Parameters
    ----------
    name:
        Kernel name.
    samples:
        Number of evenly spaced samples, including both window ends.
    dtype:
        Float type the kernel computes in.
    backend:
        Backend name; ``None`` uses ``PADEPY_BACKEND``.

    Returns
    -------
    ErrorProfile
        Worst absolute and relative error and whether every sample meets
        :data:`TOLERANCES`.
    """

    name = canonical_name(name)
    dtype = resolve_dtype(dtype)
    kernels = get_backend(backend)
    x = sample_domain(name, samples, dtype)

    approx = np.asarray(kernels.scalar(name, x), dtype=np.float64)
    true = TRUE_FUNCTIONS[name](x.astype(np.float64))
    abs_error = np.abs(approx - true)
    rel_error = np.divide(
        abs_error, np.abs(true), out=np.zeros_like(abs_error), where=true != 0
    )

    tolerance = TOLERANCES[name]
    passed = bool(np.all(abs_error <= tolerance.atol + tolerance.rtol * np.abs(true)))
    worst = int(np.argmax(abs_error))
    window = accuracy_window(name)

    return ErrorProfile(
        kernel=name,
        dtype=dtype.name,
        backend=kernels.name,
        samples=int(samples),
        lower=window.lower,
        upper=window.upper,
        max_abs_error=float(abs_error[worst]),
        max_rel_error=float(rel_error.max()),
        worst_input=float(x[worst]),
        atol=tolerance.atol,
        rtol=tolerance.rtol,
        passed=passed,
    )


def accuracy_table(
    kernels=None,
    dtypes=(np.float32, np.float64),
    samples: int = 4097,
    backend: str | None = None,
) -> pd.DataFrame:
    """Collect :func:`error_profile` for several kernels and float types.

    Returns
    -------
    pandas.DataFrame
        One row per ``(kernel, dtype)`` with the :class:`ErrorProfile` fields
        as columns.
    """

    names = KERNEL_NAMES if kernels is None else kernels
    rows = [
        asdict(error_profile(name, samples=samples, dtype=dtype, backend=backend))
        for name in names
        for dtype in dtypes
    ]
    return pd.DataFrame(rows, columns=list(ErrorProfile.__dataclass_fields__))
