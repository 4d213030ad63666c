"""Coefficient sets and valid input domains of the Padé kernels.

Every kernel evaluates ``N(x) / D(x)`` where both polynomials are built from a
handful of integer constants. The constants are stored as integers here and
cast to the caller's floating-point type by the renditions in
:mod:`padepy.functions.reference`, :mod:`padepy.functions.cpu_numba` and
:mod:`padepy.functions.cuda_numba`. All of them are exact in double precision;
in single precision the two largest sin/sinh constants round to the nearest
float32.

The letters follow the nesting order used in the kernels, ``a`` being the
outermost (constant) term of the numerator.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

KERNEL_NAMES: tuple[str, ...] = (
    "cosh",
    "sinh",
    "tanh",
    "cos",
    "sin",
    "tan",
    "exp",
    "log1p",
)

KERNEL_ALIASES: dict[str, str] = {
    "logNPlusOne": "log1p",
    "log_n_plus_one": "log1p",
}

# cos and cosh share one [6/6] approximant (cosh(x) = cos(ix)).
_COS = (39251520, 18471600, 1075032, 14615, 1154160, 16632, 127)
# sin and sinh share one [7/6] approximant (sinh(x) = -i sin(ix)).
_SIN = (11511339840, 1640635920, 52785432, 479249, 277920720, 3177720, 18361)
_TAN = (135135, 17325, 378, 62370, 3150, 28)
_EXP = (1680, 840, 180, 20)
_LOG1P = (7560, 15120, 9870, 2310, 137, 18900, 16800, 6300, 900, 30)

COEFFICIENTS: dict[str, tuple[int, ...]] = {
    "cosh": _COS,
    "sinh": _SIN,
    "tanh": _TAN,
    "cos": _COS,
    "sin": _SIN,
    "tan": _TAN,
    "exp": _EXP,
    "log1p": _LOG1P,
}


@dataclass(frozen=True)
class Domain:
    """Closed interval on which a kernel keeps its documented accuracy."""

    lower: float
    upper: float

    def contains(self, values) -> np.ndarray:
        """Elementwise test of ``lower <= values <= upper``; NaN is outside."""

        values = np.asarray(values, dtype=np.float64)
        return (values >= self.lower) & (values <= self.upper)


DOMAINS: dict[str, Domain] = {
    "cosh": Domain(-5.0, 5.0),
    "sinh": Domain(-5.0, 5.0),
    "tanh": Domain(-5.0, 5.0),
    "cos": Domain(-math.pi, math.pi),
    "sin": Domain(-math.pi, math.pi),
    "tan": Domain(-math.pi / 2, math.pi / 2),
    "exp": Domain(-6.0, 4.0),
    "log1p": Domain(-0.8, 5.0),
}

ODD_KERNELS = frozenset({"sinh", "tanh", "sin", "tan"})
EVEN_KERNELS = frozenset({"cosh", "cos"})


def canonical_name(name: str) -> str:
    """Resolve a kernel name or alias to its canonical spelling.

    Parameters
    ----------
    name:
        Kernel name such as ``"sin"`` or an alias such as ``"logNPlusOne"``.

    Returns
    -------
    str
        One of :data:`KERNEL_NAMES`.

    Raises
    ------
    ValueError
        If the name does not denote a kernel.
    """

    name = KERNEL_ALIASES.get(name, name)
    if name not in COEFFICIENTS:
        raise ValueError(
            f"Unknown kernel {name!r}; expected one of {', '.join(KERNEL_NAMES)}"
        )
    return name
