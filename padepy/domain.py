"""Optional debug check of kernel input domains.

The approximants lose accuracy silently outside their documented domain. When
``PADEPY_DOMAIN_CHECK`` is enabled the public API counts such inputs and logs
one warning per call. Values are never rejected, clamped or modified.
"""

from __future__ import annotations

import numpy as np

from padepy import log
from padepy.functions.coefficients import DOMAINS

logger = log.kernel_logger(__name__)


def count_out_of_domain(name: str, values) -> int:
    """Return how many entries of ``values`` lie outside kernel ``name``'s domain.

    NaN compares false against both bounds and is therefore counted.
    """

    inside = DOMAINS[name].contains(values)
    return int(inside.size - np.count_nonzero(inside))


def check_domain(name: str, values) -> int:
    """Log a warning if any of ``values`` lies outside kernel ``name``'s domain.

    Parameters
    ----------
    name:
        Canonical kernel name.
    values:
        Scalar, array or sequence of inputs (before transformation).

    Returns
    -------
    int
        The number of out-of-domain inputs.
    """

    outside = count_out_of_domain(name, values)
    if outside:
        domain = DOMAINS[name]
        logger.warning(
            "%d input(s) of %s lie outside [%g, %g]; the approximation is "
            "not accurate there.",
            outside,
            name,
            domain.lower,
            domain.upper,
        )
    return outside
