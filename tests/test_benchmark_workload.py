import numpy as np
import pytest

from padepy.benchmark.bench_kernels import make_workload
from padepy.functions.coefficients import DOMAINS, KERNEL_NAMES


@pytest.mark.parametrize("name", KERNEL_NAMES)
def test_workload_stays_in_domain(name):
    block = make_workload(name, 512, np.float64, seed=3)
    domain = DOMAINS[name]

    assert block.shape == (512,)
    assert block.dtype == np.float64
    assert block.min() >= domain.lower
    assert block.max() <= domain.upper


def test_workload_is_reproducible():
    a = make_workload("sin", 64, np.float32, seed=7)
    b = make_workload("sin", 64, np.float32, seed=7)
    assert a.dtype == np.float32
    np.testing.assert_array_equal(a, b)
