import numpy as np
import numpy.testing as npt
import pytest

import padepy
from padepy.accuracy import sample_domain
from padepy.functions.coefficients import KERNEL_NAMES

cuda = pytest.importorskip("numba.cuda")

pytestmark = pytest.mark.skipif(
    not cuda.is_available(), reason="CUDA device not available"
)


@pytest.mark.parametrize("dtype", [np.float32, np.float64])
@pytest.mark.parametrize("name", KERNEL_NAMES)
def test_device_buffer_matches_cpu_kernels(name, dtype):
    host = sample_domain(name, 1000, dtype)
    device = cuda.to_device(host)

    padepy.buffer_approx(name, device)

    tol = dict(rtol=1e-5, atol=1e-6) if dtype is np.float32 else dict(rtol=1e-12, atol=1e-12)
    npt.assert_allclose(
        device.copy_to_host(), padepy.scalar_approx(name, host, backend="numba"), **tol
    )


def test_device_buffer_respects_count():
    host = np.array([0.0, 1.0, 2.0, 3.0], dtype=np.float32)
    device = cuda.to_device(host)

    padepy.exp_inplace(device, 2)

    result = device.copy_to_host()
    npt.assert_allclose(result[:2], [1.0, np.e], rtol=1e-5)
    npt.assert_array_equal(result[2:], host[2:])


def test_two_dimensional_device_buffer_is_rejected():
    device = cuda.to_device(np.zeros((2, 2), dtype=np.float32))
    with pytest.raises(ValueError):
        padepy.sin_inplace(device)
