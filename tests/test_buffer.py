import math

import numpy as np
import numpy.testing as npt
import pytest

import padepy
from padepy.accuracy import sample_domain
from padepy.backends import NumbaBackend
from padepy.functions.coefficients import KERNEL_NAMES

BACKENDS = ["numpy", "numba"]
DTYPES = [np.float32, np.float64]

INPLACE = {
    "cosh": padepy.cosh_inplace,
    "sinh": padepy.sinh_inplace,
    "tanh": padepy.tanh_inplace,
    "cos": padepy.cos_inplace,
    "sin": padepy.sin_inplace,
    "tan": padepy.tan_inplace,
    "exp": padepy.exp_inplace,
    "log1p": padepy.log1p_inplace,
}


def _shuffled_samples(name, dtype, n=301):
    rng = np.random.default_rng(1)
    x = sample_domain(name, n, dtype)
    return x[rng.permutation(n)]


@pytest.mark.parametrize("backend", BACKENDS)
@pytest.mark.parametrize("dtype", DTYPES)
@pytest.mark.parametrize("name", KERNEL_NAMES)
def test_buffer_matches_scalar_elementwise(name, dtype, backend):
    original = _shuffled_samples(name, dtype)
    values = original.copy()

    INPLACE[name](values, values.size, backend=backend)

    expected = np.array(
        [padepy.scalar_approx(name, v, backend=backend) for v in original],
        dtype=dtype,
    )
    assert values.dtype == dtype
    npt.assert_array_equal(values, expected)


@pytest.mark.parametrize("dtype", DTYPES)
@pytest.mark.parametrize("name", ["sin", "exp", "tanh"])
def test_parallel_kernel_matches_serial_kernel(name, dtype):
    original = _shuffled_samples(name, dtype, n=4096)
    serial = original.copy()
    parallel = original.copy()

    NumbaBackend(parallel_threshold=len(original) + 1).inplace(name, serial, serial.size)
    NumbaBackend(parallel_threshold=1).inplace(name, parallel, parallel.size)

    npt.assert_array_equal(parallel, serial)


def test_parallel_threshold_from_environment(monkeypatch):
    monkeypatch.setenv("PADEPY_PARALLEL_THRESHOLD", "1")
    original = _shuffled_samples("cos", np.float64)
    values = original.copy()
    padepy.cos_inplace(values, backend="numba")
    expected = np.array([padepy.cos(v, backend="numba") for v in original])
    npt.assert_array_equal(values, expected)


@pytest.mark.parametrize("backend", BACKENDS)
def test_zero_count_is_a_noop(backend):
    values = np.array([0.1, 0.2, 0.3])
    padepy.exp_inplace(values, 0, backend=backend)
    npt.assert_array_equal(values, [0.1, 0.2, 0.3])

    empty = np.empty(0, dtype=np.float32)
    padepy.exp_inplace(empty, 0, backend=backend)
    padepy.exp_inplace(empty, backend=backend)
    assert empty.size == 0

    items = []
    padepy.buffer_approx("exp", items, 0, backend=backend)
    assert items == []


@pytest.mark.parametrize("backend", BACKENDS)
def test_count_limits_the_transformed_prefix(backend):
    values = np.array([0.0, 0.5, 1.0, 1.5], dtype=np.float32)
    padepy.sin_inplace(values, 2, backend=backend)

    npt.assert_array_equal(values[2:], np.array([1.0, 1.5], dtype=np.float32))
    assert values[0] == 0.0
    npt.assert_allclose(values[1], math.sin(0.5), atol=1e-6)


@pytest.mark.parametrize("backend", BACKENDS)
def test_python_list_buffer(backend):
    values = [0.0, math.pi / 2, math.pi]
    padepy.cos_inplace(values, 3, backend=backend)

    assert all(isinstance(v, float) for v in values)
    npt.assert_allclose(values, [1.0, 0.0, -1.0], atol=1e-3)


@pytest.mark.parametrize("backend", BACKENDS)
def test_contiguous_2d_buffer_is_addressed_flat(backend):
    values = np.linspace(-1.0, 1.0, 6).reshape(2, 3)
    expected = padepy.tanh(values.ravel(), backend=backend).reshape(2, 3)

    padepy.tanh_inplace(values, backend=backend)

    npt.assert_array_equal(values, expected)


@pytest.mark.parametrize("backend", BACKENDS)
def test_strided_1d_view_is_transformed_in_place(backend):
    base = np.linspace(0.0, 1.0, 10)
    view = base[::2]
    expected_view = padepy.exp(view, backend=backend)
    untouched = base[1::2].copy()

    padepy.exp_inplace(view, backend=backend)

    npt.assert_array_equal(base[::2], expected_view)
    npt.assert_array_equal(base[1::2], untouched)


def test_count_larger_than_buffer():
    with pytest.raises(ValueError):
        padepy.sin_inplace(np.zeros(3), 4)


def test_negative_count():
    with pytest.raises(ValueError):
        padepy.sin_inplace(np.zeros(3), -1)


def test_read_only_buffer():
    values = np.zeros(3)
    values.setflags(write=False)
    with pytest.raises(ValueError):
        padepy.sin_inplace(values)


def test_non_contiguous_2d_buffer():
    values = np.zeros((4, 4))[:, ::2]
    with pytest.raises(ValueError):
        padepy.sin_inplace(values)


@pytest.mark.parametrize("values", [np.zeros(3, dtype=np.int64), np.zeros(3, dtype=np.float16)])
def test_unsupported_buffer_dtype(values):
    with pytest.raises(TypeError):
        padepy.sin_inplace(values)


def test_immutable_sequence_is_rejected():
    with pytest.raises(TypeError):
        padepy.sin_inplace((0.0, 1.0))


def test_buffer_approx_returns_none():
    assert padepy.buffer_approx("sin", np.zeros(2)) is None
