import logging

import numpy as np
import pytest

from padepy import backends
from padepy.backends import (
    CudaBackend,
    NumbaBackend,
    NumpyBackend,
    get_backend,
    is_device_array,
)


@pytest.fixture
def fresh_cuda_backend():
    backends._cuda_backend.cache_clear()
    yield
    backends._cuda_backend.cache_clear()


@pytest.mark.parametrize(
    "name,cls",
    [("numpy", NumpyBackend), ("numba", NumbaBackend), (" NumPy ", NumpyBackend)],
)
def test_backend_by_name(name, cls):
    backend = get_backend(name)
    assert type(backend) is cls


def test_default_backend_is_numba(monkeypatch):
    monkeypatch.delenv("PADEPY_BACKEND", raising=False)
    assert get_backend().name == "numba"


def test_default_backend_from_environment(monkeypatch):
    monkeypatch.setenv("PADEPY_BACKEND", "numpy")
    assert get_backend().name == "numpy"

    monkeypatch.setenv("PADEPY_BACKEND", "garbage")
    assert get_backend().name == "numba"


def test_unknown_backend():
    with pytest.raises(ValueError):
        get_backend("opencl")


def test_cuda_falls_back_to_cpu(monkeypatch, caplog, fresh_cuda_backend):
    monkeypatch.setattr(backends, "_cuda_available", lambda: False)
    caplog.set_level(logging.WARNING, logger="padepy")

    backend = get_backend("cuda")

    assert type(backend) is NumbaBackend
    assert "falling back" in caplog.text

    caplog.clear()
    assert get_backend("cuda") is backend
    assert caplog.text == ""


def test_cuda_backend_handles_host_arrays_on_cpu(monkeypatch, fresh_cuda_backend):
    monkeypatch.setattr(backends, "_cuda_available", lambda: True)
    backend = get_backend("cuda")
    assert type(backend) is CudaBackend

    values = np.array([0.0, 1.0])
    backend.inplace("exp", values, 2)
    assert values[0] == 1.0


def test_host_arrays_are_not_device_arrays():
    assert not is_device_array(np.zeros(3))
    assert not is_device_array([0.0])


class _FakeDeviceArray:
    __cuda_array_interface__ = {}
    dtype = np.dtype(np.float32)
    shape = (3,)


def test_cpu_backends_reject_device_arrays():
    fake = _FakeDeviceArray()
    assert is_device_array(fake)
    with pytest.raises(TypeError):
        NumbaBackend().inplace("sin", fake, 3)
    with pytest.raises(TypeError):
        NumpyBackend().inplace("sin", fake, 3)
