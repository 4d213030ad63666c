import json
import os
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
import yaml

from padepy.env import normalize_backend, parse_bool_env, parse_int_env
from padepy.functions.coefficients import KERNEL_NAMES, canonical_name
from padepy.functions.reference import SUPPORTED_DTYPES


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment.

    Attributes
    ----------
    backend:
        Default backend (``PADEPY_BACKEND``), one of ``numpy``, ``numba`` and
        ``cuda``. Defaults to ``numba``.
    domain_check:
        Log a warning when inputs leave a kernel's valid domain
        (``PADEPY_DOMAIN_CHECK``). Off by default.
    parallel_threshold:
        Buffers with at least this many elements use the parallel CPU kernel
        (``PADEPY_PARALLEL_THRESHOLD``).
    """

    backend: str = "numba"
    domain_check: bool = False
    parallel_threshold: int = 1 << 16

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            backend=normalize_backend(os.environ.get("PADEPY_BACKEND", "")),
            domain_check=parse_bool_env("PADEPY_DOMAIN_CHECK", default=False),
            parallel_threshold=parse_int_env(
                "PADEPY_PARALLEL_THRESHOLD", default=1 << 16, minimum=1
            ),
        )


def settings() -> Settings:
    """Return the current settings. The environment is read on every call."""

    return Settings.from_env()


@dataclass
class Config:
    """Accuracy report configuration, loaded from a YAML or JSON file.

    Example (YAML)::

        kernels: [sin, cos, exp]
        dtypes: [float32, float64]
        samples: 8193
        backend: numba
        output: report.csv
    """

    kernels: list[str] = field(default_factory=lambda: list(KERNEL_NAMES))
    dtypes: list[np.dtype] = field(
        default_factory=lambda: [np.dtype(np.float32), np.dtype(np.float64)]
    )
    samples: int = 4097
    backend: str | None = None
    output: str | None = None

    def __post_init__(self):
        self.kernels = [canonical_name(name) for name in self.kernels]
        self.dtypes = [_report_dtype(dtype) for dtype in self.dtypes]
        if int(self.samples) < 2:
            raise ValueError("The number of samples needs to be at least 2!")
        self.samples = int(self.samples)
        if self.backend is not None and normalize_backend(self.backend, default="") == "":
            raise ValueError(f"Unknown backend {self.backend!r} in the config!")

    @classmethod
    def from_file(cls, path_config: str) -> "Config":
        """Read a report configuration from ``path_config``.

        Raises
        ------
        ValueError
            If the file is neither JSON nor YAML, is empty, or contains keys
            that are not configuration fields.
        """

        _path_config = Path(path_config)
        match _path_config.suffix:
            case ".json":
                with open(_path_config) as data:
                    config = json.load(data)
            case ".yaml" | ".yml":
                with open(_path_config) as data:
                    config = yaml.safe_load(data)
            case _:
                raise ValueError(
                    "The provided config file needs to be a json or yaml file!"
                )
        if config is None:
            raise ValueError(f"Could not read config file {path_config}.")
        if not isinstance(config, dict):
            raise ValueError(f"Config file {path_config} must contain a mapping.")

        unknown = set(config) - {"kernels", "dtypes", "samples", "backend", "output"}
        if unknown:
            raise ValueError(
                f"Unknown keys in config file {path_config}: {', '.join(sorted(unknown))}"
            )
        return cls(**config)


def _report_dtype(dtype) -> np.dtype:
    try:
        resolved = np.dtype(dtype)
    except TypeError as err:
        raise ValueError(f"Unknown dtype {dtype!r} in the config!") from err
    if resolved not in SUPPORTED_DTYPES:
        raise ValueError(
            f"Reports are computed in float32 or float64, got {resolved.name}!"
        )
    return resolved
