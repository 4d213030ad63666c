"""Benchmarks for the in-place kernels.

Times each kernel on a block of samples drawn from its valid domain, for the
compiled CPU kernels and for the NumPy function it replaces.

Run with ``python -m padepy.benchmark.bench_kernels --size 512 -o out.json``.
"""

from __future__ import annotations

import argparse
import os

import numpy as np
import pyperf

from padepy.approx import buffer_approx
from padepy.accuracy import TRUE_FUNCTIONS
from padepy.functions.coefficients import DOMAINS, KERNEL_NAMES, canonical_name


def _set_reproducible_thread_env() -> None:
    """Set conservative thread environment variables.

    Notes
    -----
    Uses ``os.environ.setdefault`` so user-provided values win.
    """
    defaults = {
        "OMP_NUM_THREADS": "1",
        "MKL_NUM_THREADS": "1",
        "OPENBLAS_NUM_THREADS": "1",
        "NUMBA_NUM_THREADS": "1",
    }
    for key, value in defaults.items():
        os.environ.setdefault(key, value)


def make_workload(name: str, size: int, dtype=np.float32, seed: int = 0) -> np.ndarray:
    """Return ``size`` uniform samples from kernel ``name``'s valid domain.

    Parameters
    ----------
    name:
        Kernel name.
    size:
        Number of samples (a typical audio block is 64 to 2048).
    dtype:
        Float type of the returned buffer.
    seed:
        RNG seed.

    Returns
    -------
    numpy.ndarray
        One-dimensional buffer of ``dtype``.
    """

    domain = DOMAINS[canonical_name(name)]
    rng = np.random.default_rng(seed)
    return rng.uniform(domain.lower, domain.upper, size=size).astype(dtype)


def _add_worker_args(cmd: list[str], args: argparse.Namespace) -> None:
    """Populate pyperf worker command-line arguments."""
    cmd.extend(["--size", str(args.size)])
    cmd.extend(["--dtype", args.dtype])
    cmd.extend(["--seed", str(args.seed)])
    for kernel in args.kernels or ():
        cmd.extend(["--kernel", kernel])


def _build_runner() -> tuple[pyperf.Runner, argparse.ArgumentParser]:
    """Create the pyperf runner and CLI parser."""
    parser = argparse.ArgumentParser(
        description="Benchmark Padé kernels against NumPy",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--size", type=int, default=512, help="Samples per block")
    parser.add_argument(
        "--dtype", choices=("float32", "float64"), default="float32"
    )
    parser.add_argument("--seed", type=int, default=0, help="RNG seed")
    parser.add_argument(
        "--kernel",
        dest="kernels",
        action="append",
        choices=KERNEL_NAMES,
        help="Kernel to benchmark (repeatable; default: all)",
    )

    runner = pyperf.Runner(
        _argparser=parser,
        add_cmdline_args=_add_worker_args,
        warmups=1,
    )
    return runner, parser


def main() -> None:
    """CLI entry point for the kernel benchmark."""
    _set_reproducible_thread_env()

    runner, _ = _build_runner()
    args = runner.parse_args()

    for name in args.kernels or KERNEL_NAMES:
        block = make_workload(name, args.size, args.dtype, args.seed)
        work = block.copy()
        numpy_func = TRUE_FUNCTIONS[name]

        # Warm up Numba compilation.
        buffer_approx(name, work, backend="numba")

        def _bench_pade(name=name, block=block, work=work) -> None:
            work[:] = block
            buffer_approx(name, work, backend="numba")

        def _bench_numpy(numpy_func=numpy_func, block=block, work=work) -> None:
            numpy_func(block, out=work)

        runner.bench_func(f"{name}_pade_{args.dtype}_{args.size}", _bench_pade)
        runner.bench_func(f"{name}_numpy_{args.dtype}_{args.size}", _bench_numpy)


if __name__ == "__main__":
    main()
