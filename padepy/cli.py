import click
import numpy as np

from padepy import log
from padepy.accuracy import TRUE_FUNCTIONS, accuracy_table
from padepy.approx import scalar_approx
from padepy.config import Config
from padepy.env import BACKEND_NAMES
from padepy.functions.coefficients import KERNEL_ALIASES, KERNEL_NAMES, canonical_name

_KERNEL_CHOICE = click.Choice(list(KERNEL_NAMES) + list(KERNEL_ALIASES))
_DTYPE_CHOICE = click.Choice(["float32", "float64"])


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Verbosity of the padepy logger.",
)
def cli(log_level: str) -> None:
    log.configure(log_level)


@cli.command(name="eval")
@click.argument("kernel", type=_KERNEL_CHOICE)
@click.argument("values", nargs=-1, required=True, type=float)
@click.option("--dtype", type=_DTYPE_CHOICE, default="float64", show_default=True)
@click.option("--backend", type=click.Choice(BACKEND_NAMES), default=None)
def evaluate(kernel: str, values: tuple[float, ...], dtype: str, backend: str) -> None:
    """Evaluate KERNEL at each of VALUES and compare with NumPy."""

    kernel = canonical_name(kernel)
    x = np.asarray(values, dtype=dtype)
    approx = scalar_approx(kernel, x, backend=backend)
    true = TRUE_FUNCTIONS[kernel](x.astype(np.float64))
    for xi, yi, ti in zip(x, approx, true):
        error = abs(float(yi) - ti)
        click.echo(
            f"{kernel}({xi:.9g}) = {yi:.9g}  (numpy: {ti:.9g}, error: {error:.3e})"
        )


@cli.command()
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML or JSON report configuration. Command line options override it.",
)
@click.option("--kernel", "kernels", multiple=True, type=_KERNEL_CHOICE)
@click.option("--dtype", "dtypes", multiple=True, type=_DTYPE_CHOICE)
@click.option("--samples", type=int, default=None)
@click.option("--backend", type=click.Choice(BACKEND_NAMES), default=None)
@click.option("--output", type=click.Path(dir_okay=False), default=None, help="CSV file.")
def report(config, kernels, dtypes, samples, backend, output) -> None:
    """Print the accuracy of every kernel over its accuracy window."""

    try:
        cfg = Config.from_file(config) if config else Config()
        if kernels:
            cfg.kernels = [canonical_name(k) for k in kernels]
        if dtypes:
            cfg.dtypes = [np.dtype(d) for d in dtypes]
        if samples is not None:
            cfg = Config(cfg.kernels, cfg.dtypes, samples, cfg.backend, cfg.output)
    except (ValueError, TypeError) as err:
        raise click.BadParameter(str(err)) from err

    table = accuracy_table(
        cfg.kernels,
        cfg.dtypes,
        samples=cfg.samples,
        backend=backend or cfg.backend,
    )
    click.echo(table.to_string(index=False))

    path = output or cfg.output
    if path:
        table.to_csv(path, index=False)
        click.echo(f"Wrote {path}")

    if not table["passed"].all():
        raise SystemExit(1)
