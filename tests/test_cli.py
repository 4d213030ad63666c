import logging

import pandas as pd
import pytest
from click.testing import CliRunner

from padepy import log
from padepy.cli import cli


@pytest.fixture(autouse=True)
def _drop_console_handler():
    yield
    logger = logging.getLogger("padepy")
    for handler in logger.handlers[:]:
        if isinstance(handler, log._ConsoleHandler):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_eval_prints_approximation_and_error():
    result = CliRunner().invoke(cli, ["eval", "sin", "0.5", "1.0"])

    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("sin(0.5) = 0.4794255")
    assert "numpy:" in lines[0]


def test_eval_accepts_alias_and_dtype():
    result = CliRunner().invoke(
        cli, ["eval", "logNPlusOne", "1", "--dtype", "float32", "--backend", "numpy"]
    )

    assert result.exit_code == 0, result.output
    assert result.output.startswith("log1p(1) = 0.69314")


def test_eval_rejects_unknown_kernel():
    result = CliRunner().invoke(cli, ["eval", "atan", "0.5"])
    assert result.exit_code != 0


def test_report_writes_csv(tmp_path):
    output = tmp_path / "report.csv"
    result = CliRunner().invoke(
        cli,
        [
            "report",
            "--kernel",
            "tanh",
            "--kernel",
            "exp",
            "--dtype",
            "float64",
            "--samples",
            "257",
            "--backend",
            "numpy",
            "--output",
            str(output),
        ],
    )

    assert result.exit_code == 0, result.output
    table = pd.read_csv(output)
    assert list(table["kernel"]) == ["tanh", "exp"]
    assert table["passed"].all()


def test_report_from_config(tmp_path):
    config = tmp_path / "report.yaml"
    config.write_text("kernels: [cos]\ndtypes: [float32]\nsamples: 129\nbackend: numpy\n")

    result = CliRunner().invoke(cli, ["report", "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert "cos" in result.output
    assert "float32" in result.output


def test_report_rejects_bad_config(tmp_path):
    config = tmp_path / "report.yaml"
    config.write_text("samples: 1\n")

    result = CliRunner().invoke(cli, ["report", "--config", str(config)])

    assert result.exit_code != 0


@pytest.mark.parametrize("dtype", ["float16", "int32"])
def test_report_rejects_unsupported_dtype_in_config(tmp_path, dtype):
    config = tmp_path / "report.yaml"
    config.write_text(f"kernels: [sin]\ndtypes: [{dtype}]\n")

    result = CliRunner().invoke(cli, ["report", "--config", str(config)])

    assert result.exit_code == 2
    assert "float32 or float64" in result.output
    assert not isinstance(result.exception, TypeError)
