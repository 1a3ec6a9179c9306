import pytest
from typer.testing import CliRunner

from georefpdf.cli.__main__ import app
from georefpdf.globals.logutil import ANSI_ESCAPE

runner = CliRunner()

SIZES = [
    "--viewport-width", "1000", "--viewport-height", "1000",
    "--content-width", "500", "--content-height", "1000",
]


@pytest.fixture
def config(tmp_path):
    path = tmp_path / "georefpdf.yml"
    path.write_text("source_crs: EPSG:3857\n", encoding="utf-8")
    return path


def _run(*args):
    result = runner.invoke(app, list(args))
    return result, ANSI_ESCAPE.sub("", result.output)


def test_fit_edges(config):
    result, out = _run(
        "fit", "-c", str(config),
        "--north", "10", "--south", "0", "--east", "20", "--west", "0", *SIZES,
    )
    assert result.exit_code == 0, out
    assert "Fitted:   N=10.0 S=0.0 E=15.0 W=5.0" in out
    assert "ullr: 5.0 10.0 15.0 0.0" in out


def test_fit_mercator_extent(config):
    half = "111319.49079327357"
    result, out = _run(
        "fit", "-c", str(config),
        "--extent", "0", "0", half, half,
        "--viewport-width", "1000", "--viewport-height", "1000",
        "--content-width", "1000", "--content-height", "1000",
    )
    assert result.exit_code == 0, out
    assert "Fitted:" in out


def test_fit_with_pdf_prints_command(config, tmp_path):
    pdf = tmp_path / "plan.pdf"
    result, out = _run(
        "fit", "-c", str(config),
        "--north", "10", "--south", "0", "--east", "20", "--west", "0", *SIZES,
        "--pdf", str(pdf),
    )
    assert result.exit_code == 0, out
    assert str(tmp_path / "plan_Geo.pdf") in out
    assert "-a_ullr 5.0 10.0 15.0 0.0" in out


def test_fit_writes_footprint(config, tmp_path):
    target = tmp_path / "fp.geojson"
    result, out = _run(
        "fit", "-c", str(config),
        "--north", "10", "--south", "0", "--east", "20", "--west", "0", *SIZES,
        "--footprint", str(target),
    )
    assert result.exit_code == 0, out
    assert target.exists()


def test_fit_log_file(config, tmp_path):
    log_file = tmp_path / "run.log"
    result, out = _run(
        "fit", "-c", str(config),
        "--north", "10", "--south", "0", "--east", "20", "--west", "0", *SIZES,
        "--log-file", str(log_file), "--verbose",
    )
    assert result.exit_code == 0, out
    text = log_file.read_text(encoding="utf-8")
    assert "Pillarboxing (longitude) adjustment: 5.0" in text


def test_fit_requires_extent(config):
    result, out = _run("fit", "-c", str(config), *SIZES)
    assert result.exit_code == 2
    assert "viewport extent is required" in out


def test_fit_rejects_edges_mixed_with_extent(config):
    result, out = _run(
        "fit", "-c", str(config),
        "--north", "50", "--extent", "0", "0", "1000000", "1000000", *SIZES,
    )
    assert result.exit_code == 2
    assert "--north cannot be combined with --extent" in out
    assert "Fitted:" not in out


def test_fit_rejects_incomplete_edges(config):
    result, out = _run(
        "fit", "-c", str(config),
        "--north", "10", "--south", "0", "--east", "20", *SIZES,
    )
    assert result.exit_code == 2
    assert "incomplete viewport edges: missing --west" in out


def test_fit_rejects_zero_size(config):
    result, out = _run(
        "fit", "-c", str(config),
        "--north", "10", "--south", "0", "--east", "20", "--west", "0",
        "--viewport-width", "0", "--viewport-height", "1000",
        "--content-width", "500", "--content-height", "1000",
    )
    assert result.exit_code == 2
    assert "width must be positive" in out


def test_fit_dry_run(config):
    result, out = _run("fit", "-c", str(config), *SIZES, "--dry-run")
    assert result.exit_code == 0, out
    assert "source_crs: EPSG:3857" in out


def test_layout(config):
    result, out = _run(
        "layout", "-c", str(config),
        "--canvas-width", "1000", "--canvas-height", "1000",
        "--content-width", "1000", "--content-height", "500",
    )
    assert result.exit_code == 0, out
    assert "Canvas: 2000.0 x 2000.0" in out
    assert "scale=2.0 offset=(0.0, 500.0)" in out


def test_show_config(config):
    result, out = _run("show-config", "-c", str(config))
    assert result.exit_code == 0, out
    assert "target_crs: EPSG:4326" in out
