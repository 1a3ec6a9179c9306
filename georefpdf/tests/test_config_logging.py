import sys
from pathlib import Path

import pytest

from georefpdf.globals import configs, directories
from georefpdf.globals.config_models import FitConfig, build_fit_config, read_config_file
from georefpdf.globals.logutil import ANSI_ESCAPE, Logger, default_log_path, info, warn


def test_missing_config_uses_defaults(tmp_path, capsys):
    cfg = read_config_file(tmp_path / "absent.yml")
    assert cfg == FitConfig()
    assert cfg.source_crs == configs.SOURCE_CRS
    assert "Config not found" in capsys.readouterr().out


def test_missing_default_config_only_warns(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(directories, "CONFIG_DIR", tmp_path / "config")
    cfg = read_config_file()
    assert cfg == FitConfig()
    out = ANSI_ESCAPE.sub("", capsys.readouterr().out)
    assert "[WARNING] No config at" in out
    assert "[ERROR]" not in out


def test_read_config_file(tmp_path):
    path = tmp_path / "georefpdf.yml"
    path.write_text(
        "source_crs: EPSG:4326\n"
        "output_suffix: _wgs84\n"
        "hidpi_ratio: 1\n"
        f"log_dir: {tmp_path / 'logs'}\n"
        "verbose: true\n",
        encoding="utf-8",
    )
    cfg = read_config_file(str(path))
    assert cfg.source_crs == "EPSG:4326"
    assert cfg.target_crs == configs.TARGET_CRS
    assert cfg.output_suffix == "_wgs84"
    assert cfg.hidpi_ratio == 1.0
    assert cfg.log_dir == tmp_path / "logs"
    assert cfg.verbose is True


@pytest.mark.parametrize(
    "raw",
    [
        {"output_suffix": ""},
        {"source_crs": 3857},
        {"hidpi_ratio": 0},
        {"hidpi_ratio": "2"},
        {"verbose": "yes"},
    ],
)
def test_malformed_config_rejected(raw):
    with pytest.raises(ValueError):
        build_fit_config(raw)


def test_non_mapping_config_rejected(tmp_path):
    path = tmp_path / "list.yml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        read_config_file(path)


def test_log_helpers_prefix_level(capsys):
    info("hello")
    warn("careful")
    out = ANSI_ESCAPE.sub("", capsys.readouterr().out)
    assert "[INFO] hello" in out
    assert "[WARNING] careful" in out


def test_default_log_path(tmp_path):
    path = default_log_path(tmp_path)
    assert path.parent == tmp_path
    assert path.name.startswith(configs.LOG_FILE_PREFIX)
    assert path.suffix == ".log"


def test_logger_tees_to_file(tmp_path):
    log_path = tmp_path / "logs" / "run.log"
    before = sys.stdout
    with Logger(log_path):
        info("written to both")
    assert sys.stdout is before
    text = Path(log_path).read_text(encoding="utf-8")
    assert "[INFO] written to both" in text
    assert "\x1b[" not in text
