"""Typed configuration model and YAML loading helpers.

Settings live in ``georefpdf.yml`` (in the project ``config`` directory
unless a path is given). Every key is optional; anything missing falls
back to the constants in :mod:`georefpdf.globals.configs`.

Example
-------
.. code-block:: yaml

    source_crs: EPSG:3857
    target_crs: EPSG:4326
    output_suffix: _Geo
    hidpi_ratio: 2.0
    log_dir: ~/georef-logs
    verbose: true

The public entry point is :func:`read_config_file`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Any
from pathlib import Path

import yaml

from georefpdf.globals.logutil import info, warn, error
from georefpdf.globals import directories, configs


# --- Dataclasses ---------------------------------------------------------
@dataclass
class FitConfig:
    """Runtime settings for fitting and georeferencing.

    CLI flags may still override these values.
    """

    source_crs: str = configs.SOURCE_CRS
    target_crs: str = configs.TARGET_CRS
    output_suffix: str = configs.OUTPUT_SUFFIX
    hidpi_ratio: float = configs.HIDPI_RATIO

    #logging
    log_dir: Path | None = None
    verbose: bool = False

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


# --- YAML loader ---------------------------------------------------------

def _resolve_path(path: Path | str | None) -> Path:
    """Resolve a config path or fall back to the project default."""
    if path is None:
        return directories.CONFIG_DIR / configs.CONFIG_FILENAME
    return Path(path).expanduser()

def load_yaml(path: Path, *, required: bool = True) -> Dict[str, Any]:
    """Load YAML file, returning an empty dict on failure with logging.

    A missing file is an error only when ``required``; the default project
    config is optional and its absence is just a warning.
    """
    try:
        info(f"Loading config from {path}...")
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        if required:
            error(f"Config not found at {path}; using defaults.")
        else:
            warn(f"No config at {path}; using defaults.")
        return {}
    except (OSError, yaml.YAMLError) as exc:
        error(f"Failed to load YAML config at {path}: {exc}")
        return {}

    if not isinstance(data, dict):
        raise ValueError(f"Config at {path} must be a mapping, got {type(data).__name__}.")
    info(f"Using config: {path}")
    return dict(data)

def build_fit_config(raw: Dict[str, Any]) -> FitConfig:
    """Convert raw dict from YAML into :class:`FitConfig`.

    Raises ValueError on values of the wrong type.
    """

    def _str(key: str, default: str) -> str:
        val = raw.get(key)
        if val is None:
            return default
        if not isinstance(val, str) or not val.strip():
            raise ValueError(f"Config key '{key}' must be a non-empty string, got {val!r}.")
        return val.strip()

    hidpi = raw.get("hidpi_ratio", configs.HIDPI_RATIO)
    if isinstance(hidpi, bool) or not isinstance(hidpi, (int, float)) or hidpi <= 0:
        raise ValueError(f"Config key 'hidpi_ratio' must be a positive number, got {hidpi!r}.")

    verbose = raw.get("verbose", False)
    if not isinstance(verbose, bool):
        raise ValueError(f"Config key 'verbose' must be true/false, got {verbose!r}.")

    log_dir = raw.get("log_dir")

    return FitConfig(
        source_crs=_str("source_crs", configs.SOURCE_CRS),
        target_crs=_str("target_crs", configs.TARGET_CRS),
        # an empty suffix would overwrite the source pdf
        output_suffix=_str("output_suffix", configs.OUTPUT_SUFFIX),
        hidpi_ratio=float(hidpi),
        log_dir=Path(log_dir).expanduser() if log_dir else None,
        verbose=verbose,
    )

def read_config_file(path: Path | str | None = None) -> FitConfig:
    """Read a YAML config file into a :class:`FitConfig`.

    Parameters
    ----------
    path
        Path to a YAML file, or ``None`` to use the project default
        (``<config dir>/georefpdf.yml``). A missing file yields defaults.
    """
    resolved = _resolve_path(path)
    return build_fit_config(load_yaml(resolved, required=path is not None))
