# georefpdf/cli/__main__.py
from pathlib import Path
from typing import Optional, Tuple

import typer

from georefpdf.globals.logutil import Logger, default_log_path, info, error, success, process_step, setting_config
from georefpdf.globals.config_models import FitConfig, read_config_file
from georefpdf.features.extent import (
    GeoBox,
    InvalidInput,
    fit as _fit,
    fit_to_canvas,
    hidpi_canvas,
    reproject_extent,
)

# --- Typer app (root has no options) ---
app = typer.Typer(no_args_is_help=True)


def _pick(cli_val, config_val):
    """Explicit flags win over YAML values."""
    return cli_val if cli_val is not None else config_val

def _given(values) -> bool:
    return bool(values) and all(v is not None for v in values)

def _start_logger(log_file: Optional[Path], cfg: FitConfig) -> Optional[Logger]:
    if log_file is None and cfg.log_dir is None:
        return None
    path = log_file or default_log_path(cfg.log_dir)
    return Logger(logfile_path=path)

def _resolve_viewport(north, south, east, west, extent, crs, cfg: FitConfig, verbose: bool) -> GeoBox:
    edges = {"--north": north, "--south": south, "--east": east, "--west": west}
    passed = [flag for flag, value in edges.items() if value is not None]
    if passed:
        if _given(extent):
            raise InvalidInput(f"{'/'.join(passed)} cannot be combined with --extent")
        if len(passed) < len(edges):
            missing = [flag for flag in edges if flag not in passed]
            raise InvalidInput(f"incomplete viewport edges: missing {'/'.join(missing)}")
        return GeoBox(north=north, south=south, east=east, west=west)
    if _given(extent):
        src = _pick(crs, cfg.source_crs)
        if verbose:
            process_step(f"Reprojecting extent {tuple(extent)} from {src} to {cfg.target_crs}...")
        return reproject_extent(tuple(extent), src_crs=src, dst_crs=cfg.target_crs)
    raise InvalidInput("a viewport extent is required (--north/--south/--east/--west or --extent)")


# --- SUBCOMMANDS ---
@app.command("fit")
def fit(
    # Viewport
    north: Optional[float] = typer.Option(None, "--north", help="Viewport north edge (degrees)", rich_help_panel="Viewport"),
    south: Optional[float] = typer.Option(None, "--south", help="Viewport south edge (degrees)", rich_help_panel="Viewport"),
    east: Optional[float] = typer.Option(None, "--east", help="Viewport east edge (degrees)", rich_help_panel="Viewport"),
    west: Optional[float] = typer.Option(None, "--west", help="Viewport west edge (degrees)", rich_help_panel="Viewport"),
    extent: Optional[Tuple[float, float, float, float]] = typer.Option(
        None, "--extent",
        help="Viewport extent MINX MINY MAXX MAXY in --crs units.",
        rich_help_panel="Viewport"
    ),
    crs: Optional[str] = typer.Option(None, "--crs", help="CRS of --extent (default from config, EPSG:3857)", rich_help_panel="Viewport"),
    viewport_width: float = typer.Option(..., "--viewport-width", help="Map viewport width in pixels", rich_help_panel="Viewport"),
    viewport_height: float = typer.Option(..., "--viewport-height", help="Map viewport height in pixels", rich_help_panel="Viewport"),
    # Content
    content_width: float = typer.Option(..., "--content-width", help="Page width (page units)", rich_help_panel="Content"),
    content_height: float = typer.Option(..., "--content-height", help="Page height (page units)", rich_help_panel="Content"),
    # I/O
    pdf: Optional[Path] = typer.Option(None, "--pdf", help="Source PDF; prints georeferencing parameters for it.", rich_help_panel="I/O"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Georeferenced output path (default <name>_Geo.pdf).", rich_help_panel="I/O"),
    footprint: Optional[Path] = typer.Option(None, "--footprint", help="Write the fitted box as .geojson/.shp.", rich_help_panel="I/O"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML file with settings. Flags override YAML.", rich_help_panel="I/O"),
    # Utility
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Mirror output into this log file", rich_help_panel="Utility"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print resolved config and exit", rich_help_panel="Utility"),
    verbose: Optional[bool] = typer.Option(None, "--verbose/--quiet", help="Log intermediate steps", rich_help_panel="Utility"),
):
    '''
    Fit a map viewport extent to the aspect ratio of a page.

    The fitted box is what the page covers when drawn centered inside the
    viewport; its corners are the upper-left/lower-right georeferencing
    coordinates.
    '''
    try:
        cfg = read_config_file(config)
    except ValueError as exc:
        error(str(exc))
        raise typer.Exit(code=2)
    verbose = bool(_pick(verbose, cfg.verbose))

    logger = _start_logger(log_file, cfg)
    try:
        if dry_run:
            info("Resolved configuration:")
            for k, v in cfg.as_dict().items():
                setting_config(f"  {k}: {v}")
            raise typer.Exit()

        try:
            viewport_geo = _resolve_viewport(north, south, east, west, extent, crs, cfg, verbose)
            box = _fit(
                viewport_geo,
                (viewport_width, viewport_height),
                (content_width, content_height),
                verbose=verbose,
            )
        except InvalidInput as exc:
            error(str(exc))
            raise typer.Exit(code=2)

        info(f"Viewport: N={viewport_geo.north} S={viewport_geo.south} E={viewport_geo.east} W={viewport_geo.west}")
        success(f"Fitted:   N={box.north} S={box.south} E={box.east} W={box.west}")
        info("ullr: " + " ".join(repr(v) for v in box.ullr))

        if pdf is not None:
            from georefpdf.features.georef import build_georef_params
            try:
                params = build_georef_params(
                    box, (content_width, content_height), pdf, output,
                    srs=cfg.target_crs, suffix=cfg.output_suffix, verbose=verbose,
                )
            except InvalidInput as exc:
                error(str(exc))
                raise typer.Exit(code=2)
            info(f"Output: {params.output}")
            info(f"Transform: {tuple(params.transform)[:6]}")
            info("Command: " + " ".join(params.gdal_translate_args()))

        if footprint is not None:
            from georefpdf.features.georef import export_footprint
            try:
                written = export_footprint(box, footprint, crs=cfg.target_crs, verbose=verbose)
            except ValueError as exc:
                error(str(exc))
                raise typer.Exit(code=2)
            success(f"Footprint written to {written}")
    finally:
        if logger is not None:
            Logger.teardown()


@app.command("layout")
def layout(
    canvas_width: float = typer.Option(..., "--canvas-width", help="Container width in CSS pixels"),
    canvas_height: float = typer.Option(..., "--canvas-height", help="Container height in CSS pixels"),
    content_width: float = typer.Option(..., "--content-width", help="Page width (page units)"),
    content_height: float = typer.Option(..., "--content-height", help="Page height (page units)"),
    hidpi: Optional[float] = typer.Option(None, "--hidpi", help="Device pixel ratio of the backing canvas"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML file with settings."),
):
    """Where the page lands when drawn contain-fitted on the overlay canvas."""
    try:
        cfg = read_config_file(config)
        canvas = hidpi_canvas((canvas_width, canvas_height), _pick(hidpi, cfg.hidpi_ratio))
        placement = fit_to_canvas(canvas, (content_width, content_height))
    except ValueError as exc:
        error(str(exc))
        raise typer.Exit(code=2)

    info(f"Canvas: {canvas.width} x {canvas.height}")
    success(
        f"scale={placement.scale} offset=({placement.offset_x}, {placement.offset_y}) "
        f"size=({placement.width}, {placement.height})"
    )


@app.command("show-config")
def show_config(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML file with settings."),
):
    """Print the resolved configuration."""
    try:
        cfg = read_config_file(config)
    except ValueError as exc:
        error(str(exc))
        raise typer.Exit(code=2)
    for k, v in cfg.as_dict().items():
        setting_config(f"  {k}: {v}")


def main():
    app()

if __name__ == "__main__":
    main()
