"""screencap CLI - Main entry point.

Provides commands for capturing screens, selections and windows, listing
screens, pruning old captures and managing the config file.

Exit codes:
    0: Success
    1: Any other error (format, quality, config, encoding, clipboard, launch)
    2: No screens found / screen not found
    3: Capture failed
    4: File save error
    5: Platform not supported
    13: Permission denied
"""

import sys
import time
from pathlib import Path
from typing import Any, NoReturn

import click
import yaml

from .. import __version__
from ..capture import CaptureOrchestrator
from ..config import ScreenshotSettings, default_config_path, load_settings, save_settings
from ..exceptions import ConfigurationError, ScreenshotException, exit_code_for
from ..hal import HALContainer
from ..logging import mark_logging_initialized, setup_logging
from ..model import CaptureMode, CaptureRequest
from ..persistence import prune_old_captures
from ..utils import copy_file_to_clipboard, open_file
from .formatters import format_artifact, format_screen_list

EXIT_SUCCESS = 0


def _fail(error: BaseException, verbose: bool = False) -> NoReturn:
    """Report an error on stderr and exit with its code."""
    click.echo(f"Error: {error}", err=True)
    if verbose and not isinstance(error, ScreenshotException):
        import traceback

        traceback.print_exception(type(error), error, error.__traceback__)
    sys.exit(exit_code_for(error))


def _settings(ctx: click.Context) -> ScreenshotSettings:
    """Load settings from the config file and apply command-line overrides."""
    obj: dict[str, Any] = ctx.obj

    if "settings" in obj:
        return obj["settings"]

    try:
        settings = load_settings(obj.get("config_path"))
    except ConfigurationError as e:
        _fail(e)

    overrides = {key: value for key, value in obj["overrides"].items() if value is not None}
    if overrides:
        settings = settings.model_copy(update=overrides)

    if settings.debug_mode and not obj["verbose"]:
        setup_logging(level="DEBUG", structured=False, colorize=False)

    obj["settings"] = settings
    return settings


def _hal(ctx: click.Context) -> HALContainer:
    hal = ctx.obj.get("hal")
    if hal is None:
        hal = HALContainer.create_default()
        ctx.obj["hal"] = hal
    return hal


def _deliver(ctx: click.Context, settings: ScreenshotSettings, hal: HALContainer, path: Path) -> None:
    """Run the optional clipboard and auto-open sinks for a written file."""
    if settings.copy_to_clipboard:
        try:
            copy_file_to_clipboard(path, hal.process_runner, hal.platform)
        except ScreenshotException as e:
            click.echo(f"Warning: could not copy to clipboard: {e}", err=True)
        else:
            if not ctx.obj["quiet"]:
                click.echo("Copied to clipboard")

    if settings.auto_open:
        open_file(path, hal.process_runner, hal.platform)


def _capture(
    ctx: click.Context, mode: CaptureMode, screen_index: int = 0, all_screens: bool = False
) -> None:
    settings = _settings(ctx)
    quiet = ctx.obj["quiet"]
    verbose = ctx.obj["verbose"]

    try:
        request = CaptureRequest.from_settings(settings, mode, screen_index)
    except ScreenshotException as e:
        _fail(e)

    if request.delay > 0 and not quiet:
        click.echo(f"Waiting {request.delay:g} seconds...")

    hal = _hal(ctx)
    orchestrator = CaptureOrchestrator(hal, sleep=ctx.obj.get("sleep", time.sleep))
    try:
        outcome = orchestrator.run(request, all_screens=all_screens)
    except Exception as e:
        _fail(e, verbose)
    finally:
        hal.cleanup()

    if outcome.error is not None:
        _fail(outcome.error, verbose)

    for artifact in outcome.artifacts:
        if not quiet:
            click.echo(format_artifact(artifact))
        _deliver(ctx, settings, hal, artifact.path)


@click.group()
@click.version_option(version=__version__, prog_name="screencap")
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to save captures in",
)
@click.option("--delay", "-d", type=click.FloatRange(min=0), help="Seconds to wait before capturing")
@click.option("--quiet", "-q", is_flag=True, help="Do not print the saved path")
@click.option("--format", "-f", "image_format", help="Image format: png, jpg, jpeg or webp")
@click.option("--quality", type=int, help="JPEG quality (1-100)")
@click.option("--clipboard", is_flag=True, help="Copy the capture to the clipboard")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file to use instead of the default location",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(
    ctx: click.Context,
    output: Path | None,
    delay: float | None,
    quiet: bool,
    image_format: str | None,
    quality: int | None,
    clipboard: bool,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """screencap - fast screenshot capture.

    Capture a full screen, a selected region or a single window to an image file.
    """
    ctx.ensure_object(dict)

    setup_logging(level="DEBUG" if verbose else "WARNING", structured=False, colorize=False)
    mark_logging_initialized()

    ctx.obj.update(
        quiet=quiet,
        verbose=verbose,
        config_path=config_path,
        overrides={
            "output_directory": output,
            "delay": delay,
            "default_format": image_format,
            "default_quality": quality,
            "copy_to_clipboard": True if clipboard else None,
        },
    )


@main.command()
@click.option("--screen", "-s", default=0, show_default=True, help="Screen index to capture")
@click.option("--all", "all_screens", is_flag=True, help="Capture every screen")
@click.pass_context
def fullscreen(ctx: click.Context, screen: int, all_screens: bool) -> None:
    """Capture a full screen."""
    _capture(ctx, CaptureMode.FULLSCREEN, screen_index=screen, all_screens=all_screens)


@main.command()
@click.pass_context
def selection(ctx: click.Context) -> None:
    """Capture an interactively selected region."""
    _capture(ctx, CaptureMode.SELECTION)


@main.command()
@click.pass_context
def window(ctx: click.Context) -> None:
    """Capture a single window."""
    _capture(ctx, CaptureMode.WINDOW)


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print as JSON")
@click.pass_context
def list_screens(ctx: click.Context, as_json: bool) -> None:
    """List available screens with resolution and position."""
    hal = _hal(ctx)
    try:
        monitors = CaptureOrchestrator(hal).list_screens()
    except ScreenshotException as e:
        _fail(e)
    finally:
        hal.cleanup()

    click.echo(format_screen_list(monitors, "json" if as_json else "text"))


@main.command()
@click.option("--days", type=click.IntRange(min=1), help="Delete captures older than this")
@click.pass_context
def cleanup(ctx: click.Context, days: int | None) -> None:
    """Delete old captures from the output directory."""
    settings = _settings(ctx)
    max_age = days or settings.cleanup_after_days

    if max_age is None:
        _fail(ConfigurationError("No retention configured; pass --days or set cleanup_after_days"))

    try:
        removed = prune_old_captures(Path(settings.output_directory).expanduser(), max_age)
    except ScreenshotException as e:
        _fail(e)

    if not ctx.obj["quiet"]:
        click.echo(f"Removed {len(removed)} file(s)")


@main.group()
def config() -> None:
    """Inspect or create the config file."""


@config.command("path")
@click.pass_context
def config_path_command(ctx: click.Context) -> None:
    """Print the config file location."""
    click.echo(str(ctx.obj.get("config_path") or default_config_path()))


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Print the effective settings as YAML."""
    settings = _settings(ctx)
    click.echo(yaml.safe_dump(settings.to_dict(), default_flow_style=False, sort_keys=False))


@config.command("init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_context
def config_init(ctx: click.Context, force: bool) -> None:
    """Write a config file with default values."""
    path = ctx.obj.get("config_path") or default_config_path()

    if path.exists() and not force:
        _fail(ConfigurationError(f"Config file already exists: {path} (use --force)"))

    try:
        written = save_settings(ScreenshotSettings(), path)
    except ConfigurationError as e:
        _fail(e)

    click.echo(f"Config written: {written}")
    sys.exit(EXIT_SUCCESS)


if __name__ == "__main__":
    main()
