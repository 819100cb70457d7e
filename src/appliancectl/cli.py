"""
Command-line interface for appliance controller.

Provides commands for running the appliance session and inspecting device kinds.
"""

import logging
import sys
from pathlib import Path

import click

from appliancectl import __version__
from appliancectl.core.config import (
    DEFAULT_CONFIG_FILE,
    Config,
    get_default_config,
    load_config,
    save_config,
)
from appliancectl.core.manager import get_manager
from appliancectl.core.models import DeviceKind
from appliancectl.devices.factory import (
    available_kinds,
    create_device,
    create_drill,
    create_refrigerator,
)
from appliancectl.sinks.base import LoggerType, create_logger
from appliancectl.ui import ConsoleUI

logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool, config: Config) -> None:
    """Set up diagnostic logging from verbosity flag and config."""
    level = logging.DEBUG if verbose else getattr(logging, config.log_level.upper(), logging.WARNING)
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("appliancectl").setLevel(level)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="appliancectl")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option(
    "-c", "--config", "config_path", type=click.Path(exists=True, path_type=Path),
    help="Path to config file"
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """Appliance Controller - Register appliances and report their power draw."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = load_config(config_path)
    _configure_logging(verbose, ctx.obj["config"])

    if ctx.invoked_subcommand is None:
        ctx.invoke(run_cmd)


@main.command("run")
@click.option(
    "--sink", "-s", help="Event logger type (console or file, default from config)"
)
@click.option(
    "--log-file", "-l", type=click.Path(path_type=Path),
    help="Event log file for the file sink"
)
@click.pass_context
def run_cmd(ctx: click.Context, sink: str | None = None, log_file: Path | None = None) -> None:
    """Register the standard appliances, switch them on and report power."""
    config: Config = ctx.obj["config"]
    sink = sink or config.logging.sink
    log_file = log_file or config.logging.log_file

    event_logger = create_logger(sink, log_file)
    if event_logger is None:
        choices = ", ".join(t.value for t in LoggerType)
        click.echo(f"Error: Unknown logger type '{sink}' (expected {choices})", err=True)
        sys.exit(1)

    logger.debug(f"Using {event_logger.__class__.__name__}")

    try:
        manager = get_manager(event_logger)
        manager.add_device(create_refrigerator())
        manager.add_device(create_drill())

        manager.turn_on_all()

        ui = ConsoleUI(manager, event_logger)
        ui.show_devices()
        ui.show_total_power()
    finally:
        event_logger.close()


@main.command("kinds")
@click.pass_context
def kinds_cmd(ctx: click.Context) -> None:
    """List device kinds that can be created."""
    verbose = ctx.obj.get("verbose", False)
    kinds = available_kinds()

    click.echo(f"{'KIND':<15} {'CATEGORY':<15}")
    click.echo("-" * 30)

    for kind in kinds:
        click.echo(f"{kind.value:<15} {kind.category.value:<15}")

    if verbose:
        click.echo(f"\n{len(kinds)} kind(s) available")


@main.command("describe")
@click.argument("kind", type=click.Choice([k.value for k in DeviceKind]))
def describe_cmd(kind: str) -> None:
    """Show the description of a newly created device.

    KIND is the device kind (e.g., 'refrigerator' or 'drill').
    """
    device = create_device(DeviceKind(kind))
    click.echo(device.describe())


@main.command("init-config")
@click.argument("path", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config file")
def init_config_cmd(path: Path | None, force: bool) -> None:
    """Write the default configuration file.

    PATH defaults to ~/.config/appliancectl/config.yaml.
    """
    path = path or DEFAULT_CONFIG_FILE

    if path.exists() and not force:
        click.echo(f"Error: {path} already exists (use --force to overwrite)", err=True)
        sys.exit(1)

    save_config(get_default_config(), path)
    click.echo(f"Wrote default config to {path}")


if __name__ == "__main__":
    main()
