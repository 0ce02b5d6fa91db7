# src/gcharness/cli/main.py

"""
Main CLI entry point for gcharness using Click.
Handles global options like logging level.
"""

from importlib.metadata import PackageNotFoundError, version

import click
import structlog

from gcharness.cli.run_cmds import run_cli
from gcharness.cli.scenario_cmds import scenarios_cli
from gcharness.cli.utils import logging_options, setup_logging_from_context
from gcharness.telemetry import StructLogger

try:
    __version__ = version("gcharness")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

log: StructLogger = structlog.get_logger("cli.main")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", package_name="gcharness")
@logging_options
@click.pass_context
def cli(
    ctx: click.Context,
    log_level: str | None,
    log_file: str | None,
    json_logs: bool | None,
):
    """
    gcharness: explicit garbage collection behaviour checks.

    Launches a runtime under each scenario's flags and checks its GC log for
    the markers the scenario requires or forbids.
    Configuration precedence: CLI options > Environment Variables > Config File > Defaults.
    """
    ctx.ensure_object(dict)

    ctx.obj["LOG_LEVEL"] = log_level
    ctx.obj["LOG_FILE"] = log_file
    ctx.obj["JSON_LOGS"] = json_logs if json_logs is not None else False

    setup_logging_from_context(
        ctx, default_log_level="WARNING"
    )
    log.debug(
        "Main CLI group initialized",
        log_level=log_level,
        log_file=log_file,
        json_logs=json_logs,
    )


cli.add_command(run_cli)
cli.add_command(scenarios_cli)

if __name__ == "__main__":
    cli()

# 🖥️⚙️
