# src/gcharness/cli/scenario_cmds.py

from pathlib import Path

import click
import structlog
from rich.console import Console
from rich.table import Table

from gcharness.cli.utils import command_options, setup_logging_from_context
from gcharness.config import load_config
from gcharness.exceptions import ConfigurationError
from gcharness.scenarios import build_scenarios
from gcharness.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.scenarios")


@click.command(name="scenarios")
@command_options
@click.pass_context
def scenarios_cli(ctx: click.Context, config_path: Path | None, **kwargs):
    """List configured scenarios with their command lines and markers."""
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
        default_log_level="WARNING",
    )
    log.info("Executing 'scenarios' command", config_path=str(config_path) if config_path else None)

    try:
        config = load_config(config_path)
        scenarios = build_scenarios(config)
    except (ConfigurationError, ValueError) as e:
        log.error("Failed to load scenarios", error=str(e))
        click.echo(f"Error: Configuration problem: {e}", err=True)
        ctx.exit(2)

    console = Console()
    for scenario in scenarios:
        table = Table(title=scenario.name, show_header=False, title_justify="left")
        table.add_column("Field", style="bold")
        table.add_column("Value", overflow="fold")
        if scenario.description:
            table.add_row("Description", scenario.description)
        table.add_row("Command", scenario.launch_spec.command_line)
        table.add_row("Must contain", "\n".join(scenario.patterns.required) or "-")
        table.add_row("Must not contain", "\n".join(scenario.patterns.forbidden) or "-")
        if scenario.expected_exit is not None:
            table.add_row("Exit value", str(scenario.expected_exit))
        console.print(table, markup=False)

# 🔼⚙️
