# src/gcharness/cli/run_cmds.py

import asyncio
from pathlib import Path

import attrs
import click
import structlog
from rich.console import Console
from rich.table import Table

from gcharness.cli.utils import command_options, setup_logging_from_context
from gcharness.config import load_config
from gcharness.exceptions import ConfigurationError
from gcharness.process import get_runner
from gcharness.scenarios import DriverReport, ScenarioDriver, build_scenarios
from gcharness.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.run")

VERDICT_STYLES = {"PASS": "bold green", "FAIL": "bold red"}


def render_report(report: DriverReport, console: Console, dump_output: bool = True) -> None:
    """Print a summary table, then every violation of the failed scenarios."""
    table = Table(title="Explicit GC scenarios")
    table.add_column("Scenario")
    table.add_column("Verdict")
    table.add_column("Exit code", justify="right")
    table.add_column("Checks", justify="right")
    table.add_column("Failures", justify="right")

    for outcome in report.outcomes:
        verdict = outcome.verdict
        exit_code = str(outcome.captured.exit_code) if outcome.captured else "-"
        table.add_row(
            outcome.name,
            f"[{VERDICT_STYLES.get(verdict, '')}]{verdict}[/]",
            exit_code,
            str(len(outcome.results)),
            str(len(outcome.failures)) if outcome.results else "-",
        )
    console.print(table)

    for outcome in report.failed:
        console.rule(f"[bold red]{outcome.name}")
        if outcome.error_message:
            console.print(f"Error: {outcome.error_message}", markup=False)
        for failure in outcome.failures:
            console.print(f"[{failure.kind.value}] {failure.message}", markup=False)
        if dump_output and outcome.captured is not None:
            console.print(outcome.captured.dump(), markup=False, highlight=False)


@click.command(name="run")
@click.option("--runtime", default=None, help="Runtime executable to launch (overrides config).")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0),
    default=None,
    help="Seconds each child may run before it is killed; 0 waits forever.",
)
@click.option(
    "--stream",
    type=click.Choice(["stdout", "stderr", "both"]),
    default=None,
    help="Which captured stream markers are matched against.",
)
@click.option(
    "-s",
    "--scenario",
    "scenario_names",
    multiple=True,
    help="Only run the named scenario (repeatable).",
)
@click.option("--dump-output/--no-dump-output", default=True, show_default=True, help="Print captured output of failed scenarios.")
@command_options
@click.pass_context
def run_cli(
    ctx: click.Context,
    config_path: Path | None,
    runtime: str | None,
    timeout: float | None,
    stream: str | None,
    scenario_names: tuple[str, ...],
    dump_output: bool,
    **kwargs,
):
    """Launch every scenario's child process and check its GC log markers."""
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
        default_log_level="WARNING",
    )
    log.info("Executing 'run' command", config_path=str(config_path) if config_path else None)

    try:
        config = load_config(config_path)
        if config.config_file_path and not (kwargs.get("log_level") or ctx.obj.get("LOG_LEVEL")):
            setup_logging_from_context(
                ctx,
                local_log_level=config.global_config.log_level,
                local_log_file=kwargs.get("log_file"),
                local_json_logs=kwargs.get("json_logs"),
            )
        overrides = {
            key: value
            for key, value in {"runtime": runtime, "timeout": timeout, "stream": stream}.items()
            if value is not None
        }
        if overrides:
            config = attrs.evolve(config, harness=attrs.evolve(config.harness, **overrides))
        scenarios = build_scenarios(config, scenario_names)
        runner = get_runner(config.harness.runner, timeout=config.harness.effective_timeout)
    except (ConfigurationError, KeyError, ValueError) as e:
        log.error("Failed to prepare scenarios", error=str(e))
        click.echo(f"Error: Configuration problem: {e}", err=True)
        ctx.exit(2)

    driver = ScenarioDriver(runner, stream=config.harness.stream)
    try:
        report = asyncio.run(driver.run_all(scenarios))
    except KeyboardInterrupt:
        log.warning("Run interrupted by KeyboardInterrupt (CTRL-C).")
        ctx.exit(130)

    render_report(report, Console(), dump_output=dump_output)
    ctx.exit(report.exit_code)

# 🔼⚙️
