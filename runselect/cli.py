"""Runselect can be run from the command line (if correctly installed) using the
command interface inspired by git.

The Command Line Interface is implemented using the Click_ library, which
allows both effective definition of new commands and finer parsing of the
command line arguments. The interface consists of the following commands:

    1. ``select``: selects the runs from the history of the job stored in the
    YAML file according to the selector, the chain of filters and the variables
    given either on the command line or in the configuration.

    2. ``log``: lists the runs in the history of the job, from the newest one.

.. _Click: https://click.palletsprojects.com/
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Optional

# Third-Party Imports
import click

# Runselect Imports
from runselect.history.yaml_job import YamlJob
from runselect.logic import config as runselect_config, factory, selection
from runselect.logic.context import SelectionContext
from runselect.utils import log, streams
from runselect.utils.environment import EnvVars
from runselect.utils.exceptions import (
    InvalidParameterException,
    MalformedHistoryException,
    UnsupportedModuleException,
)
import runselect


def print_version(_: click.Context, __: click.Option, value: bool) -> None:
    """Prints current version of Runselect and ends"""
    if value:
        log.write(f"Runselect {runselect.__version__}")
        exit(0)


@click.group()
@click.option("--no-color", "-nc", default=False, is_flag=True, help="Disables the colored output.")
@click.option(
    "--verbose",
    "-v",
    count=True,
    default=0,
    help=(
        "Increases the verbosity of the standard output. Verbosity is incremental, and each "
        "level increases the extent of output (-vv prints the rejections of the candidates)."
    ),
)
@click.option(
    "--version",
    help="Prints the current version of Runselect.",
    is_eager=True,
    is_flag=True,
    default=False,
    callback=print_version,
)
def cli(no_color: bool = False, verbose: int = 0, **_: Any) -> None:
    """Runselect selects the runs out of the history of the job.

    In order to select the most recent stable run with the given parameters run the
    following::

        runselect select history.yml -s status:stable -f parameters:STAGE=release
    """
    log.COLOR_OUTPUT = not no_color

    # set the verbosity level of the log
    if log.VERBOSITY < verbose:
        log.VERBOSITY = verbose


@cli.command("select")
@click.argument("history", type=click.Path(), metavar="<history>")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(),
    default=None,
    help="Loads the selector, filters and variables from the YAML configuration.",
)
@click.option(
    "--selector",
    "-s",
    default=None,
    metavar="<spec>",
    help=(
        "Selector enumerating the candidates, one of "
        f"{', '.join(factory.get_supported_selectors())} (e.g. ``status:stable``)."
    ),
)
@click.option(
    "--filter",
    "-f",
    "filters",
    multiple=True,
    metavar="<spec>",
    help=(
        "Filter of the candidates, one of "
        f"{', '.join(factory.get_supported_filters())}. Filters are applied in the given order."
    ),
)
@click.option(
    "--env",
    "-e",
    "env_assignments",
    multiple=True,
    metavar="<NAME=VALUE>",
    help="Sets the variable used for expansion of selectors and filters.",
)
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Selects up to <count> runs within one selection sequence.",
)
def select(
    history: str,
    config_path: Optional[str],
    selector: Optional[str],
    filters: tuple[str, ...],
    env_assignments: tuple[str, ...],
    count: Optional[int],
) -> None:
    """Selects the runs from the <history> of the job.

    The <history> is YAML file with the runs of the job. The options given on the command
    line take precedence over the configuration loaded by ``--config``.
    """
    config = (
        runselect_config.load_config(config_path)
        if config_path
        else runselect_config.Config("", {})
    )
    try:
        env_vars = EnvVars.from_mapping(config.get_environment())
        env_vars.update(EnvVars.from_assignments(env_assignments))
        run_selector = factory.selector_from_spec(selector or config.get_selector_spec())
        run_filter = factory.build_filter_chain(filters or config.get_filter_specs())
        job = YamlJob(history)

        context = SelectionContext(env_vars)
        log.msg_to_stdout(f"Selecting by {run_selector.get_display_name()}", log.VERBOSE_INFO)
        selected_runs = selection.select_runs(
            job, run_selector, run_filter, context, count or config.get_count()
        )
    except (
        InvalidParameterException,
        UnsupportedModuleException,
        MalformedHistoryException,
        OSError,
    ) as exc:
        log.error(str(exc), raised_exception=exc)
        return

    if not selected_runs:
        log.warn(f"no run of {log.highlight(job.get_display_name())} matches the criteria")
        exit(1)
    for run in selected_runs:
        log.minor_status("selected run", status=log.highlight(run.get_display_name()))


@cli.command("log")
@click.argument("history", type=click.Path(), metavar="<history>")
def history_log(history: str) -> None:
    """Lists the runs from the <history> of the job, from the newest one."""
    job = YamlJob(history)
    try:
        runs = list(job.walk_history())
        log.major_info(job.get_display_name(), no_title=True)
    except (MalformedHistoryException, OSError) as exc:
        log.error(str(exc), raised_exception=exc)
        return

    for run in runs:
        status = "RUNNING" if run.building else log.result_style(run.result)
        log.minor_status(run.get_display_name(), status=status)
        parameters = {parameter.name: parameter.value for parameter in run.get_parameters()}
        if parameters:
            log.write(streams.yaml_to_string(parameters), end="")


def launch_cli() -> None:
    """Launches the CLI and reports the interruption by user"""
    try:
        cli()
    except KeyboardInterrupt:
        log.error("interrupted by user")


if __name__ == "__main__":
    launch_cli()
