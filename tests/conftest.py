"""Shared fixtures for the testing of functionality of Runselect."""
from __future__ import annotations

# Standard Imports
import os

# Third-Party Imports
import pytest

# Runselect Imports
from runselect.history.memory_job import MemoryJob
from runselect.logic.context import SelectionContext
from runselect.utils import log
from runselect.utils.structs import (
    FileParameterValue,
    ParametersAction,
    Run,
    RunResult,
    StringParameterValue,
)


SOURCES_DIR = os.path.join(os.path.split(__file__)[0], "sources")


def make_run(number: int, result: RunResult = RunResult.SUCCESS, **parameters: str) -> Run:
    """Creates the run with the parameters contributed by single action

    :param int number: number of the run
    :param RunResult result: result of the run
    :param dict parameters: parameters of the run
    :return: new run
    """
    return Run(
        number,
        result=result,
        actions=[
            ParametersAction(
                [StringParameterValue(name, value) for name, value in parameters.items()]
            )
        ],
    )


@pytest.fixture()
def run_factory():
    """
    :returns: function creating the runs with single contribution of string parameters
    """
    yield make_run


@pytest.fixture(autouse=True)
def reset_log():
    """Resets the global state of the log after each test"""
    verbosity, color_output = log.VERBOSITY, log.COLOR_OUTPUT
    log.COLOR_OUTPUT = False
    yield
    log.VERBOSITY, log.COLOR_OUTPUT = verbosity, color_output


@pytest.fixture()
def history_file():
    """
    :returns: path to the YAML history with six runs
    """
    yield os.path.join(SOURCES_DIR, "history.yml")


@pytest.fixture()
def selection_config_file():
    """
    :returns: path to the YAML configuration of the selection
    """
    yield os.path.join(SOURCES_DIR, "selection.yml")


@pytest.fixture()
def debug_messages():
    """
    :returns: list collecting the debug messages of the context
    """
    yield []


@pytest.fixture()
def context(debug_messages):
    """
    :returns: fresh selection context, with debug messages collected to debug_messages
    """
    yield SelectionContext({"B": "main"}, debug_sink=debug_messages.append)


@pytest.fixture()
def release_job():
    """Job with the history as follows (from the oldest):

      1. SUCCESS, STAGE=test, BRANCH=main
      2. FAILURE, STAGE=release, BRANCH=main
      3. SUCCESS, STAGE=release, BRANCH=develop
      4. UNSTABLE, STAGE=release, BRANCH=main, ARTIFACT is file parameter
      5. SUCCESS, STAGE=release, BRANCH=main, running

    :returns: in-memory job
    """
    running_run = make_run(5, STAGE="release", BRANCH="main")
    running_run.building = True
    unstable_run = make_run(4, RunResult.UNSTABLE, STAGE="release", BRANCH="main")
    unstable_run.actions.append(ParametersAction([FileParameterValue("ARTIFACT", "build.zip")]))
    yield MemoryJob(
        "release",
        [
            make_run(1, STAGE="test", BRANCH="main"),
            make_run(2, RunResult.FAILURE, STAGE="release", BRANCH="main"),
            make_run(3, STAGE="release", BRANCH="develop"),
            unstable_run,
            running_run,
        ],
    )
