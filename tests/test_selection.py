"""Tests of the driver of the selection, i.e. of the cooperation of selectors and filters"""
from __future__ import annotations

# Standard Imports

# Third-Party Imports
import pytest

# Runselect Imports
from runselect.filter.parameters_filter import ParametersRunFilter
from runselect.history.memory_job import MemoryJob
from runselect.logic import selection
from runselect.logic.context import SelectionContext
from runselect.select.number_selector import RunNumberSelector
from runselect.select.permalink_selector import PermalinkRunSelector
from runselect.select.status_selector import StatusRunSelector
from runselect.utils import log
from runselect.utils.structs import RunStatus


class BrokenJob(MemoryJob):
    """Job whose history becomes unavailable in the middle of the selection"""

    def get_history(self):
        raise OSError("history is unavailable")


def test_select_by_parameters(run_factory):
    """Test selecting the most recent run with the given parameter"""
    job = MemoryJob("pipeline", [run_factory(1, STAGE="test"), run_factory(2, STAGE="release")])
    context = SelectionContext()
    selected = selection.select_run(
        job, StatusRunSelector(RunStatus.COMPLETED), ParametersRunFilter("STAGE=test"), context
    )
    assert selected.number == 1
    assert context.last_match == selected
    assert context.last_candidate == selected

    release_context = SelectionContext()
    selected = selection.select_run(
        job, StatusRunSelector(), ParametersRunFilter("STAGE=release"), release_context
    )
    assert selected.number == 2

    nothing_context = SelectionContext()
    assert (
        selection.select_run(
            job, StatusRunSelector(), ParametersRunFilter("STAGE=deploy"), nothing_context
        )
        is None
    )
    assert nothing_context.last_match is None
    assert nothing_context.last_candidate.number == 1


def test_select_without_filter(release_job, context):
    """Test that missing filter accepts the first candidate"""
    assert selection.select_run(release_job, StatusRunSelector(), None, context).number == 4


def test_select_with_variables(release_job, context, debug_messages):
    """Test selection parameterized by the variables of the context"""
    selected = selection.select_run(
        release_job,
        StatusRunSelector(RunStatus.SUCCESSFUL),
        ParametersRunFilter("STAGE=release,BRANCH=${B}"),
        context,
    )
    assert selected.number == 4
    assert debug_messages == []

    context = SelectionContext({"B": "develop"}, debug_sink=debug_messages.append)
    selected = selection.select_run(
        release_job,
        StatusRunSelector(RunStatus.SUCCESSFUL),
        ParametersRunFilter("STAGE=release,BRANCH=${B}"),
        context,
    )
    assert selected.number == 3
    assert debug_messages == ["Parameters (STAGE=release,BRANCH=${B}): #4 is declined"]


def test_select_multiple_runs(release_job, context):
    """Test selecting several runs within one sequence"""
    selected = selection.select_runs(
        release_job, StatusRunSelector(), ParametersRunFilter("STAGE=release"), context, count=5
    )
    assert [run.number for run in selected] == [4, 3, 2]
    assert context.last_match.number == 2

    assert selection.select_runs(release_job, StatusRunSelector(), None, SelectionContext()) == [
        release_job.get_run_by_number(4)
    ]


def test_rejected_specific_run(release_job, context, debug_messages):
    """Test that the selection terminates when the only candidate is rejected"""
    selected = selection.select_run(
        release_job, RunNumberSelector(1), ParametersRunFilter("STAGE=release"), context
    )
    assert selected is None
    assert context.last_match is None
    assert debug_messages == [
        "Parameters (STAGE=release): #1 is declined",
        "Specific run (1): #1 was offered repeatedly",
    ]

    # The run is selected only once
    accepted_context = SelectionContext()
    assert [
        run.number
        for run in selection.select_runs(
            release_job, PermalinkRunSelector("lastStableRun"), None, accepted_context, count=3
        )
    ] == [3]


def test_selection_log(release_job, capsys):
    """Test that the selection reports the accepted run in the verbose mode"""
    log.VERBOSITY = log.VERBOSE_INFO
    selection.select_run(release_job, StatusRunSelector(), None, SelectionContext())
    assert "Latest run with status (completed): selected #4" in capsys.readouterr().out


def test_selection_failure_propagates(context):
    """Test that the failure of the history is propagated out of the selection"""
    with pytest.raises(OSError):
        selection.select_run(BrokenJob("broken"), StatusRunSelector(), None, context)
