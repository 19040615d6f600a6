"""Collections of test for runselect.select package"""
from __future__ import annotations

# Standard Imports

# Third-Party Imports
import pytest

# Runselect Imports
from runselect.history.memory_job import MemoryJob
from runselect.logic.context import SelectionContext
from runselect.select.abstract_run_selector import AbstractRunSelector
from runselect.select.abstract_specific_selector import AbstractSpecificRunSelector
from runselect.select.number_selector import RunNumberSelector
from runselect.select.permalink_selector import PermalinkRunSelector
from runselect.select.status_selector import StatusRunSelector
from runselect.utils.exceptions import InvalidParameterException
from runselect.utils.structs import RunStatus


class CountingSpecificSelector(AbstractSpecificRunSelector):
    """Specific selector locating always the same run and counting the lookups"""

    def __init__(self, run):
        self.run = run
        self.locate_calls = 0

    def locate(self, job, context):
        self.locate_calls += 1
        return self.run


class BrokenJob(MemoryJob):
    """Job whose history cannot be read"""

    def __init__(self, error):
        super().__init__("broken")
        self.error = error

    def get_history(self):
        raise self.error


def test_base_select():
    """Dummy test, that base selections are correctly installed and cannot be instantiated"""
    with pytest.raises(TypeError):
        _ = AbstractRunSelector()

    with pytest.raises(TypeError):
        _ = AbstractSpecificRunSelector()


def test_specific_selector_is_sealed():
    """Test that specific selectors cannot override the sealed get_next"""
    with pytest.raises(TypeError) as exc:

        class _OverridingSelector(AbstractSpecificRunSelector):
            def get_next(self, job, context):
                return None

            def locate(self, job, context):
                return None

    assert "implement locate() instead" in str(exc.value)


def test_single_match_exhaustion(release_job, context):
    """Test that the specific selector offers nothing once the context has the last match"""
    located_run = release_job.get_run_by_number(2)
    selector = CountingSpecificSelector(located_run)

    assert selector.get_next(release_job, context) == located_run
    assert selector.locate_calls == 1

    context.record_match(located_run)
    assert selector.get_next(release_job, context) is None
    assert selector.get_next(release_job, context) is None
    assert selector.locate_calls == 1


def test_single_match_without_match(release_job, context):
    """Test that the specific selector keeps locating until some run is accepted"""
    selector = CountingSpecificSelector(release_job.get_run_by_number(2))

    selector.get_next(release_job, context)
    context.record_candidate(release_job.get_run_by_number(2))
    selector.get_next(release_job, context)
    assert selector.locate_calls == 2

    # Match of any other selector of the sequence exhausts the specific selector as well
    context.record_match(release_job.get_run_by_number(1))
    assert selector.get_next(release_job, context) is None
    assert selector.locate_calls == 2


def test_status_selector(release_job, context):
    """Test walking the history with the status selector"""
    completed = StatusRunSelector()
    assert completed.get_display_name() == "Latest run with status (completed)"

    # Running run #5 is skipped, the rest is walked from the newest
    offered = []
    while (run := completed.get_next(release_job, context)) is not None:
        offered.append(run.number)
        context.record_candidate(run)
    assert offered == [4, 3, 2, 1]

    expected_first_runs = {
        RunStatus.ANY: 5,
        RunStatus.COMPLETED: 4,
        RunStatus.SUCCESSFUL: 4,
        RunStatus.STABLE: 3,
        RunStatus.UNSTABLE: 4,
        RunStatus.FAILED: 2,
        RunStatus.UNSUCCESSFUL: 4,
    }
    for status, number in expected_first_runs.items():
        run = StatusRunSelector(status).get_next(release_job, SelectionContext())
        assert run.number == number

    # Stable runs are offered one after another
    stable_context = SelectionContext()
    stable = StatusRunSelector(RunStatus.STABLE)
    first = stable.get_next(release_job, stable_context)
    stable_context.record_candidate(first)
    second = stable.get_next(release_job, stable_context)
    stable_context.record_candidate(second)
    assert (first.number, second.number) == (3, 1)
    assert stable.get_next(release_job, stable_context) is None


def test_status_selector_empty_history(context):
    """Test that selector on empty history yields no candidates"""
    assert StatusRunSelector(RunStatus.ANY).get_next(MemoryJob("empty"), context) is None


def test_status_selector_sees_new_runs(release_job, run_factory):
    """Test that the history may grow between the calls"""
    selector = StatusRunSelector(RunStatus.STABLE)
    assert selector.get_next(release_job, SelectionContext()).number == 3

    release_job.add_run(run_factory(6, STAGE="release"))
    assert selector.get_next(release_job, SelectionContext()).number == 6


def test_run_number_selector(release_job, context, debug_messages):
    """Test selecting the run by its (possibly parameterized) number"""
    assert RunNumberSelector(3).get_next(release_job, context).number == 3
    assert RunNumberSelector(" 2 ").get_next(release_job, context).number == 2

    context.env_vars["UPSTREAM_NUMBER"] = "4"
    selector = RunNumberSelector("${UPSTREAM_NUMBER}")
    assert selector.get_display_name() == "Specific run (${UPSTREAM_NUMBER})"
    assert selector.get_next(release_job, context).number == 4

    assert RunNumberSelector("42").get_next(release_job, context) is None
    assert "Specific run (42): run #42 does not exist" in debug_messages

    assert RunNumberSelector("${UNKNOWN}").get_next(release_job, context) is None
    assert "Specific run (${UNKNOWN}): '${UNKNOWN}' is not a valid run number" in debug_messages


def test_permalink_selector(release_job, context):
    """Test selecting the run referenced by the permalinks"""
    expected_runs = {
        "lastRun": 5,
        "lastCompletedRun": 4,
        "lastSuccessfulRun": 4,
        "lastStableRun": 3,
        "lastUnstableRun": 4,
        "lastFailedRun": 2,
        "lastUnsuccessfulRun": 4,
    }
    for permalink_id, number in expected_runs.items():
        selector = PermalinkRunSelector(permalink_id)
        assert selector.get_next(release_job, SelectionContext()).number == number
        assert selector.get_display_name() == f"Permalink ({permalink_id})"

    with pytest.raises(InvalidParameterException) as exc:
        PermalinkRunSelector("lastBestRun")
    assert "lastStableRun" in str(exc.value)

    assert PermalinkRunSelector("lastFailedRun").get_next(MemoryJob("empty"), context) is None


def test_history_failures_propagate(context):
    """Test that errors and interruptions while reading the history are propagated"""
    broken_job = BrokenJob(OSError("disk is gone"))
    with pytest.raises(OSError):
        StatusRunSelector().get_next(broken_job, context)
    with pytest.raises(OSError):
        RunNumberSelector(1).get_next(broken_job, context)
    with pytest.raises(OSError):
        PermalinkRunSelector("lastRun").get_next(broken_job, context)

    interrupted_job = BrokenJob(KeyboardInterrupt())
    with pytest.raises(KeyboardInterrupt):
        StatusRunSelector().get_next(interrupted_job, context)
    with pytest.raises(KeyboardInterrupt):
        RunNumberSelector(1).get_next(interrupted_job, context)
