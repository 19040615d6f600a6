"""Status Selection walks the history from the newest run and offers runs of requested status

In particular:
  1. The first call offers the most recent run of the status;
  2. Each following call offers the nearest older run of the status than the last candidate.

With the status `completed` this is the "most recent run" selection.
"""
from __future__ import annotations

# Standard Imports
from typing import TYPE_CHECKING, Iterator, Optional

# Third-Party Imports

# Runselect Imports
from runselect.select.abstract_run_selector import AbstractRunSelector
from runselect.utils.structs import Run, RunStatus

if TYPE_CHECKING:
    from runselect.history.abstract_job import AbstractJob
    from runselect.logic.context import SelectionContext


class StatusRunSelector(AbstractRunSelector):
    """Implementation of selection of the most recent runs with given status"""

    display_name = "Latest run with status"

    def __init__(self, status: RunStatus = RunStatus.COMPLETED) -> None:
        """
        :param RunStatus status: status the offered runs have to have
        """
        self.status: RunStatus = status

    def get_next(self, job: AbstractJob, context: SelectionContext) -> Optional[Run]:
        """Offers the next older run of the status than the last candidate

        :param job: the job to pick a run from
        :param context: context of the current selection sequence
        :return: next run with the status or None if the history is exhausted
        """
        runs: Iterator[Run] = (
            job.walk_history()
            if context.last_candidate is None
            else job.get_runs_before(context.last_candidate)
        )
        for run in runs:
            if self.status.matches(run):
                return run
        return None

    def get_display_name(self) -> str:
        return f"{self.display_name} ({self.status.value})"
