"""Abstraction of jobs owning the history of their runs"""
from __future__ import annotations

# Standard Imports
from abc import abstractmethod, ABC
from typing import Iterator, Optional

# Third-Party Imports

# Runselect Imports
from runselect.utils.structs import Run, RunStatus


class Permalink:
    """Named reference to the latest run satisfying given condition, e.g. 'lastStableRun'"""

    __slots__ = ["id", "status"]

    def __init__(self, permalink_id: str, status: RunStatus) -> None:
        """
        :param str permalink_id: identifier of the permalink
        :param RunStatus status: status the referenced run has to have
        """
        self.id = permalink_id
        self.status = status

    def resolve(self, job: AbstractJob) -> Optional[Run]:
        """
        :param AbstractJob job: job whose history is searched
        :return: the latest run satisfying the permalink or None
        """
        return job.get_last_run(self.status)


PERMALINKS: dict[str, Permalink] = {
    permalink.id: permalink
    for permalink in [
        Permalink("lastRun", RunStatus.ANY),
        Permalink("lastCompletedRun", RunStatus.COMPLETED),
        Permalink("lastSuccessfulRun", RunStatus.SUCCESSFUL),
        Permalink("lastStableRun", RunStatus.STABLE),
        Permalink("lastUnstableRun", RunStatus.UNSTABLE),
        Permalink("lastFailedRun", RunStatus.FAILED),
        Permalink("lastUnsuccessfulRun", RunStatus.UNSUCCESSFUL),
    ]
}


class AbstractJob(ABC):
    """Abstract Base Class for all jobs

    The history of the job is read-only from the perspective of the selection; the jobs are
    expected to provide consistent read of their history during one call of get_history().
    """

    @abstractmethod
    def get_name(self) -> str:
        """
        :returns: name of the job
        """

    @abstractmethod
    def get_history(self) -> list[Run]:
        """Returns the ordered history of the runs of the job, from the oldest to the newest.

        The history may grow between the calls.

        :returns: list of runs of the job
        :raises OSError: when the history cannot be retrieved
        """

    def walk_history(self) -> Iterator[Run]:
        """Iterates the history of the job from the newest run to the oldest one

        :returns: iterable stream of runs
        """
        yield from reversed(self.get_history())

    def get_runs_before(self, run: Run) -> Iterator[Run]:
        """Iterates the runs older than the given run, from the newest one

        :param Run run: run which bounds the walk (exclusively)
        :returns: iterable stream of runs older than run
        """
        for previous_run in self.walk_history():
            if previous_run.number < run.number:
                yield previous_run

    def get_run_by_number(self, number: int) -> Optional[Run]:
        """
        :param int number: number of the looked up run
        :returns: the run with the given number or None
        """
        for run in self.get_history():
            if run.number == number:
                return run
        return None

    def get_last_run(self, status: RunStatus = RunStatus.ANY) -> Optional[Run]:
        """
        :param RunStatus status: status the run has to have
        :returns: the newest run of the given status or None
        """
        for run in self.walk_history():
            if status.matches(run):
                return run
        return None

    def get_permalink(self, permalink_id: str) -> Optional[Run]:
        """Resolves the permalink, e.g. 'lastStableRun', to the run

        :param str permalink_id: identifier of the permalink
        :returns: the referenced run or None if there is no such run or permalink
        """
        permalink = PERMALINKS.get(permalink_id)
        return permalink.resolve(self) if permalink else None

    def get_display_name(self) -> str:
        return self.get_name()
