"""Job whose history is held in memory, used mainly for embedding the selection in other tools"""
from __future__ import annotations

# Standard Imports
from typing import Iterable

# Third-Party Imports

# Runselect Imports
from runselect.history.abstract_job import AbstractJob
from runselect.utils.structs import Run


class MemoryJob(AbstractJob):
    def __init__(self, name: str, runs: Iterable[Run] = ()) -> None:
        """
        :param str name: name of the job
        :param list runs: runs of the job, in arbitrary order
        """
        self.name: str = name
        self.runs: list[Run] = sorted(runs, key=lambda run: run.number)

    def get_name(self) -> str:
        return self.name

    def get_history(self) -> list[Run]:
        return list(self.runs)

    def add_run(self, run: Run) -> None:
        """Appends new run to the history of the job

        :param Run run: newly finished run
        """
        self.runs.append(run)
        self.runs.sort(key=lambda r: r.number)
