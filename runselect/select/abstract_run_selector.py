"""Base Class for different notions of selecting runs from the history of the job

This class is not meant to be instantiated and serves as base point for creating
new notions of selecting runs. Each selector enumerates the candidate runs one by one:
every call of `get_next` returns the next candidate, which is then consulted by the chain
of filters, or None if there is no candidate left.

The enumeration order is left to the concrete selector, however, the selector invoked again
with the same context must never re-offer the candidate it offered last time. Otherwise, the
selection could loop forever on the candidate rejected by the filters.
"""
from __future__ import annotations

# Standard Imports
from typing import TYPE_CHECKING, Optional
import abc

# Third-Party Imports

# Runselect Imports

if TYPE_CHECKING:
    from runselect.history.abstract_job import AbstractJob
    from runselect.logic.context import SelectionContext
    from runselect.utils.structs import Run


class AbstractRunSelector(abc.ABC):
    """Base interface for selecting runs in history"""

    display_name: str = "Run selector"

    @abc.abstractmethod
    def get_next(self, job: AbstractJob, context: SelectionContext) -> Optional[Run]:
        """Returns the next candidate run of the job

        The call may block on reading the history of the job; the interruption of the call
        (KeyboardInterrupt) is always propagated.

        :param job: the job to pick a run from
        :param context: context of the current selection sequence
        :return: next candidate run or None if there are no candidates left
        :raises OSError: if the history of the job cannot be retrieved
        """

    def get_display_name(self) -> str:
        """
        :return: human-readable name of the selector including its configuration
        """
        return self.display_name

    def __str__(self) -> str:
        return self.get_display_name()
