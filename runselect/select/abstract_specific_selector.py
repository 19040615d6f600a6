"""Base Class for selectors that identify exactly one specific run

Some selectors, e.g. the one selecting the run with the given number, are single-valued:
they have no meaningful notion of the next candidate. Such selectors implement only
the `locate` method, while the `get_next` is sealed and makes sure that the located run is
offered only until some run is accepted in the current selection sequence.
"""
from __future__ import annotations

# Standard Imports
from typing import TYPE_CHECKING, Any, Optional
import abc

# Third-Party Imports

# Runselect Imports
from runselect.select.abstract_run_selector import AbstractRunSelector

if TYPE_CHECKING:
    from runselect.history.abstract_job import AbstractJob
    from runselect.logic.context import SelectionContext
    from runselect.utils.structs import Run


class AbstractSpecificRunSelector(AbstractRunSelector):
    """Selector enumerating only one run; override `locate` instead of `get_next`"""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Forbids the subclasses to override the sealed `get_next`

        :raises TypeError: when the subclass overrides `get_next`
        """
        super().__init_subclass__(**kwargs)
        if "get_next" in cls.__dict__:
            raise TypeError(
                f"{cls.__name__} cannot override get_next(), implement locate() instead"
            )

    def get_next(self, job: AbstractJob, context: SelectionContext) -> Optional[Run]:
        """Returns the located run, unless some run was already accepted in the sequence

        :param job: the job to pick a run from
        :param context: context of the current selection sequence
        :return: the located run, or None if the context already has the last match
        """
        if context.last_match is not None:
            return None
        return self.locate(job, context)

    @abc.abstractmethod
    def locate(self, job: AbstractJob, context: SelectionContext) -> Optional[Run]:
        """Looks up the specific run of the job

        :param job: the job to pick a run from
        :param context: context of the current selection sequence
        :return: the run to select or None
        :raises OSError: if the history of the job cannot be retrieved
        """
