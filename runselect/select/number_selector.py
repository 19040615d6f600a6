"""Selection of the run with the specific number

The number can be parameterized by the variables of the selection, e.g. `${UPSTREAM_NUMBER}`.
"""
from __future__ import annotations

# Standard Imports
from typing import TYPE_CHECKING, Optional

# Third-Party Imports

# Runselect Imports
from runselect.select.abstract_specific_selector import AbstractSpecificRunSelector

if TYPE_CHECKING:
    from runselect.history.abstract_job import AbstractJob
    from runselect.logic.context import SelectionContext
    from runselect.utils.structs import Run


class RunNumberSelector(AbstractSpecificRunSelector):
    display_name = "Specific run"

    def __init__(self, run_number: str | int) -> None:
        """
        :param str run_number: number of the run, possibly with references to variables
        """
        self.run_number: str = str(run_number)

    def locate(self, job: AbstractJob, context: SelectionContext) -> Optional[Run]:
        """Expands the number and looks up the run with the number

        :param job: the job to pick a run from
        :param context: context of the current selection sequence
        :return: the run with the number or None if the number is invalid or missing
        """
        expanded_number = context.expand(self.run_number) or ""
        try:
            number = int(expanded_number.strip())
        except ValueError:
            context.log_debug(
                "{0}: '{1}' is not a valid run number", self.get_display_name(), expanded_number
            )
            return None
        run = job.get_run_by_number(number)
        if run is None:
            context.log_debug("{0}: run #{1} does not exist", self.get_display_name(), number)
        return run

    def get_display_name(self) -> str:
        return f"{self.display_name} ({self.run_number})"
