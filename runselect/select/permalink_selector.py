"""Selection of the run referenced by the permalink, e.g. 'lastStableRun'"""
from __future__ import annotations

# Standard Imports
from typing import TYPE_CHECKING, Optional

# Third-Party Imports

# Runselect Imports
from runselect.history.abstract_job import PERMALINKS
from runselect.select.abstract_specific_selector import AbstractSpecificRunSelector
from runselect.utils.exceptions import InvalidParameterException

if TYPE_CHECKING:
    from runselect.history.abstract_job import AbstractJob
    from runselect.logic.context import SelectionContext
    from runselect.utils.structs import Run


class PermalinkRunSelector(AbstractSpecificRunSelector):
    display_name = "Permalink"

    def __init__(self, permalink_id: str) -> None:
        """
        :param str permalink_id: identifier of the permalink
        :raises InvalidParameterException: when the permalink is not supported
        """
        if permalink_id not in PERMALINKS:
            raise InvalidParameterException(
                "permalink", permalink_id, f"(choose from {', '.join(PERMALINKS)})"
            )
        self.permalink_id: str = permalink_id

    def locate(self, job: AbstractJob, context: SelectionContext) -> Optional[Run]:
        run = job.get_permalink(self.permalink_id)
        if run is None:
            context.log_debug(
                "{0}: {1} has no such run", self.get_display_name(), job.get_display_name()
            )
        return run

    def get_display_name(self) -> str:
        return f"{self.display_name} ({self.permalink_id})"
