"""Abstract Base Class for filtering the candidate runs.

Each filter has to implement single method called:
  1. `is_selectable`: which takes the candidate run and the context of the selection
      and returns whether the candidate is acceptable

Filters must not modify the run nor keep any state between the calls, except the debug
messages logged through the context.
"""
from __future__ import annotations

# Standard Imports
from abc import abstractmethod, ABC
from typing import TYPE_CHECKING

# Third-Party Imports

# Runselect Imports
if TYPE_CHECKING:
    from runselect.logic.context import SelectionContext
    from runselect.utils.structs import Run


class AbstractRunFilter(ABC):
    """Abstract Base Class for all filters to implement"""

    display_name: str = "Run filter"

    @abstractmethod
    def is_selectable(self, run: Run, context: SelectionContext) -> bool:
        """Checks whether the candidate run is acceptable"""

    def get_display_name(self) -> str:
        """
        :return: human-readable name of the filter including its configuration
        """
        return self.display_name

    def __str__(self) -> str:
        return self.get_display_name()
