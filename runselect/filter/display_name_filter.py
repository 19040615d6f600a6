"""Filter of the runs with the particular display name"""
from __future__ import annotations

# Standard Imports
from typing import TYPE_CHECKING

# Third-Party Imports

# Runselect Imports
from runselect.filter.abstract_run_filter import AbstractRunFilter

if TYPE_CHECKING:
    from runselect.logic.context import SelectionContext
    from runselect.utils.structs import Run


class DisplayNameRunFilter(AbstractRunFilter):
    display_name = "Display name"

    def __init__(self, run_display_name: str) -> None:
        """
        :param str run_display_name: required display name, possibly with variable references
        """
        self.run_display_name: str = run_display_name

    def is_selectable(self, run: Run, context: SelectionContext) -> bool:
        if run.get_display_name() == context.expand(self.run_display_name):
            return True
        context.log_debug("{0}: {1} is declined", self.get_display_name(), run.get_display_name())
        return False

    def get_display_name(self) -> str:
        return f"{self.display_name} ({self.run_display_name})"
