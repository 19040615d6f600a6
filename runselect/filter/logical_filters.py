"""Logical connectives of the filters

The `AndRunFilter` is the chain of the filters: the filters are consulted in the given order
and the first rejection ends the evaluation, so the later filters are not consulted at all.
"""
from __future__ import annotations

# Standard Imports
from typing import TYPE_CHECKING, Iterable

# Third-Party Imports

# Runselect Imports
from runselect.filter.abstract_run_filter import AbstractRunFilter

if TYPE_CHECKING:
    from runselect.logic.context import SelectionContext
    from runselect.utils.structs import Run


class AndRunFilter(AbstractRunFilter):
    """Accepts the run accepted by all the filters; empty chain accepts everything"""

    display_name = "And"

    def __init__(self, filters: Iterable[AbstractRunFilter]) -> None:
        self.filters: list[AbstractRunFilter] = list(filters)

    def is_selectable(self, run: Run, context: SelectionContext) -> bool:
        return all(run_filter.is_selectable(run, context) for run_filter in self.filters)

    def get_display_name(self) -> str:
        return f"{self.display_name} ({', '.join(f.get_display_name() for f in self.filters)})"


class OrRunFilter(AbstractRunFilter):
    """Accepts the run accepted by any of the filters; empty alternative accepts nothing"""

    display_name = "Or"

    def __init__(self, filters: Iterable[AbstractRunFilter]) -> None:
        self.filters: list[AbstractRunFilter] = list(filters)

    def is_selectable(self, run: Run, context: SelectionContext) -> bool:
        return any(run_filter.is_selectable(run, context) for run_filter in self.filters)

    def get_display_name(self) -> str:
        return f"{self.display_name} ({', '.join(f.get_display_name() for f in self.filters)})"


class NotRunFilter(AbstractRunFilter):
    display_name = "Not"

    def __init__(self, run_filter: AbstractRunFilter) -> None:
        self.run_filter: AbstractRunFilter = run_filter

    def is_selectable(self, run: Run, context: SelectionContext) -> bool:
        return not self.run_filter.is_selectable(run, context)

    def get_display_name(self) -> str:
        return f"{self.display_name} ({self.run_filter.get_display_name()})"
