"""Driver of the selection: asks the selector for the candidates and consults the filters

The driver repeatedly asks the selector for the next candidate run, consults the filter (e.g.
the chain of filters) and records the first accepted candidate into the context as the last
match. The selection ends either by the accepted candidate or by exhausting the selector.
"""
from __future__ import annotations

# Standard Imports
from typing import TYPE_CHECKING, Optional

# Third-Party Imports

# Runselect Imports
from runselect.utils import log

if TYPE_CHECKING:
    from runselect.filter.abstract_run_filter import AbstractRunFilter
    from runselect.history.abstract_job import AbstractJob
    from runselect.logic.context import SelectionContext
    from runselect.select.abstract_run_selector import AbstractRunSelector
    from runselect.utils.structs import Run


def select_run(
    job: AbstractJob,
    selector: AbstractRunSelector,
    run_filter: Optional[AbstractRunFilter],
    context: SelectionContext,
) -> Optional[Run]:
    """Selects the first candidate of the selector accepted by the filter

    If the selector offers again the candidate that was offered right before, the selection
    ends, since the candidate was already judged (e.g. specific selector whose run was rejected).

    :param AbstractJob job: the job to pick a run from
    :param AbstractRunSelector selector: strategy enumerating the candidates
    :param AbstractRunFilter run_filter: filter of the candidates; None accepts everything
    :param SelectionContext context: context of the current selection sequence
    :return: the accepted run or None if there is no acceptable run
    :raises OSError: if the history of the job cannot be retrieved
    """
    while (candidate := selector.get_next(job, context)) is not None:
        if candidate == context.last_candidate:
            context.log_debug(
                "{0}: {1} was offered repeatedly",
                selector.get_display_name(),
                candidate.get_display_name(),
            )
            break
        context.record_candidate(candidate)
        if run_filter is None or run_filter.is_selectable(candidate, context):
            context.record_match(candidate)
            log.msg_to_stdout(
                f"{selector.get_display_name()}: selected {candidate.get_display_name()}",
                log.VERBOSE_INFO,
            )
            return candidate
    return None


def select_runs(
    job: AbstractJob,
    selector: AbstractRunSelector,
    run_filter: Optional[AbstractRunFilter],
    context: SelectionContext,
    count: int = 1,
) -> list[Run]:
    """Selects up to count runs within one selection sequence

    :param AbstractJob job: the job to pick runs from
    :param AbstractRunSelector selector: strategy enumerating the candidates
    :param AbstractRunFilter run_filter: filter of the candidates; None accepts everything
    :param SelectionContext context: context shared by the selections
    :param int count: maximal number of selected runs
    :return: list of accepted runs, in the order of selection
    """
    selected_runs = []
    for _ in range(count):
        run = select_run(job, selector, run_filter, context)
        if run is None:
            break
        selected_runs.append(run)
    return selected_runs
