"""Collection of functions constructing selectors and filters from their textual specification

Selectors and filters are specified by strings of the form `kind[:argument]`, e.g.::

    status:stable               most recent stable run
    last                        most recent completed run
    number:${UPSTREAM_NUMBER}   run with the specific number
    permalink:lastSuccessfulRun run referenced by permalink

    parameters:STAGE=release    runs with the given parameters
    display-name:#42            runs with the given display name
    not:parameters:DRY_RUN=true negation of other filter

In the configuration, filters can be further composed as `{and: [...]}`, `{or: [...]}` and
`{not: ...}`.
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Callable, Iterable, Optional

# Third-Party Imports

# Runselect Imports
from runselect.filter.abstract_run_filter import AbstractRunFilter
from runselect.filter.display_name_filter import DisplayNameRunFilter
from runselect.filter.logical_filters import AndRunFilter, NotRunFilter, OrRunFilter
from runselect.filter.parameters_filter import ParametersRunFilter
from runselect.select.abstract_run_selector import AbstractRunSelector
from runselect.select.number_selector import RunNumberSelector
from runselect.select.permalink_selector import PermalinkRunSelector
from runselect.select.status_selector import StatusRunSelector
from runselect.utils.exceptions import InvalidParameterException, UnsupportedModuleException
from runselect.utils.structs import RunStatus


def _status_selector(argument: str) -> AbstractRunSelector:
    if not argument:
        return StatusRunSelector()
    if argument not in RunStatus.supported():
        raise InvalidParameterException(
            "status", argument, f"(choose from {', '.join(RunStatus.supported())})"
        )
    return StatusRunSelector(RunStatus(argument))


def _required(factory: Callable[[str], Any], kind: str) -> Callable[[str], Any]:
    """Wraps the factory so it refuses the missing argument

    :param function factory: factory of the selector or filter
    :param str kind: kind of the constructed unit
    :return: wrapped factory
    """

    def wrapper(argument: str) -> Any:
        if not argument:
            raise InvalidParameterException(kind, argument, "(missing argument)")
        return factory(argument)

    return wrapper


SELECTORS: dict[str, Callable[[str], AbstractRunSelector]] = {
    "status": _status_selector,
    "last": lambda _: StatusRunSelector(RunStatus.COMPLETED),
    "number": _required(RunNumberSelector, "number"),
    "permalink": _required(PermalinkRunSelector, "permalink"),
}

FILTERS: dict[str, Callable[[str], AbstractRunFilter]] = {
    "parameters": ParametersRunFilter,
    "display-name": _required(DisplayNameRunFilter, "display-name"),
    "not": lambda argument: NotRunFilter(filter_from_spec(argument)),
}


def get_supported_selectors() -> list[str]:
    """
    :return: list of kinds of supported selectors
    """
    return list(SELECTORS.keys())


def get_supported_filters() -> list[str]:
    """
    :return: list of kinds of supported filters
    """
    return list(FILTERS.keys())


def _split_spec(spec: str) -> tuple[str, str]:
    kind, _, argument = spec.strip().partition(":")
    return kind.strip(), argument


def selector_from_spec(spec: str) -> AbstractRunSelector:
    """Constructs the selector from its specification

    :param str spec: specification of the selector, e.g. 'status:stable'
    :return: constructed selector
    :raises UnsupportedModuleException: when the kind of the selector is not supported
    """
    kind, argument = _split_spec(spec)
    if kind not in SELECTORS:
        raise UnsupportedModuleException("selector", kind)
    return SELECTORS[kind](argument)


def filter_from_spec(spec: str) -> AbstractRunFilter:
    """Constructs the filter from its specification

    :param str spec: specification of the filter, e.g. 'parameters:STAGE=release'
    :return: constructed filter
    :raises UnsupportedModuleException: when the kind of the filter is not supported
    """
    kind, argument = _split_spec(spec)
    if kind not in FILTERS:
        raise UnsupportedModuleException("filter", kind)
    return FILTERS[kind](argument)


def filter_from_config(filter_config: Any) -> AbstractRunFilter:
    """Constructs the filter from the configuration, which is either string or composition

    :param object filter_config: specification string or mapping with 'and', 'or' or 'not' key
    :return: constructed filter
    :raises InvalidParameterException: when the configuration is neither string nor composition
    """
    if isinstance(filter_config, str):
        return filter_from_spec(filter_config)
    if isinstance(filter_config, dict) and len(filter_config) == 1:
        ((connective, operands),) = filter_config.items()
        if connective == "and":
            return AndRunFilter(filter_from_config(operand) for operand in operands)
        elif connective == "or":
            return OrRunFilter(filter_from_config(operand) for operand in operands)
        elif connective == "not":
            return NotRunFilter(filter_from_config(operands))
    raise InvalidParameterException("filters", filter_config, "(expected spec, and, or, not)")


def build_filter_chain(filter_configs: Iterable[Any]) -> Optional[AbstractRunFilter]:
    """Constructs the chain of the filters consulted in the given order

    :param list filter_configs: list of configurations of the filters
    :return: chain of the filters, or None if there are no filters
    """
    filters = [filter_from_config(filter_config) for filter_config in filter_configs]
    if not filters:
        return None
    return filters[0] if len(filters) == 1 else AndRunFilter(filters)
