"""Filter of the runs matching particular parameters

The filter is configured by comma-separated list of pairs of parameters and their values, e.g.
`BRANCH=main,STAGE=release`. The values can reference the variables of the selection,
e.g. `BRANCH=${TARGET_BRANCH}`, which are expanded before the parsing.

Note that the parsing is lax: the part of the configuration that does not conform to the
`name=value` pairs is silently dropped. E.g. `STAGE=release,broken` requires only `STAGE`.
"""
from __future__ import annotations

# Standard Imports
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional
import re

# Third-Party Imports

# Runselect Imports
from runselect.filter.abstract_run_filter import AbstractRunFilter
from runselect.utils.environment import EnvVars
from runselect.utils.exceptions import ParameterNotMergeableException, SuppressedExceptions

if TYPE_CHECKING:
    from runselect.logic.context import SelectionContext
    from runselect.utils.structs import Run

# One pair of the parameter and its value:
#  - name is the shortest prefix ending before the first '=',
#  - value is everything up to the next ',' or the end of the string
PARAMETER_VALUE_PATTERN = re.compile(r"(.*?)=([^,]*)(,|$)")


@dataclass
class EnvironmentLookup:
    """Result of obtaining the environment of the run

    :ivar EnvVars environment: environment of the run merged with its parameters
    :ivar Exception error: error raised while reading the environment
    """

    __slots__ = ["environment", "error"]

    environment: Optional[EnvVars]
    error: Optional[Exception]

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_parameters(params_to_match: str) -> list[tuple[str, str]]:
    """Parses the configuration of the filter into the ordered list of pairs

    :param str params_to_match: comma-separated list of name=value pairs
    :return: list of pairs (name, expected value)
    """
    return [
        (match.group(1), match.group(2))
        for match in PARAMETER_VALUE_PATTERN.finditer(params_to_match)
    ]


def lookup_environment(run: Run) -> EnvironmentLookup:
    """Obtains the environment of the run together with its parameters

    The environment snapshot of the run does not contain its parameters, so these are merged
    into the copy of the snapshot, overriding the existing values of the same name. Parameters
    that cannot be exported to environment (e.g. file parameters) are skipped.

    :param Run run: run whose environment is looked up
    :return: result of the lookup, either the environment or the error
    """
    try:
        environment = run.get_environment()
    except Exception as exc:
        return EnvironmentLookup(None, exc)

    for action in run.get_parameter_contributions():
        for parameter in action.parameters:
            with SuppressedExceptions(ParameterNotMergeableException):
                parameter.build_environment(run, environment)
    return EnvironmentLookup(environment, None)


class ParametersRunFilter(AbstractRunFilter):
    """Filter to find runs matching particular parameters"""

    display_name = "Parameters"

    def __init__(self, params_to_match: str) -> None:
        """
        :param str params_to_match: comma-separated list of pairs of parameters and values
        """
        self.params_to_match: str = params_to_match

    def get_filter_parameters(self, context: SelectionContext) -> list[tuple[str, str]]:
        """
        :param context: context of the selection used to expand the configuration
        :return: list of required pairs of parameters and their values
        """
        return parse_parameters(context.expand(self.params_to_match) or "")

    def is_selectable(self, run: Run, context: SelectionContext) -> bool:
        """Checks that all the required parameters of the run have the expected values

        :param run: the candidate run
        :param context: context of the current selection sequence
        :return: true if the run has all the required parameters with expected values
        """
        lookup = lookup_environment(run)
        if not lookup.ok or lookup.environment is None:
            context.log_debug(
                "{0}: {1} is declined ({2})",
                self.get_display_name(),
                run.get_display_name(),
                lookup.error,
            )
            return False

        for name, expected_value in self.get_filter_parameters(context):
            if expected_value != lookup.environment.get(name):
                context.log_debug(
                    "{0}: {1} is declined", self.get_display_name(), run.get_display_name()
                )
                return False
        return True

    def get_display_name(self) -> str:
        return f"{self.display_name} ({self.params_to_match})"
