"""List of helper and globally used structures, representing the runs of the jobs"""
from __future__ import annotations

# Standard Imports
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

# Third-Party Imports

# Runselect Imports
from runselect.utils.environment import EnvVars, to_env_value
from runselect.utils.exceptions import (
    EnvironmentUnavailableException,
    ParameterNotMergeableException,
)


class RunResult(Enum):
    """Result of the finished run, ordered from the best to the worst"""

    SUCCESS = "SUCCESS"
    UNSTABLE = "UNSTABLE"
    FAILURE = "FAILURE"
    NOT_BUILT = "NOT_BUILT"
    ABORTED = "ABORTED"

    def is_better_or_equal_to(self, other: RunResult) -> bool:
        """
        :param RunResult other: result we are comparing against
        :return: true if this result is at least as good as the other
        """
        return self.ordinal <= other.ordinal

    @property
    def ordinal(self) -> int:
        """
        :return: position of the result, lower is better
        """
        return list(RunResult).index(self)


class RunStatus(Enum):
    """Statuses of the runs, which can be requested by the selectors"""

    STABLE = "stable"
    SUCCESSFUL = "successful"
    UNSTABLE = "unstable"
    FAILED = "failed"
    UNSUCCESSFUL = "unsuccessful"
    COMPLETED = "completed"
    ANY = "any"

    def matches(self, run: Run) -> bool:
        """Checks whether the run is of the given status

        :param Run run: checked run
        :return: true if the run has the status
        """
        if self == RunStatus.ANY:
            return True
        if run.building:
            return False
        if self == RunStatus.STABLE:
            return run.result == RunResult.SUCCESS
        elif self == RunStatus.SUCCESSFUL:
            return run.result.is_better_or_equal_to(RunResult.UNSTABLE)
        elif self == RunStatus.UNSTABLE:
            return run.result == RunResult.UNSTABLE
        elif self == RunStatus.FAILED:
            return run.result == RunResult.FAILURE
        elif self == RunStatus.UNSUCCESSFUL:
            return run.result != RunResult.SUCCESS
        return True

    @staticmethod
    def supported() -> list[str]:
        """
        :return: list of names of supported statuses
        """
        return [status.value for status in RunStatus]


@dataclass
class StringParameterValue:
    """Parameter of the run with string value

    :ivar str name: name of the parameter
    :ivar str value: value of the parameter
    """

    __slots__ = ["name", "value"]

    name: str
    value: str

    def build_environment(self, _: Run, env: EnvVars) -> None:
        """Exports the parameter into the environment

        :param Run _: run which owns the parameter
        :param EnvVars env: environment the parameter is exported to
        """
        env[self.name] = str(self.value)


@dataclass
class BooleanParameterValue:
    """Parameter of the run with boolean value, exported as 'true' or 'false'"""

    __slots__ = ["name", "value"]

    name: str
    value: bool

    def build_environment(self, _: Run, env: EnvVars) -> None:
        env[self.name] = to_env_value(self.value)


@dataclass
class FileParameterValue:
    """Parameter of the run referring to an uploaded file

    The file parameters are not part of the environment of the run, since their value is
    the file itself, and so they refuse to be exported.
    """

    __slots__ = ["name", "value"]

    name: str
    value: str

    def build_environment(self, _: Run, __: EnvVars) -> None:
        raise ParameterNotMergeableException(self.name)


ParameterValue = StringParameterValue | BooleanParameterValue | FileParameterValue


@dataclass
class ParametersAction:
    """Single contribution of parameters attached to the run

    :ivar list parameters: ordered list of contributed parameter values
    """

    __slots__ = ["parameters"]

    parameters: list[ParameterValue]


@dataclass(eq=False)
class Run:
    """Single completed (or running) execution of the job

    Runs are identified by their number within the job; two runs are equal if they share
    the number and the display name.

    :ivar int number: number of the run in the history of the job
    :ivar RunResult result: result of the run
    :ivar bool building: whether the run is still running
    :ivar dict environment: snapshot of the environment of the run, or None if unavailable
    :ivar list actions: list of parameter contributions attached to the run
    :ivar str display_name: human-readable name of the run
    """

    number: int
    result: RunResult = RunResult.SUCCESS
    building: bool = False
    environment: Optional[dict[str, str]] = field(default_factory=dict)
    actions: list[ParametersAction] = field(default_factory=list)
    display_name: str = ""

    def __post_init__(self) -> None:
        if not self.display_name:
            self.display_name = f"#{self.number}"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Run):
            return (self.number, self.display_name) == (other.number, other.display_name)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.number, self.display_name))

    def get_display_name(self) -> str:
        """
        :return: human-readable name of the run
        """
        return self.display_name

    def get_environment(self) -> EnvVars:
        """Returns the copy of the environment snapshot of the run

        Note that the parameters of the run are not part of the snapshot.

        :return: environment of the run
        :raises EnvironmentUnavailableException: when the snapshot cannot be read
        """
        if self.environment is None:
            raise EnvironmentUnavailableException(self)
        return EnvVars.from_mapping(self.environment)

    def get_parameter_contributions(self) -> list[ParametersAction]:
        """
        :return: list of parameter contributions attached to the run
        """
        return list(self.actions)

    def get_parameters(self) -> list[ParameterValue]:
        """
        :return: flattened list of all parameters of the run
        """
        return [parameter for action in self.actions for parameter in action.parameters]
