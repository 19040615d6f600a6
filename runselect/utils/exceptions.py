"""Collection of helper exception classes"""
from __future__ import annotations

# Standard Imports
from typing import Any, TYPE_CHECKING

# Third-Party Imports

# Runselect Imports

if TYPE_CHECKING:
    import traceback

    from runselect.utils.structs import Run


class InvalidParameterException(Exception):
    """Raises when the given parameter is invalid"""

    __slots__ = ["parameter", "value", "choices_msg"]

    def __init__(self, parameter: str, parameter_value: Any, choices_msg: str = "") -> None:
        """
        :param str parameter: name of the parameter that is invalid
        :param object parameter_value: value of the parameter
        :param str choices_msg: string with choices for the valid parameters
        """
        super().__init__("")
        self.parameter = parameter
        self.value = str(parameter_value)
        self.choices_msg = " " + choices_msg if choices_msg else ""

    def __str__(self) -> str:
        return (
            f"Invalid value '{self.value}' for the parameter '{self.parameter}'" + self.choices_msg
        )


class MissingConfigSectionException(Exception):
    """Raised when the section in config is missing"""

    __slots__ = ["section_key"]

    def __init__(self, section_key: str) -> None:
        super().__init__("")
        self.section_key = section_key

    def __str__(self) -> str:
        return f"key '{self.section_key}' is not specified in configuration"


class UnsupportedModuleException(Exception):
    """Raised when a selector or a filter of unknown kind is requested"""

    __slots__ = ["kind", "module"]

    def __init__(self, kind: str, module: str) -> None:
        """
        :param str kind: kind of the requested unit (selector or filter)
        :param str module: name of the requested unit
        """
        super().__init__("")
        self.kind = kind
        self.module = module

    def __str__(self) -> str:
        return f"{self.kind.capitalize()} '{self.module}' is not supported by runselect"


class EnvironmentUnavailableException(OSError):
    """Raised when the environment snapshot of the run cannot be obtained"""

    __slots__ = ["run_name"]

    def __init__(self, run: Run) -> None:
        """
        :param Run run: run whose environment could not be read
        """
        super().__init__("")
        self.run_name = run.get_display_name()

    def __str__(self) -> str:
        return f"environment of run '{self.run_name}' is not available"


class ParameterNotMergeableException(Exception):
    """Raised when the parameter value cannot be exported into the environment"""

    __slots__ = ["name"]

    def __init__(self, name: str) -> None:
        """
        :param str name: name of the parameter that refused to be merged
        """
        super().__init__("")
        self.name = name

    def __str__(self) -> str:
        return f"parameter '{self.name}' cannot be exported to the environment"


class HistoryNotFoundException(OSError):
    """Raised when the stored history of the job cannot be found"""

    __slots__ = ["path"]

    def __init__(self, path: str) -> None:
        """
        :param str path: path where the history was expected
        """
        super().__init__("")
        self.path = path

    def __str__(self) -> str:
        return f"history file '{self.path}' does not exist"


class MalformedHistoryException(Exception):
    """Raised when the read history of the job is malformed"""

    __slots__ = ["reason"]

    def __init__(self, reason: str) -> None:
        """
        :param str reason: the reason that the history is considered to be malformed
        """
        super().__init__("")
        self.reason = reason

    def __str__(self) -> str:
        return f"working with malformed history: {self.reason}"


class SuppressedExceptions:
    """Context manager class for code blocks that need to suppress / ignore some exceptions
    and simply continue in the execution if those exceptions are encountered.

    :ivar list exc: the list of exception classes that should be ignored
    """

    def __init__(self, *exception_list: type[Exception]) -> None:
        """
        :param exception_list: the exception classes to ignore
        """
        self.exc = exception_list

    def __enter__(self) -> "SuppressedExceptions":
        return self

    def __exit__(self, exc_type: str, exc_val: Exception, exc_tb: traceback.StackSummary) -> bool:
        """Checks if the code raised an exception that belongs to the suppressed ones.

        :param type exc_type: the type of the exception
        :param exception exc_val: the value of the exception
        :param traceback exc_tb: the traceback of the exception
        :return bool: True if the encountered exception should be ignored
        """
        return isinstance(exc_val, tuple(self.exc))
