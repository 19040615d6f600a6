"""Job whose history of runs is stored in the YAML file

The history is re-read whenever the file changes, so the runs appended to the file between two
selections are visible to the latter. The format of the file is as follows::

    job: deploy-pipeline
    runs:
      - number: 1
        result: SUCCESS
        environment: {NODE: linux}
        parameters:
          - STAGE: test
            DRY_RUN: true
          - ARTIFACT: {file: build.zip}
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Optional
import os

# Third-Party Imports

# Runselect Imports
from runselect.history.abstract_job import AbstractJob
from runselect.utils import log, streams
from runselect.utils.environment import EnvVars, to_env_value
from runselect.utils.exceptions import HistoryNotFoundException, MalformedHistoryException
from runselect.utils.structs import (
    BooleanParameterValue,
    FileParameterValue,
    ParametersAction,
    ParameterValue,
    Run,
    RunResult,
    StringParameterValue,
)


class YamlJob(AbstractJob):
    """Job over the YAML history

    :ivar str history_path: path to the YAML file with the history
    """

    def __init__(self, history_path: str) -> None:
        """
        :param str history_path: path to the YAML file with the history
        """
        self.history_path: str = history_path
        self._stamp: Optional[tuple[int, int]] = None
        self._content: dict[str, Any] = {}
        self._history: list[Run] = []

    def get_name(self) -> str:
        return str(self._load().get("job", os.path.basename(self.history_path)))

    def get_history(self) -> list[Run]:
        """
        :raises HistoryNotFoundException: when the history file does not exist
        :raises MalformedHistoryException: when the runs in the history are malformed
        """
        self._load()
        return list(self._history)

    def _load(self) -> dict[str, Any]:
        """Parses the history, unless the file is unchanged since the last parsing

        :return: content of the history file
        """
        if not os.path.exists(self.history_path):
            raise HistoryNotFoundException(self.history_path)
        stat = os.stat(self.history_path)
        stamp = (stat.st_mtime_ns, stat.st_size)
        if stamp == self._stamp:
            return self._content

        content = streams.safely_load_yaml_from_file(self.history_path)
        if not isinstance(content, dict):
            raise MalformedHistoryException("the history is not a mapping")
        runs = content.get("runs") or []
        if not isinstance(runs, list):
            raise MalformedHistoryException("'runs' is not a list")
        history = sorted((run_from_dict(run_data) for run_data in runs), key=lambda r: r.number)
        log.msg_to_stdout(f"Loaded {len(history)} runs from {self.history_path}", log.VERBOSE_INFO)

        self._stamp, self._content, self._history = stamp, content, history
        return content


def run_from_dict(run_data: dict[str, Any]) -> Run:
    """Creates the run from its YAML representation

    :param dict run_data: YAML representation of the run
    :return: run
    :raises MalformedHistoryException: when the number, result, environment or parameters of
        the run are malformed
    """
    if not isinstance(run_data, dict) or "number" not in run_data:
        raise MalformedHistoryException(f"run '{run_data}' has no number")
    number = run_data["number"]
    try:
        if isinstance(number, bool):
            raise ValueError(number)
        number = int(number)
    except (TypeError, ValueError):
        raise MalformedHistoryException(f"run '{number}' has invalid number")

    result = str(run_data.get("result") or "SUCCESS").upper()
    if result not in RunResult.__members__:
        raise MalformedHistoryException(f"run #{number} has unknown result '{result}'")

    environment = run_data.get("environment", {})
    if environment is not None and not isinstance(environment, dict):
        raise MalformedHistoryException(f"environment of run #{number} is not a mapping")

    contributions = run_data.get("parameters") or []
    if not isinstance(contributions, list) or not all(
        isinstance(action, dict) for action in contributions
    ):
        raise MalformedHistoryException(f"parameters of run #{number} are not list of mappings")

    return Run(
        number=number,
        result=RunResult[result],
        building=bool(run_data.get("building", False)),
        environment=None if environment is None else dict(EnvVars.from_mapping(environment)),
        actions=[
            ParametersAction(
                [
                    parameter_from_yaml(name, value)
                    for name, value in action.items()
                    if value is not None
                ]
            )
            for action in contributions
        ],
        display_name=str(run_data.get("display_name", "")),
    )


def parameter_from_yaml(name: str, value: Any) -> ParameterValue:
    """Creates the parameter value according to the type of the YAML value

    :param str name: name of the parameter
    :param object value: YAML value of the parameter
    :return: parameter value
    """
    if isinstance(value, bool):
        return BooleanParameterValue(name, value)
    elif isinstance(value, dict) and "file" in value:
        return FileParameterValue(name, str(value["file"]))
    return StringParameterValue(name, to_env_value(value))
