"""Loading and dumping of the YAML documents, i.e. of the histories and configurations

Both the history of the job and the configuration of the selection are stored as YAML. The
loading is safe (no arbitrary objects are constructed) and tolerant: unreadable documents are
reported by a warning and treated as empty, leaving the validation of the content to the caller.
"""
from __future__ import annotations

# Standard Imports
from typing import Any, TextIO
import io
import os

# Third-Party Imports
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

# Runselect Imports
from runselect.utils import log


def safely_load_yaml_from_file(yaml_file: str) -> Any:
    """
    :param str yaml_file: path to the YAML document
    :return: content of the document, or empty dictionary if it is missing or unreadable
    """
    if not os.path.exists(yaml_file):
        log.warn(f"yaml document '{yaml_file}' does not exist")
        return {}

    with open(yaml_file, "r") as yaml_handle:
        return safely_load_yaml_from_stream(yaml_handle)


def safely_load_yaml_from_stream(yaml_stream: TextIO | str) -> Any:
    """
    :param yaml_stream: opened YAML document or its content
    :return: content of the document, or empty dictionary if it is empty or unreadable
    """
    try:
        return YAML(typ="safe").load(yaml_stream) or {}
    except YAMLError as exc:
        log.warn(f"malformed yaml stream: {exc}")
        return {}


def yaml_to_string(document: dict[str, Any], indent: int = 4) -> str:
    """Dumps the document, e.g. the parameters of the run, as indented YAML block

    :param dict document: dumped document
    :param int indent: number of spaces prefixed to each line
    :return: YAML representation of the document
    """
    string_stream = io.StringIO()
    YAML().dump(document, string_stream)
    return "".join(" " * indent + line for line in string_stream.getvalue().splitlines(True))
