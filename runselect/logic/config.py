"""Config is a module for storing and managing the configuration of the selection.

Stored configurations are in YAML format and specify the selector, the chain of filters and
the variables of the selection, such as the following::

    selection:
      selector: status:stable
      filters:
        - parameters:BRANCH=${BRANCH}
        - not: display-name:#13
      count: 1
    environment:
      BRANCH: main

The options given on the command line take precedence over the configuration.
"""
from __future__ import annotations

# Standard Imports
from typing import Any
import dataclasses
import os
import re

# Third-Party Imports
from ruamel.yaml import YAML

# Runselect Imports
from runselect.utils import decorators, exceptions, log, streams

DEFAULT_SELECTOR: str = "status:completed"


# Key is a path of sections separated by dots, e.g. selection.filters
VALID_KEY_PATTERN = re.compile(r"^[a-zA-Z0-9_]+(\.[a-zA-Z0-9_]+)*$")


def is_valid_key(key: str) -> bool:
    """
    :param str key: checked key of the configuration
    :returns: true if the key is a dot-separated path of sections
    """
    return VALID_KEY_PATTERN.match(key) is not None


@dataclasses.dataclass
class Config:
    """Config represents one loaded configuration of the selection.

    If the path is set, then the config will be saved to the given path, if the config is
    modified.
    """

    __slots__ = ["path", "data"]

    path: str
    data: dict[str, Any]

    @decorators.validate_arguments(["key"], is_valid_key)
    def set(self, key: str, value: Any) -> None:
        """Sets the value of the key, creating the missing sections, and stores the config

        :param str key: list of sections separated by dots
        :param object value: value we are writing to the key at config
        """
        *sections, last_section = key.split(".")
        section_iterator = self.data
        for section in sections:
            section_iterator = section_iterator.setdefault(section, {})
        section_iterator[last_section] = value
        if self.path:
            write_config_to(self.path, self.data)

    def safe_get(self, key: str, default: Any) -> Any:
        """Returns the value of the key, or default if any of its sections is missing

        :param str key: key we are looking up
        :param object default: default value of the key
        :return: value of the key in the config or default
        """
        try:
            return self.get(key)
        except exceptions.MissingConfigSectionException:
            return default

    @decorators.validate_arguments(["key"], is_valid_key)
    def get(self, key: str) -> Any:
        """Returns the value of the key, looked up section by section

        :param str key: list of section separated by dots
        :returns value: retrieved value of the key at config
        :raises exceptions.MissingConfigSectionException: if the key is not present in the config
        """
        section_iterator: Any = self.data
        for section in key.split("."):
            if not isinstance(section_iterator, dict) or section not in section_iterator:
                raise exceptions.MissingConfigSectionException(key)
            section_iterator = section_iterator[section]
        return section_iterator

    def get_selector_spec(self) -> str:
        return str(self.safe_get("selection.selector", DEFAULT_SELECTOR))

    def get_filter_specs(self) -> list[Any]:
        filters = self.safe_get("selection.filters", [])
        return filters if isinstance(filters, list) else [filters]

    def get_count(self) -> int:
        """
        :return: number of runs selected within one selection sequence
        :raises InvalidParameterException: when the count is not a positive integer
        """
        count = self.safe_get("selection.count", 1)
        try:
            if isinstance(count, bool):
                raise ValueError(count)
            valid_count = int(count)
        except (TypeError, ValueError):
            valid_count = 0
        if valid_count < 1:
            raise exceptions.InvalidParameterException(
                "selection.count", count, "(expected positive integer)"
            )
        return valid_count

    def get_environment(self) -> dict[str, Any]:
        return dict(self.safe_get("environment", {}) or {})


def write_config_to(path: str, config_data: dict[str, Any]) -> None:
    """Dumps the configuration as YAML document

    :param str path: path where the config will be stored to
    :param dict config_data: dictionary with contents of the configuration
    """
    with open(path, "w") as yaml_file:
        YAML().dump(config_data, yaml_file)


def load_config(path: str) -> Config:
    """Reads the config from the path

    :param str path: source path of the config
    :returns: loaded configuration; empty if the file does not exist
    """
    if not os.path.exists(path):
        log.warn(f"configuration '{path}' does not exist, using defaults")
        return Config("", {})
    data = streams.safely_load_yaml_from_file(path)
    if not isinstance(data, dict):
        log.warn(f"configuration '{path}' is not a mapping, using defaults")
        data = {}
    return Config(path, data)
