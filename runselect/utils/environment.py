"""Helper functions for working with environment variables of the runs.

Currently, this handles the expansion of the variable references (macros) in the configuration
strings, so values of the filters and selectors can be parameterized by the environment of the
selection.
"""
from __future__ import annotations

# Standard Imports
from typing import Iterable, Mapping, Optional
import re

# Third-Party Imports

# Runselect Imports
from runselect.utils.exceptions import InvalidParameterException

# Reference to the variable in the expanded string, we assume one of the three forms:
#  - $NAME, where the name consists of alphanumeric characters and underscores
#  - ${NAME}, where the name can in addition contain dots
#  - $$, which stands for the escaped dollar sign
# e.g. ${BRANCH}, $STAGE, $${NOT_EXPANDED}
VARIABLE_REFERENCE = re.compile(r"\$([A-Za-z0-9_]+|\{[A-Za-z0-9_.]+\}|\$)")


def to_env_value(value: object) -> str:
    """Converts the scalar value, e.g. loaded from YAML, into the value of the variable

    Booleans are exported as `true` and `false`, the same way as the boolean parameters.

    :param object value: converted value
    :return: string value of the variable
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class EnvVars(dict[str, str]):
    """Mapping of environment variables of the selection or of the run"""

    def expand(self, text: Optional[str]) -> Optional[str]:
        """Replaces the references to the variables in the text by their values.

        References to undefined variables are kept as they are, and the substituted values
        are not expanded again.

        :param str text: string with possible references to the variables
        :return: expanded string
        """
        if text is None:
            return None

        def _substitute(match: re.Match[str]) -> str:
            key = match.group(1)
            if key == "$":
                return "$"
            return self.get(key.strip("{}"), match.group(0))

        return VARIABLE_REFERENCE.sub(_substitute, text)

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, object]]) -> EnvVars:
        """Creates the environment from mapping, converting the values to strings

        Variables without value (None) are skipped.

        :param dict mapping: mapping of variables to their values
        :return: new environment
        """
        return cls(
            {
                str(key): to_env_value(value)
                for key, value in (mapping or {}).items()
                if value is not None
            }
        )

    @classmethod
    def from_assignments(cls, assignments: Iterable[str]) -> EnvVars:
        """Creates the environment from the list of assignments in form of NAME=VALUE

        :param list assignments: list of assignments
        :return: new environment
        :raises InvalidParameterException: when the assignment is not in the NAME=VALUE form
        """
        env_vars = cls()
        for assignment in assignments:
            name, sep, value = assignment.partition("=")
            if not sep or not name:
                raise InvalidParameterException("env", assignment, "(expected NAME=VALUE)")
            env_vars[name] = value
        return env_vars
