"""Context of the selection sequence.

Context is created once per selection sequence (i.e. one or more selections of runs that
share the state) and is passed explicitly to every selector and filter. It carries:

  1. environment variables used to expand the configuration of selectors and filters,
  2. the last accepted run (the last match) and the last offered candidate,
  3. sink for debug messages (e.g. rejections of the candidates by filters).

The last match can only transition from absent to present; a new selection sequence requires
new context.
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Callable, Mapping, Optional, TYPE_CHECKING

# Third-Party Imports

# Runselect Imports
from runselect.utils import log
from runselect.utils.environment import EnvVars

if TYPE_CHECKING:
    from runselect.utils.structs import Run


class SelectionContext:
    """Mutable state of one selection sequence

    :ivar EnvVars env_vars: variables used for expansion of the configuration
    :ivar Run last_match: the most recently accepted run or None
    :ivar Run last_candidate: the most recently offered run (accepted or not) or None
    """

    __slots__ = ["env_vars", "last_match", "last_candidate", "_debug_sink"]

    def __init__(
        self,
        env_vars: Optional[Mapping[str, Any]] = None,
        debug_sink: Optional[Callable[[str], None]] = None,
    ) -> None:
        """
        :param dict env_vars: variables of the selection
        :param function debug_sink: function receiving formatted debug messages;
            by default the messages are passed to log.debug
        """
        self.env_vars: EnvVars = EnvVars.from_mapping(env_vars)
        self.last_match: Optional[Run] = None
        self.last_candidate: Optional[Run] = None
        self._debug_sink: Callable[[str], None] = debug_sink or log.debug

    def expand(self, text: Optional[str]) -> Optional[str]:
        """Expands the references to the variables of the context in the text

        :param str text: expanded text
        :return: text with variables substituted by their values
        """
        return self.env_vars.expand(text)

    def log_debug(self, fmt: str, *args: Any) -> None:
        """Formats the message and passes it to the debug sink

        :param str fmt: format string with positional fields, e.g. '{0}: {1} is declined'
        :param list args: values of the fields
        """
        self._debug_sink(fmt.format(*args))

    def record_candidate(self, run: Run) -> None:
        """Remembers the run offered by the selector to the filters

        :param Run run: offered candidate
        """
        self.last_candidate = run

    def record_match(self, run: Run) -> None:
        """Remembers the run accepted by the filters

        :param Run run: accepted run
        :raises ValueError: when trying to reset the last match
        """
        if run is None:
            raise ValueError("the last match of the selection cannot be reset")
        self.last_match = run
