"""Printing of the progress, results, warnings and errors of the selection

The output is gated by the module-level VERBOSITY, which is raised by the ``-v`` option of the
command line: at VERBOSE_INFO the selection reports the loaded history and the accepted runs,
at VERBOSE_DEBUG it further reports each declined candidate and prints the stack trace of errors.
Messages are coloured by termcolor, unless COLOR_OUTPUT is switched off (``--no-color``).
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Iterable, Literal, Optional
import logging
import sys
import traceback

# Third-Party Imports
import termcolor

# Runselect Imports


ColorChoiceType = Literal[
    "black",
    "grey",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "light_grey",
    "dark_grey",
    "light_red",
    "light_green",
    "light_yellow",
    "light_blue",
    "light_magenta",
    "light_cyan",
    "white",
]
AttrChoiceType = Iterable[Literal["bold", "dark", "underline", "blink", "reverse", "concealed"]]

VERBOSITY: int = 0
COLOR_OUTPUT: bool = True
SUPPRESS_WARNINGS: bool = False

# Levels of the verbosity
VERBOSE_DEBUG: int = 2
VERBOSE_INFO: int = 1
VERBOSE_RELEASE: int = 0

RESULT_COLOURS: dict[str, ColorChoiceType] = {
    "SUCCESS": "green",
    "UNSTABLE": "yellow",
    "FAILURE": "red",
}


def is_verbose_enough(verbosity_peak: int) -> bool:
    """
    :param int verbosity_peak: verbosity required by the message
    :return: true if the messages of the given verbosity are printed
    """
    return VERBOSITY >= verbosity_peak


def msg_to_stdout(message: str, msg_verbosity: int, log_level: int = logging.INFO) -> None:
    """Prints the message to the standard output, if the verbosity is high enough

    The message is in any case passed to the stdlib logging with the given level.

    :param str message: printed message
    :param int msg_verbosity: verbosity required by the message
    :param int log_level: level of the message in the stdlib logging
    """
    logging.log(log_level, message)
    if is_verbose_enough(msg_verbosity):
        write(message)


def debug(msg: str) -> None:
    """Prints the debug message, e.g. the reason why the candidate was declined

    :param str msg: debug message
    """
    msg_to_stdout(f"{tag('debug', 'dark_grey')} {msg}", VERBOSE_DEBUG, logging.DEBUG)


def write(msg: str, end: str = "\n") -> None:
    """
    :param str msg: message printed to the standard output
    :param str end: ending of the message
    """
    print(msg, end=end)


def print_current_stack(raised_exception: Optional[BaseException] = None) -> None:
    """Prints the frames of runselect that led to the error to the standard error

    :param Exception raised_exception: exception whose traceback is printed; if not set,
        the current stack is printed instead
    """
    if raised_exception is not None:
        frames = traceback.extract_tb(raised_exception.__traceback__)
    else:
        frames = traceback.extract_stack()[:-2]
    own_frames = [frame for frame in frames if "runselect" in frame.filename]
    print(in_color("".join(traceback.format_list(own_frames)), "red"), file=sys.stderr)


def error(
    msg: str,
    recoverable: bool = False,
    raised_exception: Optional[BaseException] = None,
) -> None:
    """Reports the error to the standard error and, unless recoverable, exits with 1

    :param str msg: error message
    :param bool recoverable: whether the program can continue after the error
    :param Exception raised_exception: exception that caused the error
    """
    print(f"{tag('error', 'red')} {in_color(msg, 'red')}", file=sys.stderr)
    if is_verbose_enough(VERBOSE_DEBUG):
        print_current_stack(raised_exception)

    if not recoverable:
        sys.exit(1)


def warn(msg: str, end: str = "\n") -> None:
    """
    :param str msg: warning printed to the standard output, unless warnings are suppressed
    :param str end: ending of the message
    """
    if not SUPPRESS_WARNINGS:
        write(f"{tag('warning', 'yellow')} {msg}", end=end)


def major_info(msg: str, colour: ColorChoiceType = "blue", no_title: bool = False) -> None:
    """Prints the heading of the section, e.g. the name of the listed job, in bold brackets

    :param str msg: heading
    :param str colour: colour of the heading
    :param bool no_title: if set, the heading is printed as it is, otherwise in title case
    """
    heading = msg.strip() if no_title else msg.strip().title()
    write(f"\n[{in_color(heading, colour, attribute_style=['bold'])}]\n")


def minor_status(msg: str, status: str = "", sep: str = "-") -> None:
    """Prints one item of the output together with its status, e.g. ' - Selected run - #3'

    :param str msg: name of the item; stripped and capitalized
    :param str status: status of the item
    :param str sep: separator of the item and its status
    """
    write(f" - {msg.strip().capitalize()} {sep} {status}")


def tag(tag_str: str, colour: ColorChoiceType) -> str:
    return f"[{in_color(tag_str.upper(), colour, attribute_style=['bold'])}]"


def highlight(highlighted_str: str) -> str:
    return in_color(highlighted_str, "blue", attribute_style=["bold"])


def result_style(result: Any) -> str:
    """Colours the result of the run according to its severity

    :param RunResult result: result of the run
    :return: coloured name of the result
    """
    colour = RESULT_COLOURS.get(result.name, "light_grey")
    return in_color(result.name, colour, attribute_style=["bold"])


def in_color(
    output: str, color: ColorChoiceType = "white", attribute_style: Optional[AttrChoiceType] = None
) -> str:
    """Colours the output, if the coloured output is enabled

    :param str output: coloured text
    :param str color: colour of the text
    :param list attribute_style: additional styles of the text, e.g. bold
    :return: coloured text, or the text as it is
    """
    if not COLOR_OUTPUT:
        return output
    return termcolor.colored(output, color, attrs=attribute_style, force_color=True)
