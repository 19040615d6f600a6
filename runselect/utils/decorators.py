"""Decorators enforcing the preconditions of the functions of runselect

Currently, this contains only the validation of the arguments, used e.g. by the configuration
to refuse keys that are not dot-separated sections.
"""
from __future__ import annotations

# Standard Imports
from typing import Any, Callable
import functools
import inspect

# Third-Party Imports

# Runselect Imports
from runselect.utils.exceptions import InvalidParameterException


def validate_arguments(
    validated_args: list[str], validate: Callable[..., bool], *args: Any, **kwargs: Any
) -> Callable[..., Any]:
    """Checks the named arguments of the decorated function before it is called

    :param list validated_args: names of the checked arguments
    :param function validate: predicate over the value of the argument
    :param list args: additional positional arguments of the predicate
    :param dict kwargs: additional keyword arguments of the predicate
    :returns: decorator raising InvalidParameterException for arguments refused by validate
    """

    def inner_decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        arg_names = inspect.getfullargspec(func).args

        @functools.wraps(func)
        def wrapper(*wargs: Any, **wkwargs: Any) -> Any:
            passed_args = dict(zip(arg_names, wargs))
            passed_args.update(wkwargs)
            for name in validated_args:
                if name in passed_args and not validate(passed_args[name], *args, **kwargs):
                    raise InvalidParameterException(name, passed_args[name])
            return func(*wargs, **wkwargs)

        return wrapper

    return inner_decorator
