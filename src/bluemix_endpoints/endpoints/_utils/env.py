# _utils/env.py

import os
from collections.abc import Iterable


def env_fallback(names: Iterable[str], default: str) -> str:
    """
    Return the first non-empty environment variable from a list of names.

    Variables are checked in the given order and read at call time. An
    empty value is treated the same as an unset variable.

    Args:
        names (Iterable[str]): Candidate variable names, highest priority first.
        default (str): Value returned when none of the variables is set.

    Returns:
        str: The first non-empty variable value, otherwise the default.
    """
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return default
