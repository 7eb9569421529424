"""Path parameter parsing and type conversion.

Built-in converters for placeholder segments like ``{id}`` or
``{slug:str}``. An untyped placeholder is ``int``.
"""

import re
from collections.abc import Callable

from deeplinker.errors import MalformedParameterError

DEFAULT_PARAM_TYPE = "int"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


def _to_int64(value: str) -> int:
    if not _INT_RE.fullmatch(value):
        msg = "not a decimal integer"
        raise ValueError(msg)
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        msg = "outside signed 64-bit range"
        raise ValueError(msg)
    return number


def _to_str(value: str) -> str:
    return value


# param_type -> converter; converters raise ValueError on bad input
CONVERTERS: dict[str, Callable[[str], int | str]] = {
    "int": _to_int64,
    "str": _to_str,
}


def convert_param(name: str, value: str, param_type: str) -> int | str:
    """Convert a captured segment to the placeholder's declared type.

    Raises ``MalformedParameterError`` if the converter rejects *value*.
    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    converter = CONVERTERS[param_type]
    try:
        return converter(value)
    except ValueError as exc:
        raise MalformedParameterError(name, value, param_type, str(exc)) from exc
