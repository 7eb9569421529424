"""deeplinker exception hierarchy.

Shared across the resolver, the link table loader, and the CLI so every
module raises and catches the same types.
"""

from pathlib import Path


class DeepLinkerError(Exception):
    """Base for all deeplinker-specific errors."""


class ConfigurationError(DeepLinkerError):
    """Raised when the link table is invalid or used out of order.

    Duplicate destination names, a second default template, a bad
    placeholder, or registering twice. Fatal to startup: surface it and
    abort initialization.
    """


class LinkTableError(ConfigurationError):
    """A link table file or mapping could not be loaded.

    ``source`` names where the table came from (a file path, or
    ``"mapping"`` for in-memory data).
    """

    def __init__(self, message: str, source: str | Path | None = None) -> None:
        self.message = message
        self.source = str(source) if source is not None else None
        if self.source:
            message = f"{message} [source: {self.source}]"
        super().__init__(message)


class MalformedParameterError(DeepLinkerError):
    """A placeholder captured a value its converter rejects.

    Recoverable. The host may fall back to the default destination or
    report the link as broken::

        try:
            result = resolver.resolve(uri)
        except MalformedParameterError as exc:
            log.warning("bad deep link %s: %s", uri, exc)
            result = resolver.default_result()
    """

    def __init__(self, param_name: str, value: str, param_type: str, detail: str = "") -> None:
        self.param_name = param_name
        self.value = value
        self.param_type = param_type
        self.detail = detail
        msg = f"Parameter {param_name!r} expects {param_type}, got {value!r}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)
