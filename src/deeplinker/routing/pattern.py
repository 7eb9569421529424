"""PatternEntry, PathSegment and MatchResult frozen dataclasses."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from deeplinker.errors import ConfigurationError
from deeplinker.routing.params import CONVERTERS, DEFAULT_PARAM_TYPE


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a path template.

    Literal:  ``profile``     (is_param=False)
    Param:    ``{id}``        (is_param=True, param_name="id", param_type="int")
    Typed:    ``{slug:str}``  (is_param=True, param_name="slug", param_type="str")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = DEFAULT_PARAM_TYPE


@dataclass(frozen=True, slots=True)
class PatternEntry:
    """A named destination and the path template that reaches it.

    An empty or absent (``None``) ``path`` marks the default (home)
    destination; ``None`` is stored as ``""``.
    """

    name: str
    path: str = ""

    def __post_init__(self) -> None:
        if self.path is None:
            object.__setattr__(self, "path", "")

    @property
    def is_default(self) -> bool:
        return not self.path.strip("/")


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Outcome of resolving one URI.

    ``template`` is the matched entry's path, or ``None`` when the result
    is the default fallback. Hashable, so results can key a cache or
    sit in a set.
    """

    destination: str
    parameters: Mapping[str, int | str] = field(default_factory=lambda: MappingProxyType({}))
    template: str | None = None

    def __hash__(self) -> int:
        return hash((self.destination, frozenset(self.parameters.items()), self.template))

    @property
    def is_fallback(self) -> bool:
        """True if no template matched and the default was returned."""
        return self.template is None


def parse_template(path: str) -> tuple[PathSegment, ...]:
    """Parse a path template string into segments.

    Examples::

        ""               -> ()
        "profile"        -> (PathSegment("profile"),)
        "profile/{id}"   -> (PathSegment("profile"), PathSegment("{id}", is_param=True, ...))
        "tag/{slug:str}" -> (PathSegment("tag"), PathSegment("{slug:str}", ..., param_type="str"))

    Raises ``ConfigurationError`` for ``<param>`` segments, empty or
    repeated parameter names, and unknown converter types.
    """
    segments: list[PathSegment] = []
    seen: set[str] = set()
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("<") and part.endswith(">"):
            msg = (
                f"Template {path!r} uses <param> syntax. "
                f"Use {{param}} placeholders instead, e.g. {{{part[1:-1]}}}."
            )
            raise ConfigurationError(msg)
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            if ":" in inner:
                param_name, param_type = inner.split(":", 1)
            else:
                param_name, param_type = inner, DEFAULT_PARAM_TYPE
            if not param_name:
                msg = f"Template {path!r} has a placeholder with no name."
                raise ConfigurationError(msg)
            if param_type not in CONVERTERS:
                known = ", ".join(sorted(CONVERTERS))
                msg = f"Template {path!r}: unknown parameter type {param_type!r} (known: {known})."
                raise ConfigurationError(msg)
            if param_name in seen:
                msg = f"Template {path!r} repeats parameter {param_name!r}."
                raise ConfigurationError(msg)
            seen.add(param_name)
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    param_type=param_type,
                )
            )
        else:
            segments.append(PathSegment(value=part))
    return tuple(segments)
