"""Link resolver — first-match lookup over a build-once pattern table.

Patterns are registered during startup and compiled into an immutable
table. After that the resolver is a pure function of (table, URI) and
can be shared between threads without locking.
"""

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from urllib.parse import quote, unquote, urlsplit

from deeplinker.config import ResolverConfig
from deeplinker.errors import ConfigurationError, MalformedParameterError
from deeplinker.routing.params import convert_param
from deeplinker.routing.pattern import MatchResult, PathSegment, PatternEntry, parse_template

logger = logging.getLogger("deeplinker.routing")


@dataclass(frozen=True, slots=True)
class _CompiledPattern:
    entry: PatternEntry
    segments: tuple[PathSegment, ...]

    def capture(self, parts: list[str]) -> dict[str, str] | None:
        """Structural match: raw captures on success, ``None`` otherwise."""
        if len(parts) != len(self.segments):
            return None
        captured: dict[str, str] = {}
        for seg, part in zip(self.segments, parts, strict=True):
            if seg.is_param:
                captured[seg.param_name or ""] = part
            elif seg.value != part:
                return None
        return captured

    def convert(self, captured: dict[str, str]) -> dict[str, int | str]:
        return {
            seg.param_name: convert_param(seg.param_name, captured[seg.param_name], seg.param_type)
            for seg in self.segments
            if seg.is_param and seg.param_name
        }


@dataclass(frozen=True, slots=True)
class _LinkTable:
    """The built registration table. Never mutated once created."""

    patterns: tuple[_CompiledPattern, ...]
    by_name: Mapping[str, _CompiledPattern]
    default_destination: str


def compile_table(entries: Iterable[PatternEntry], default_destination: str) -> _LinkTable:
    """Validate *entries* and compile them in registration order.

    The entry with an empty template, if any, becomes the default
    destination and overrides *default_destination*.

    Raises ``ConfigurationError`` on duplicate names, a second empty
    template, or an invalid template.
    """
    patterns: list[_CompiledPattern] = []
    by_name: dict[str, _CompiledPattern] = {}
    default_entry: PatternEntry | None = None

    for entry in entries:
        if not entry.name:
            msg = f"Destination for template {entry.path!r} has an empty name."
            raise ConfigurationError(msg)
        if entry.name in by_name:
            msg = f"Duplicate destination name {entry.name!r}."
            raise ConfigurationError(msg)
        if entry.is_default:
            if default_entry is not None:
                msg = (
                    f"Destinations {default_entry.name!r} and {entry.name!r} both have "
                    f"an empty template; only one default is allowed."
                )
                raise ConfigurationError(msg)
            default_entry = entry
        compiled = _CompiledPattern(entry=entry, segments=parse_template(entry.path))
        patterns.append(compiled)
        by_name[entry.name] = compiled

    return _LinkTable(
        patterns=tuple(patterns),
        by_name=MappingProxyType(by_name),
        default_destination=default_entry.name if default_entry else default_destination,
    )


def split_path(path: str) -> list[str]:
    """Normalize a URI path into decoded, non-empty segments.

    ``"/profile//42/"`` -> ``["profile", "42"]``
    """
    return [unquote(p) for p in path.strip("/").split("/") if p]


class LinkResolver:
    """Resolves deep-link URIs to named destinations.

    Usage::

        resolver = LinkResolver()
        resolver.register([
            PatternEntry("HOME"),
            PatternEntry("PROFILE", "profile"),
            PatternEntry("PROFILE_OTHER", "profile/{id}"),
            PatternEntry("SETTINGS", "settings"),
        ])
        result = resolver.resolve("myapp://example.com/profile/42")
        # MatchResult(destination="PROFILE_OTHER", parameters={"id": 42}, ...)

    Scheme and host are ignored unless ``ResolverConfig.schemes`` or
    ``ResolverConfig.hosts`` restrict them.
    """

    __slots__ = ("_config", "_lock", "_table")

    def __init__(self, config: ResolverConfig | None = None) -> None:
        self._config = config or ResolverConfig()
        self._lock = threading.Lock()
        self._table: _LinkTable | None = None

    @property
    def config(self) -> ResolverConfig:
        return self._config

    @property
    def is_built(self) -> bool:
        """True once ``register()`` has completed."""
        return self._table is not None

    def register(self, entries: Iterable[PatternEntry]) -> None:
        """Build the match table. Allowed exactly once.

        Raises ``ConfigurationError`` if the table is already built or
        *entries* are invalid. On failure nothing is stored.
        """
        with self._lock:
            if self._table is not None:
                msg = "Link table is already built; register() may only be called once."
                raise ConfigurationError(msg)
            table = compile_table(entries, self._config.default_destination)
            self._table = table

        logger.info(
            "Link table built: %d pattern(s), default destination %s",
            len(table.patterns),
            table.default_destination,
        )

    @property
    def entries(self) -> tuple[PatternEntry, ...]:
        """Registered entries in registration order."""
        return tuple(p.entry for p in self._built().patterns)

    @property
    def default_destination(self) -> str:
        return self._built().default_destination

    def default_result(self) -> MatchResult:
        """The result returned when nothing matches."""
        return MatchResult(destination=self._built().default_destination)

    def resolve(self, uri: str) -> MatchResult:
        """Resolve *uri* to a destination and its parameters.

        Only the path is consulted. An unmatched URI returns the default
        destination with no parameters; it is not an error.

        Raises ``MalformedParameterError`` if the first matching template
        captures a value its converter rejects (unless
        ``fallback_on_malformed`` is set).
        """
        parts = urlsplit(uri)
        if not self._config.accepts(parts.scheme, parts.hostname or ""):
            logger.debug("Rejected %r: scheme/host not accepted", uri)
            return self.default_result()
        return self.match_path(parts.path)

    def match_path(self, path: str) -> MatchResult:
        """Resolve a bare path (no scheme or host) against the table."""
        table = self._built()
        parts = split_path(path)

        for pattern in table.patterns:
            captured = pattern.capture(parts)
            if captured is None:
                continue
            try:
                params = pattern.convert(captured)
            except MalformedParameterError:
                if not self._config.fallback_on_malformed:
                    raise
                logger.debug("Malformed parameter in %r; using default destination", path)
                return MatchResult(destination=table.default_destination)
            logger.debug("Matched %r -> %s", path, pattern.entry.name)
            return MatchResult(
                destination=pattern.entry.name,
                parameters=MappingProxyType(params),
                template=pattern.entry.path,
            )

        logger.debug("No pattern matches %r; using default destination", path)
        return MatchResult(destination=table.default_destination)

    def build_path(self, name: str, **params: int | str) -> str:
        """Build the path that resolves to destination *name*.

        The reverse of ``match_path()``::

            resolver.build_path("PROFILE_OTHER", id=42)  # "profile/42"

        Raises ``LookupError`` for an unknown destination, ``TypeError``
        for missing or unexpected parameters, and
        ``MalformedParameterError`` if a value fails its converter.
        """
        table = self._built()
        try:
            pattern = table.by_name[name]
        except KeyError:
            msg = f"No destination named {name!r}."
            raise LookupError(msg) from None

        expected = {s.param_name for s in pattern.segments if s.is_param}
        missing = expected - params.keys()
        if missing:
            msg = f"{name} requires parameter(s): {', '.join(sorted(m for m in missing if m))}"
            raise TypeError(msg)
        unexpected = params.keys() - expected
        if unexpected:
            msg = f"{name} got unexpected parameter(s): {', '.join(sorted(unexpected))}"
            raise TypeError(msg)

        parts: list[str] = []
        for seg in pattern.segments:
            if not seg.is_param:
                parts.append(seg.value)
                continue
            raw = str(params[seg.param_name or ""])
            convert_param(seg.param_name or "", raw, seg.param_type)
            if not raw:
                raise MalformedParameterError(seg.param_name or "", raw, seg.param_type, "empty")
            parts.append(quote(raw, safe=""))
        return "/".join(parts)

    def __contains__(self, name: object) -> bool:
        return self._table is not None and name in self._table.by_name

    def __len__(self) -> int:
        return 0 if self._table is None else len(self._table.patterns)

    def __iter__(self) -> Iterator[PatternEntry]:
        return iter(self.entries)

    def _built(self) -> _LinkTable:
        table = self._table
        if table is None:
            msg = "Link table is not built; call register() first."
            raise ConfigurationError(msg)
        return table
