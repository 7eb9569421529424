"""deeplinker — resolve deep-link URIs to named application destinations.

Register a table of path templates once at startup, then resolve each
incoming link to a destination and its typed parameters.

Basic usage::

    from deeplinker import LinkResolver, PatternEntry

    resolver = LinkResolver()
    resolver.register([
        PatternEntry("HOME"),
        PatternEntry("PROFILE", "profile"),
        PatternEntry("PROFILE_OTHER", "profile/{id}"),
    ])

    result = resolver.resolve("myapp://example.com/profile/42")
    result.destination   # "PROFILE_OTHER"
    result.parameters    # {"id": 42}

Tables kept in YAML::

    from deeplinker import load_table
    resolver.register(load_table("links.yaml"))
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "DeepLinkerError",
    "LinkResolver",
    "LinkTableError",
    "MalformedParameterError",
    "MatchResult",
    "PatternEntry",
    "ResolverConfig",
    "load_table",
    "table_from_mapping",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import deeplinker`` fast while providing a clean top-level API.
    """
    if name == "LinkResolver":
        from deeplinker.routing.resolver import LinkResolver

        return LinkResolver

    if name in ("MatchResult", "PatternEntry"):
        from deeplinker.routing import pattern as _pattern

        return getattr(_pattern, name)

    if name == "ResolverConfig":
        from deeplinker.config import ResolverConfig

        return ResolverConfig

    if name in ("load_table", "table_from_mapping"):
        from deeplinker import table as _table

        return getattr(_table, name)

    if name in ("ConfigurationError", "DeepLinkerError", "LinkTableError", "MalformedParameterError"):
        from deeplinker import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
