"""Resolver configuration.

ResolverConfig is a frozen dataclass — immutable after creation, shared
freely between threads, no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Resolver configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ResolverConfig(schemes=("myapp",), fallback_on_malformed=True)
    """

    # Destination returned when nothing matches and no entry has an
    # empty template.
    default_destination: str = "HOME"

    # Treat a MalformedParameterError as "no match" instead of raising.
    fallback_on_malformed: bool = False

    # Scheme/host restriction (case-insensitive). Empty accepts any.
    schemes: tuple[str, ...] = ()
    hosts: tuple[str, ...] = ()

    def accepts(self, scheme: str, host: str) -> bool:
        """True if a URI with *scheme* and *host* may be matched at all."""
        if self.schemes and scheme.lower() not in {s.lower() for s in self.schemes}:
            return False
        return not (self.hosts and host.lower() not in {h.lower() for h in self.hosts})
