"""Resolver construction shared by ``deeplinker resolve`` and ``deeplinker routes``."""

import argparse
import sys

from deeplinker.config import ResolverConfig
from deeplinker.errors import ConfigurationError
from deeplinker.routing.resolver import LinkResolver
from deeplinker.table import load_table


def config_from_args(args: argparse.Namespace) -> ResolverConfig:
    """Map CLI flags onto a ResolverConfig. Absent flags keep defaults."""
    defaults = ResolverConfig()
    return ResolverConfig(
        default_destination=getattr(args, "default", None) or defaults.default_destination,
        fallback_on_malformed=getattr(args, "fallback_on_malformed", False),
        schemes=tuple(getattr(args, "scheme", ()) or ()),
        hosts=tuple(getattr(args, "host", ()) or ()),
    )


def build_resolver(args: argparse.Namespace) -> LinkResolver:
    """Load ``args.table`` and return a built resolver.

    Prints the error and exits with code 1 if the table is unusable.
    """
    resolver = LinkResolver(config_from_args(args))
    try:
        resolver.register(load_table(args.table))
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    return resolver
