"""``deeplinker resolve`` — resolve URIs against a link table.

Prints one line per URI: the URI, the destination, and the parameters
as JSON. Exits with code 1 if any URI carries a malformed parameter.
"""

import argparse
import json
import sys

from deeplinker.cli._load import build_resolver
from deeplinker.errors import MalformedParameterError


def run_resolve(args: argparse.Namespace) -> None:
    """Resolve each of ``args.uris`` and print the outcome."""
    resolver = build_resolver(args)

    failed = 0
    for uri in args.uris:
        try:
            result = resolver.resolve(uri)
        except MalformedParameterError as exc:
            print(f"Error: {uri}: {exc}", file=sys.stderr)
            failed += 1
            continue
        params = json.dumps(dict(result.parameters), sort_keys=True)
        suffix = "  (default)" if result.is_fallback else ""
        print(f"{uri}  ->  {result.destination}  {params}{suffix}")

    if failed:
        raise SystemExit(1)
