"""``deeplinker routes`` — list the destinations in a link table.

Loads and validates the table, then prints every destination with its
path template in match order.
"""

import argparse

from deeplinker.cli._load import build_resolver


def run_routes(args: argparse.Namespace) -> None:
    """Print a NAME / PATH table for ``args.table``."""
    resolver = build_resolver(args)

    entries = resolver.entries
    if not entries:
        print("No links registered.")
        return

    # Build rows: (name, path); the default shows as "/"
    rows: list[tuple[str, str]] = [(e.name, e.path or "/") for e in entries]

    # Column widths
    max_name = max(max(len(r[0]) for r in rows), 4)  # "NAME" header

    fmt = f"{{:<{max_name}}}  {{}}"
    print(fmt.format("NAME", "PATH"))
    sep_len = max_name + 2 + max(len(r[1]) for r in rows)
    print("-" * min(max(sep_len, 10), 80))
    for name, path in rows:
        print(fmt.format(name, path))
    print(f"\nDefault destination: {resolver.default_destination}")
