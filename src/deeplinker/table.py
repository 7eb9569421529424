"""Link table loading — ordered PatternEntry lists from YAML or mappings.

The table is application configuration, so hosts usually keep it in a
file next to their manifest::

    # links.yaml
    links:
      - name: HOME
        path: ""
      - name: PROFILE
        path: profile
      - name: PROFILE_OTHER
        path: profile/{id}

Order in the file is registration order, and therefore match order.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from deeplinker.errors import ConfigurationError, LinkTableError
from deeplinker.routing.pattern import PatternEntry, parse_template

logger = logging.getLogger("deeplinker.table")


def load_table(path: str | Path) -> list[PatternEntry]:
    """Read a YAML link table from *path*.

    Raises ``LinkTableError`` if the file is missing, is not UTF-8 or
    valid YAML, or does not describe a list of ``{name, path}`` entries.
    """
    path = Path(path)
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as exc:
        raise LinkTableError("Link table not found", path) from exc
    except UnicodeDecodeError as exc:
        raise LinkTableError(f"Link table is not UTF-8: {exc}", path) from exc
    except OSError as exc:
        raise LinkTableError(f"Cannot read link table: {exc}", path) from exc
    except yaml.YAMLError as exc:
        raise LinkTableError(f"Invalid YAML: {exc}", path) from exc

    entries = table_from_mapping(data, source=path)
    logger.debug("Loaded %d link(s) from %s", len(entries), path)
    return entries


def table_from_mapping(data: Any, source: str | Path | None = None) -> list[PatternEntry]:
    """Validate a decoded link table and return its entries in order.

    Accepts ``{"links": [...]}``. Each item is a mapping with a ``name``
    and an optional ``path`` (missing or null means the default
    destination).
    """
    source = source if source is not None else "mapping"

    if not isinstance(data, Mapping):
        raise LinkTableError("Link table must be a mapping with a 'links' list", source)

    items = data.get("links")
    if not isinstance(items, list):
        raise LinkTableError("'links' must be a list", source)

    entries: list[PatternEntry] = []
    problems: list[str] = []
    for i, item in enumerate(items, start=1):
        if not isinstance(item, Mapping):
            problems.append(f"link #{i}: expected a mapping, got {type(item).__name__}")
            continue
        name = item.get("name")
        path = item.get("path")
        if not isinstance(name, str) or not name:
            problems.append(f"link #{i}: 'name' must be a non-empty string")
            continue
        if path is None:
            path = ""
        if not isinstance(path, str):
            problems.append(f"link #{i} ({name}): 'path' must be a string")
            continue
        try:
            parse_template(path)
        except ConfigurationError as exc:
            problems.append(f"link #{i} ({name}): {exc}")
            continue
        entries.append(PatternEntry(name=name, path=path))

    if problems:
        detail = "; ".join(problems)
        raise LinkTableError(f"{len(problems)} invalid link(s): {detail}", source)

    return entries
