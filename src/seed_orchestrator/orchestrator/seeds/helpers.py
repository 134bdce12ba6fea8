from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterable

from seed_orchestrator.orchestrator.persistence import SeedRecord


def slugify(text: str, *, separator: str = "-") -> str:
    """Lowercase ASCII slug: accents dropped, runs of other characters collapsed."""

    ascii_text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[^a-z0-9]+", separator, ascii_text.lower()).strip(separator)


def index_by_key(records: Iterable[SeedRecord]) -> dict[str, SeedRecord]:
    return {record.key: record for record in records}


def lookup(index: dict[str, SeedRecord], key: str, *, entity: str, caller: str) -> SeedRecord:
    """Fetch a record that seed data refers to by name."""

    try:
        return index[key]
    except KeyError:
        raise LookupError(f"{caller}: unknown {entity} {key!r}") from None
