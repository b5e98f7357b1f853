"""Helpers for list-valued text columns.

Several columns (club principles, age group seasons, preferred positions,
drill attributes, ...) hold a list of strings in a text column. Older rows
store comma-separated text; newer rows store a JSON array. Reads accept both
and never raise.
"""

import json
from collections.abc import Iterable
from uuid import UUID


def parse_text_list(raw: str | None) -> list[str]:
    """Parse a list-valued text column.

    Rules:
        - None or blank → ``[]``
        - Starts with ``[`` → JSON array; malformed JSON → ``[]``
        - Anything else → comma-split, trimmed, empties dropped

    Examples:
        >>> parse_text_list('["2023/24", "2024/25"]')
        ['2023/24', '2024/25']
        >>> parse_text_list("GK, CB")
        ['GK', 'CB']
        >>> parse_text_list("[bad")
        []
    """
    if raw is None or not raw.strip():
        return []

    text = raw.strip()
    if text.startswith("["):
        try:
            values = json.loads(text)
        except json.JSONDecodeError:
            return []
        if not isinstance(values, list):
            return []
        return [str(value) for value in values if value is not None]

    return [part.strip() for part in text.split(",") if part.strip()]


def dump_text_list(values: Iterable[str] | None) -> str | None:
    """Serialise a list of strings for a list-valued text column (JSON)."""
    if values is None:
        return None
    return json.dumps(list(values))


def parse_uuid_list(raw: str | None) -> list[UUID]:
    """Parse a list-valued text column of UUIDs; invalid entries are skipped."""
    ids: list[UUID] = []
    for value in parse_text_list(raw):
        try:
            ids.append(UUID(value))
        except ValueError:
            continue
    return ids


def dump_uuid_list(values: Iterable[UUID]) -> str:
    return json.dumps([str(value) for value in values])
