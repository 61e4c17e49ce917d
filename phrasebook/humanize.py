"""Phrase helpers shared by the step generators."""

from typing import Any, Mapping


def conjunction(index: int, total: int) -> str:
    """Return the separator placed before entry ``index`` of ``total`` entries.

    Two entries are joined with " and "; longer lists use commas with an
    Oxford comma before the last entry.
    """
    if index == 0:
        return ""
    if total == 2:
        return " and "
    if index < total - 1:
        return ", "
    return ", and "


def humanize(attributes: Mapping[str, Any]) -> str:
    """Turn an attribute mapping into "with a of '1', b of '2', and c of '3'".

    Insertion order is kept. An empty mapping gives an empty string.
    """
    if not attributes:
        return ""
    total = len(attributes)
    parts = ["with "]
    for index, (key, value) in enumerate(attributes.items()):
        parts.append(conjunction(index, total))
        parts.append(f"{key} of '{value}'")
    return "".join(parts)


def humanize_path(path_name: str) -> str:
    """``user_profile`` -> ``user profile``."""
    return str(path_name).replace("_", " ")
