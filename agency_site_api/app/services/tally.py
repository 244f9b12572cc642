"""
Frequency tallies shared by the analytics and statistics services.
"""

from collections import Counter
from typing import Any, Dict, Iterable, List, Optional


def tally(keys: Iterable[str]) -> Counter:
    """Count occurrences; iteration order is the order of first occurrence."""
    return Counter(keys)


def rank(
    counts: Counter,
    label: str,
    value_key: str,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Turn a tally into ``[{label: key, value_key: count}, ...]`` sorted by count descending.

    The sort is stable, so keys with equal counts keep the order in
    which they were first seen.
    """
    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    if limit is not None:
        ordered = ordered[: max(limit, 0)]
    return [{label: key, value_key: count} for key, count in ordered]


def metadata_value(event: Dict[str, Any], key: str, default: str = "unknown") -> str:
    """Read a metadata field from a stored event, falling back to ``default``."""
    metadata = event.get("metadata") or {}
    return metadata.get(key) or default
