"""Core utility functions for the application"""

from typing import Any, Iterable, List, Optional, TypeVar

T = TypeVar("T")


def _get_id(item: Any) -> Optional[str]:
    if isinstance(item, dict):
        return item.get("id")
    return getattr(item, "id", None)


def difference_by_id(previous: Iterable[T], current: Iterable[Any]) -> List[T]:
    """
    Items of `previous` whose id does not appear in `current`.

    Items of `current` without an id never match anything.

    Args:
        previous: Persisted rows (or dicts) currently attached to a parent
        current: Incoming rows, DTOs or dicts

    Returns:
        List of rows to unbind, in their original order
    """
    current_ids = {_get_id(item) for item in current}
    current_ids.discard(None)
    return [item for item in previous if _get_id(item) not in current_ids]


def like_pattern(keyword: str) -> str:
    """Wrap a keyword for a `contains` LIKE match, escaping wildcards."""
    escaped = keyword.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"
