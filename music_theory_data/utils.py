from __future__ import annotations

from typing import List, Sequence, TypeVar

from .constants import LOG_PREVIEW_CHARS

T = TypeVar("T")


def rotate_left(items: Sequence[T], steps: int) -> List[T]:
    """Rotate left by steps; negative steps rotate right."""
    values = list(items)
    if not values:
        return values
    offset = steps % len(values)
    return values[offset:] + values[:offset]


def rotate_to_start_with(items: Sequence[T], first: T) -> List[T]:
    values = list(items)
    if first not in values:
        raise ValueError(f"Element not found in sequence: {first!r}")
    return rotate_left(values, values.index(first))


def summarize_text(text: str, limit: int = LOG_PREVIEW_CHARS) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "...(truncated)"
