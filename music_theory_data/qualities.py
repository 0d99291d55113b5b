from __future__ import annotations

from typing import Any, List, Sequence

from .catalog import NOTE_COLLECTIONS
from .intervals import transform_intervals
from .logger_config import logger
from .models import NoteCollection, TransformOptions, coerce_options
from .note_labels import INTERVAL_TO_QUALITY, QUALITY_TO_INTERVAL


def get_qualities_from_intervals(intervals: Sequence[str], options: Any = None) -> List[str]:
    working = transform_intervals(intervals, options)
    return [INTERVAL_TO_QUALITY[interval] for interval in working if interval in INTERVAL_TO_QUALITY]


def get_qualities_from_collection(collection: NoteCollection, options: Any = None) -> List[str]:
    """Interval qualities of a collection; chromatic fills are spelled after its most similar scale."""
    opts = coerce_options(options, TransformOptions)
    if opts.fill_chromatic and collection.most_similar_scale:
        opts = opts.model_copy(update={"most_similar_scale": collection.most_similar_scale})
    return get_qualities_from_intervals(collection.intervals, opts)


def get_qualities_from_collection_key(key: str, options: Any = None) -> List[str]:
    collection = NOTE_COLLECTIONS.get(key)
    if collection is None:
        logger.debug("Unknown note collection key: %r", key)
        return []
    return get_qualities_from_collection(collection, options)


def get_intervals_from_qualities(qualities: Sequence[str]) -> List[str]:
    return [QUALITY_TO_INTERVAL[quality] for quality in qualities if quality in QUALITY_TO_INTERVAL]
