from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional, Sequence

from .accidentals import parse_accidental_run, render_accidentals
from .catalog import NOTE_COLLECTIONS
from .constants import (
    MAX_SIMPLE_INTERVAL_NUMBER,
    MIN_COMPOUND_INTERVAL_NUMBER,
    OCTAVE_INTERVALS,
    SEMITONES_PER_OCTAVE,
    UNISON_INTERVAL,
)
from .logger_config import logger
from .models import TransformOptions, coerce_options
from .note_labels import (
    FLAT_INTERVAL_TEMPLATE,
    INTERVAL_TO_INTEGER,
    INTERVAL_TRANSFORMATION_TABLES,
    QUALITY_TO_INTERVAL,
)
from .utils import rotate_left

INTERVAL_PATTERN = re.compile(r"(.*?)([0-9]+)")


def interval_to_integer(interval: str) -> Optional[int]:
    return INTERVAL_TO_INTEGER.get(interval)


def get_interval_number(interval: str) -> Optional[int]:
    match = INTERVAL_PATTERN.fullmatch(interval)
    if not match:
        return None
    return int(match.group(2))


def normalize_interval(value: str) -> Optional[str]:
    """Canonical interval token for a quality code or accidental spelling.

    Accepts quality codes ("M3", "d5", "AA4"), canonical tokens ("♭7") and
    ASCII or mixed accidental runs ("bb7", "x4", "b#3"). Returns None for
    anything that does not resolve to a known interval.
    """
    if value in QUALITY_TO_INTERVAL:
        return QUALITY_TO_INTERVAL[value]
    if value in INTERVAL_TO_INTEGER:
        return value

    match = INTERVAL_PATTERN.fullmatch(value)
    if not match:
        return None

    accidentals, number = match.groups()
    alteration = parse_accidental_run(accidentals)
    if alteration is None:
        return None

    candidate = f"{render_accidentals(alteration)}{number}"
    if candidate not in INTERVAL_TO_INTEGER:
        return None
    return candidate


def normalize_simple_interval(value: str) -> Optional[str]:
    interval = normalize_interval(value)
    if interval is None or get_interval_number(interval) > MAX_SIMPLE_INTERVAL_NUMBER:
        return None
    return interval


def normalize_compound_interval(value: str) -> Optional[str]:
    interval = normalize_interval(value)
    if interval is None or get_interval_number(interval) < MIN_COMPOUND_INTERVAL_NUMBER:
        return None
    return interval


def _normalize_all(values: Iterable[str], normalizer) -> List[str]:
    normalized = []
    for value in values:
        interval = normalizer(value)
        if interval is None:
            logger.debug("Dropping unrecognized interval: %r", value)
            continue
        normalized.append(interval)
    return normalized


def normalize_intervals(values: Iterable[str]) -> List[str]:
    return _normalize_all(values, normalize_interval)


def normalize_simple_intervals(values: Iterable[str]) -> List[str]:
    return _normalize_all(values, normalize_simple_interval)


def normalize_compound_intervals(values: Iterable[str]) -> List[str]:
    return _normalize_all(values, normalize_compound_interval)


def filter_out_octave(intervals: Iterable[str]) -> List[str]:
    return [interval for interval in intervals if interval not in OCTAVE_INTERVALS]


def to_sorted_intervals(intervals: Iterable[str]) -> List[str]:
    """Stable sort by semitone value; unknown tokens keep their order at the end."""
    values = list(intervals)
    known = [interval for interval in values if interval in INTERVAL_TO_INTEGER]
    unknown = [interval for interval in values if interval not in INTERVAL_TO_INTEGER]
    return sorted(known, key=INTERVAL_TO_INTEGER.__getitem__) + unknown


def _overlay_intervals(slots: List[str], intervals: Iterable[str]) -> None:
    for interval in intervals:
        semitones = INTERVAL_TO_INTEGER.get(interval)
        if semitones is None:
            logger.debug("Skipping unknown interval in chromatic fill: %r", interval)
            continue
        slot = semitones % SEMITONES_PER_OCTAVE
        if slot == 0 and interval != UNISON_INTERVAL:
            continue
        slots[slot] = interval


def _fill_chromatic(intervals: Sequence[str], options: TransformOptions, table: Dict[str, str]) -> List[str]:
    slots = list(FLAT_INTERVAL_TEMPLATE)

    if options.most_similar_scale:
        scale = NOTE_COLLECTIONS.get(options.most_similar_scale)
        if scale is None:
            logger.debug("Ignoring unknown most similar scale: %s", options.most_similar_scale)
        else:
            _overlay_intervals(slots, scale.intervals)

    _overlay_intervals(slots, intervals)
    slots = [table.get(interval, interval) for interval in slots]

    steps = options.rotate_left
    if options.rotate_to_root_integer_0 and options.root_note_integer is not None:
        steps -= options.root_note_integer
    return rotate_left(slots, steps)


def transform_intervals(intervals: Sequence[str], options: Any = None) -> List[str]:
    opts = coerce_options(options, TransformOptions)
    table: Dict[str, str] = {}
    if opts.interval_transformation:
        table = INTERVAL_TRANSFORMATION_TABLES[opts.interval_transformation]

    if opts.fill_chromatic:
        return _fill_chromatic(intervals, opts, table)

    working = list(intervals)
    if opts.filter_out_octave:
        working = filter_out_octave(working)
    working = [table.get(interval, interval) for interval in working]
    if opts.should_sort:
        working = to_sorted_intervals(working)
    if opts.rotate_left:
        working = rotate_left(working, opts.rotate_left)
    return working
