from __future__ import annotations

import re
from typing import Any, List, Optional, Sequence

from .accidentals import parse_accidental_run, render_accidentals
from .catalog import NOTE_COLLECTIONS
from .constants import NOTE_LETTER_COUNT, SEMITONES_PER_OCTAVE
from .intervals import get_interval_number, transform_intervals
from .logger_config import logger
from .models import TransformOptions, coerce_options
from .note_labels import (
    ENHARMONIC_NOTE_GROUPS,
    INTERVAL_TO_INTEGER,
    NOTE_LETTERS,
    NOTE_NAME_TO_INTEGER,
    ROOT_NOTE_TO_INTEGER,
)
from .utils import rotate_left

NOTE_LETTER_PATTERN = re.compile(r"^[A-Ga-g]")


def normalize_note_name(name: str) -> Optional[str]:
    """Canonical note name for ASCII or Unicode input ("bb" -> "B♭", "Fx" -> "F𝄪")."""
    if not isinstance(name, str) or not name:
        return None
    if name in NOTE_NAME_TO_INTEGER:
        return name

    match = NOTE_LETTER_PATTERN.match(name)
    if not match:
        return None

    letter = match.group(0).upper()
    alteration = parse_accidental_run(name[1:])
    if alteration is None:
        return None

    candidate = f"{letter}{render_accidentals(alteration)}"
    if candidate not in NOTE_NAME_TO_INTEGER:
        return None
    return candidate


def normalize_root_note(name: str) -> Optional[str]:
    note = normalize_note_name(name)
    if note is None or note not in ROOT_NOTE_TO_INTEGER:
        return None
    return note


def note_name_to_integer(name: str) -> Optional[int]:
    return NOTE_NAME_TO_INTEGER.get(name)


def note_name_string_to_integer(name: str) -> Optional[int]:
    note = normalize_note_name(name)
    if note is None:
        return None
    return note_name_to_integer(note)


def _spell_interval(root_integer: int, root_letter_index: int, interval: str) -> Optional[str]:
    semitones = INTERVAL_TO_INTEGER.get(interval)
    if semitones is None:
        return None

    pitch_class = (root_integer + semitones) % SEMITONES_PER_OCTAVE
    target_letter = NOTE_LETTERS[(root_letter_index + get_interval_number(interval) - 1) % NOTE_LETTER_COUNT]
    group = ENHARMONIC_NOTE_GROUPS[pitch_class]
    for note in group:
        if note.startswith(target_letter):
            return note
    # no spelling on the target letter within two accidentals
    return group[0]


def resolve_note_names(root_note: str, intervals: Sequence[str], options: Any = None) -> List[str]:
    """Spell each interval above ``root_note`` on its letter-correct note name.

    Unknown roots resolve to an empty list and unknown intervals are dropped.
    With ``fill_chromatic`` the twelve filled slots are spelled, and
    ``rotate_to_root_integer_0`` then rotates the names so C comes first.
    """
    opts = coerce_options(options, TransformOptions)
    root = normalize_root_note(root_note)
    if root is None:
        logger.debug("Unknown root note: %r", root_note)
        return []

    root_integer = ROOT_NOTE_TO_INTEGER[root]
    root_letter_index = NOTE_LETTERS.index(root[0])
    working = transform_intervals(intervals, opts.model_copy(update={"rotate_to_root_integer_0": False}))

    names = []
    for interval in working:
        note = _spell_interval(root_integer, root_letter_index, interval)
        if note is None:
            logger.debug("Skipping unknown interval %r above %s", interval, root)
            continue
        names.append(note)

    if opts.fill_chromatic and opts.rotate_to_root_integer_0:
        names = rotate_left(names, -root_integer)
    return names


def get_note_names_from_collection(root_note: str, collection_key: str, options: Any = None) -> List[str]:
    collection = NOTE_COLLECTIONS.get(collection_key)
    if collection is None:
        logger.debug("Unknown note collection key: %r", collection_key)
        return []

    opts = coerce_options(options, TransformOptions)
    if opts.fill_chromatic and opts.most_similar_scale is None and collection.most_similar_scale:
        opts = opts.model_copy(update={"most_similar_scale": collection.most_similar_scale})
    return resolve_note_names(root_note, collection.intervals, opts)
