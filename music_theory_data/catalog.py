from __future__ import annotations

from typing import Any, Dict, List, Optional

from .chord_collections import AUGMENTED, DIMINISHED, DOMINANT_VARIANTS, MAJOR_VARIANTS, MINOR_VARIANTS
from .chord_labels import (
    CHORD_PATTERNS,
    generate_diatonic_labels_override,
    generate_harmonic_minor_labels_override,
    generate_melodic_minor_labels_override,
    get_chord_details_for_mode,
)
from .constants import SEMITONES_PER_OCTAVE
from .logger_config import logger
from .models import ChordDetails, NoteCollection
from .note_labels import (
    COMPOUND_TO_SIMPLE,
    EXTENSION_LABELS,
    FLAT_INTERVAL_TEMPLATE,
    INTERVAL_TO_INTEGER,
    INTERVAL_TO_QUALITY,
    QUALITY_LABELS,
    SIMPLE_TO_EXTENSION,
)
from .scale_collections import (
    DIATONIC_MODES,
    HARMONIC_MINOR_MODES,
    MELODIC_MINOR_MODES,
    OTHER_NOTE_COLLECTIONS,
    PENTATONIC_VARIANTS,
)

CHORD_LABEL_GENERATORS = {
    "ionian": generate_diatonic_labels_override,
    "harmonicMinor": generate_harmonic_minor_labels_override,
    "melodicMinor": generate_melodic_minor_labels_override,
}

NOTE_COLLECTION_GROUPS_METADATA = {
    "diatonicModes": {
        "display_name": "Diatonic Modes",
        "description": "Traditional seven-note scales derived from the major scale, each starting on a different scale degree.",
    },
    "pentatonicVariants": {
        "display_name": "Pentatonic Variants",
        "description": "Five-note scales used widely in folk, blues, and rock music.",
    },
    "majorVariants": {
        "display_name": "Major Variants",
        "description": "Chord structures based on the major triad, including sixth and major seventh harmonies.",
    },
    "minorVariants": {
        "display_name": "Minor Variants",
        "description": "Chord structures based on the minor triad, including sixth and seventh harmonies.",
    },
    "dominantVariants": {
        "display_name": "Dominant Variants",
        "description": "Chord structures based on the dominant seventh chord, including 9th, 11th and 13th extensions.",
    },
    "harmonicMinorModes": {
        "display_name": "Harmonic Minor Modes",
        "description": "Seven-note scales derived from the harmonic minor scale, each starting on a different scale degree.",
    },
    "melodicMinorModes": {
        "display_name": "Melodic Minor Modes",
        "description": "Seven-note scales derived from the melodic minor scale, each starting on a different scale degree.",
    },
    "diminished": {
        "display_name": "Diminished",
        "description": "Tense and dissonant chords and scales built on minor thirds.",
    },
    "augmented": {
        "display_name": "Augmented",
        "description": "Unstable and dreamy chords and scales, including classical augmented sixth chords.",
    },
    "otherNoteCollections": {
        "display_name": "Other",
        "description": "Other note collections that don't fall into a specific category.",
    },
}

_RAW_GROUPS = {
    "diatonicModes": DIATONIC_MODES,
    "pentatonicVariants": PENTATONIC_VARIANTS,
    "majorVariants": MAJOR_VARIANTS,
    "minorVariants": MINOR_VARIANTS,
    "dominantVariants": DOMINANT_VARIANTS,
    "harmonicMinorModes": HARMONIC_MINOR_MODES,
    "melodicMinorModes": MELODIC_MINOR_MODES,
    "diminished": DIMINISHED,
    "augmented": AUGMENTED,
    "otherNoteCollections": OTHER_NOTE_COLLECTIONS,
}


def derive_interval_labels_override(intervals: List[str]) -> Dict[str, Dict[int, str]]:
    """Relative, quality and extension labels where the collection's own
    spelling differs from the theme default (e.g. "♯4" instead of "♭5")."""
    overrides: Dict[str, Dict[int, str]] = {"relative": {}, "quality": {}, "extension": {}}
    for interval in intervals:
        slot = INTERVAL_TO_INTEGER[interval] % SEMITONES_PER_OCTAVE
        if slot == 0:
            continue
        simple = COMPOUND_TO_SIMPLE.get(interval, interval)
        candidates = {
            "relative": (simple, FLAT_INTERVAL_TEMPLATE[slot]),
            "quality": (INTERVAL_TO_QUALITY[interval], QUALITY_LABELS[slot]),
            "extension": (SIMPLE_TO_EXTENSION.get(simple, simple), EXTENSION_LABELS[slot]),
        }
        for theme, (label, default) in candidates.items():
            if label != default:
                overrides[theme][slot] = label
    return {theme: labels for theme, labels in overrides.items() if labels}


def build_note_collection(key: str, data: Dict[str, Any]) -> NoteCollection:
    intervals = list(data["intervals"])
    unknown = [interval for interval in intervals if interval not in INTERVAL_TO_INTEGER]
    if unknown:
        raise ValueError(f"{key}: unknown interval tokens {unknown}")
    integers = [INTERVAL_TO_INTEGER[interval] for interval in intervals]

    labels_override = derive_interval_labels_override(intervals)
    generator = CHORD_LABEL_GENERATORS.get(data.get("rotated_scale"))
    if generator is not None:
        labels_override.update(generator(integers, data["rotation"]))

    return NoteCollection(key=key, integers=integers, labels_override=labels_override, **data)


def _build_groups() -> Dict[str, Dict[str, NoteCollection]]:
    groups: Dict[str, Dict[str, NoteCollection]] = {}
    seen = set()
    for group_key, raw in _RAW_GROUPS.items():
        groups[group_key] = {}
        for key, data in raw.items():
            if key in seen:
                raise ValueError(f"Duplicate note collection key: {key}")
            seen.add(key)
            groups[group_key][key] = build_note_collection(key, data)
    return groups


GROUPED_NOTE_COLLECTIONS = _build_groups()

NOTE_COLLECTIONS: Dict[str, NoteCollection] = {
    key: collection
    for group in GROUPED_NOTE_COLLECTIONS.values()
    for key, collection in group.items()
}

NOTE_COLLECTION_KEYS = tuple(NOTE_COLLECTIONS.keys())


def _check_references() -> None:
    for collection in NOTE_COLLECTIONS.values():
        for reference in (collection.most_similar_scale, collection.rotated_scale):
            if reference and reference not in NOTE_COLLECTIONS:
                raise ValueError(f"{collection.key}: unknown collection reference {reference}")


_check_references()

logger.debug(
    "Loaded %d note collections in %d groups",
    len(NOTE_COLLECTIONS),
    len(GROUPED_NOTE_COLLECTIONS),
)


def is_valid_note_collection_key(key: Any) -> bool:
    return isinstance(key, str) and key in NOTE_COLLECTIONS


def get_note_collection(key: str) -> Optional[NoteCollection]:
    return NOTE_COLLECTIONS.get(key)


def get_note_collection_group(key: str) -> Optional[str]:
    for group_key, group in GROUPED_NOTE_COLLECTIONS.items():
        if key in group:
            return group_key
    return None


def get_chord_details_for_mode_key(key: str) -> List[ChordDetails]:
    """Chords on each degree of a diatonic, harmonic-minor or melodic-minor
    mode. Other keys give an empty list."""
    collection = NOTE_COLLECTIONS.get(key)
    if collection is None or collection.rotated_scale not in CHORD_PATTERNS:
        return []
    if collection.rotation is None:
        raise ValueError(f"Mode {key} is missing its rotation")
    triads, sevenths = CHORD_PATTERNS[collection.rotated_scale]
    return get_chord_details_for_mode(collection.intervals, collection.rotation, triads, sevenths)


def _get_chord_details_for_family(key: str, parent_scale: str) -> List[ChordDetails]:
    collection = NOTE_COLLECTIONS.get(key)
    if collection is None or collection.rotated_scale != parent_scale:
        raise ValueError(f"{key} is not a mode of {parent_scale}")
    return get_chord_details_for_mode_key(key)


def get_chord_details_for_diatonic_mode(key: str) -> List[ChordDetails]:
    return _get_chord_details_for_family(key, "ionian")


def get_chord_details_for_harmonic_minor_mode(key: str) -> List[ChordDetails]:
    return _get_chord_details_for_family(key, "harmonicMinor")


def get_chord_details_for_melodic_minor_mode(key: str) -> List[ChordDetails]:
    return _get_chord_details_for_family(key, "melodicMinor")
