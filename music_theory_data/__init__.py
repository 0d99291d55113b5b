from __future__ import annotations

from .accidentals import normalize_accidental_string, parse_accidental_run, render_accidentals
from .catalog import (
    GROUPED_NOTE_COLLECTIONS,
    NOTE_COLLECTION_GROUPS_METADATA,
    NOTE_COLLECTIONS,
    get_chord_details_for_diatonic_mode,
    get_chord_details_for_harmonic_minor_mode,
    get_chord_details_for_melodic_minor_mode,
    get_chord_details_for_mode_key,
    get_note_collection,
    is_valid_note_collection_key,
)
from .chord_labels import (
    ChordQuality,
    generate_diatonic_labels_override,
    generate_harmonic_minor_labels_override,
    generate_labels_override,
    generate_melodic_minor_labels_override,
    get_chord_details_for_mode,
)
from .collection_labels import NOTE_LABEL_THEMES, get_note_collection_labels
from .intervals import (
    filter_out_octave,
    normalize_compound_interval,
    normalize_compound_intervals,
    normalize_interval,
    normalize_intervals,
    normalize_simple_interval,
    normalize_simple_intervals,
    to_sorted_intervals,
    transform_intervals,
)
from .midi import (
    note_name_and_interval_to_midi,
    note_name_to_midi,
    root_integer_and_interval_to_midi,
    root_midi_and_interval_to_midi,
)
from .models import ChordDetails, NoteCollection, NoteLabelTheme, SearchOptions, TransformOptions
from .note_names import (
    get_note_names_from_collection,
    normalize_note_name,
    normalize_root_note,
    note_name_string_to_integer,
    note_name_to_integer,
    resolve_note_names,
)
from .qualities import (
    get_intervals_from_qualities,
    get_qualities_from_collection,
    get_qualities_from_collection_key,
    get_qualities_from_intervals,
)
from .search import find_note_collection, normalize_search_term, search_note_collections
from .utils import rotate_left, rotate_to_start_with

__version__ = "0.1.0"
