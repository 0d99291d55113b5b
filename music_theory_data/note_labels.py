from __future__ import annotations

from typing import Dict, List, Tuple

ACCIDENTAL_ALTERATIONS = {
    "𝄫": -2,
    "♭": -1,
    "♮": 0,
    "": 0,
    "♯": 1,
    "𝄪": 2,
}

INTERVAL_NUMBER_SEMITONES = {
    1: 0,
    2: 2,
    3: 4,
    4: 5,
    5: 7,
    6: 9,
    7: 11,
    8: 12,
    9: 14,
    10: 16,
    11: 17,
    12: 19,
    13: 21,
    14: 23,
    15: 24,
}

PERFECT_INTERVAL_NUMBERS = frozenset([1, 4, 5, 8, 11, 12, 15])

PERFECT_QUALITY_CODES = {"𝄫": "dd", "♭": "d", "♮": "P", "": "P", "♯": "A", "𝄪": "AA"}
IMPERFECT_QUALITY_CODES = {"𝄫": "d", "♭": "m", "♮": "M", "": "M", "♯": "A", "𝄪": "AA"}


def _build_interval_tables() -> Tuple[Dict[str, int], Dict[str, str], Dict[str, str]]:
    to_integer: Dict[str, int] = {}
    to_quality: Dict[str, str] = {}
    from_quality: Dict[str, str] = {}
    for number, base in INTERVAL_NUMBER_SEMITONES.items():
        codes = PERFECT_QUALITY_CODES if number in PERFECT_INTERVAL_NUMBERS else IMPERFECT_QUALITY_CODES
        for accidental, alteration in ACCIDENTAL_ALTERATIONS.items():
            token = f"{accidental}{number}"
            quality = f"{codes[accidental]}{number}"
            to_integer[token] = base + alteration
            to_quality[token] = quality
            if accidental != "♮":
                from_quality[quality] = token
    return to_integer, to_quality, from_quality


INTERVAL_TO_INTEGER, INTERVAL_TO_QUALITY, QUALITY_TO_INTERVAL = _build_interval_tables()

INTERVALS = tuple(INTERVAL_TO_INTEGER.keys())
INTERVAL_QUALITIES = tuple(QUALITY_TO_INTERVAL.keys())

# one canonical spelling per semitone 0..11
FLAT_INTERVAL_TEMPLATE = ("1", "♭2", "2", "♭3", "3", "4", "♭5", "5", "♭6", "6", "♭7", "7")


def _build_transformation(pairs: List[Tuple[int, int]]) -> Dict[str, str]:
    table: Dict[str, str] = {}
    for accidental in ("", "♮", "♭", "♯"):
        for source, target in pairs:
            table[f"{accidental}{source}"] = f"{accidental}{target}"
    return table


def _invert(table: Dict[str, str]) -> Dict[str, str]:
    return {target: source for source, target in table.items()}


SIMPLE_TO_EXTENSION = _build_transformation([(2, 9), (4, 11), (6, 13)])
EXTENSION_TO_SIMPLE = _invert(SIMPLE_TO_EXTENSION)
SIMPLE_TO_COMPOUND = _build_transformation([(2, 9), (3, 10), (4, 11), (5, 12), (6, 13), (7, 14)])
COMPOUND_TO_SIMPLE = _invert(SIMPLE_TO_COMPOUND)

INTERVAL_TRANSFORMATION_TABLES = {
    "simpleToExtension": SIMPLE_TO_EXTENSION,
    "extensionToSimple": EXTENSION_TO_SIMPLE,
    "simpleToCompound": SIMPLE_TO_COMPOUND,
    "compoundToSimple": COMPOUND_TO_SIMPLE,
}

NOTE_LETTERS = ("C", "D", "E", "F", "G", "A", "B")

# indexed by pitch class, first member is the flat-template spelling
ENHARMONIC_NOTE_GROUPS = (
    ("C", "C♮", "B♯", "D𝄫"),
    ("D♭", "C♯", "B𝄪"),
    ("D", "D♮", "E𝄫", "C𝄪"),
    ("E♭", "D♯", "F𝄫"),
    ("E", "E♮", "F♭", "D𝄪"),
    ("F", "F♮", "E♯", "G𝄫"),
    ("G♭", "F♯", "E𝄪"),
    ("G", "G♮", "A𝄫", "F𝄪"),
    ("A♭", "G♯"),
    ("A", "A♮", "B𝄫", "G𝄪"),
    ("B♭", "A♯", "C𝄫"),
    ("B", "B♮", "C♭", "A𝄪"),
)

ROOT_NOTE_GROUPS = (
    ("C", "B♯"),
    ("D♭", "C♯"),
    ("D",),
    ("E♭", "D♯"),
    ("E", "F♭"),
    ("F", "E♯"),
    ("G♭", "F♯"),
    ("G",),
    ("A♭", "G♯"),
    ("A",),
    ("B♭", "A♯"),
    ("B", "C♭"),
)

NOTE_NAME_TO_INTEGER = {
    name: pitch_class
    for pitch_class, group in enumerate(ENHARMONIC_NOTE_GROUPS)
    for name in group
}

ROOT_NOTE_TO_INTEGER = {
    name: pitch_class
    for pitch_class, group in enumerate(ROOT_NOTE_GROUPS)
    for name in group
}

NOTE_NAMES = tuple(NOTE_NAME_TO_INTEGER.keys())
ROOT_NOTES = tuple(ROOT_NOTE_TO_INTEGER.keys())

FLAT_NOTE_LABELS = tuple(group[0] for group in ENHARMONIC_NOTE_GROUPS)
SHARP_NOTE_LABELS = ("C", "C♯", "D", "D♯", "E", "F", "F♯", "G", "G♯", "A", "A♯", "B")
QUALITY_LABELS = tuple(INTERVAL_TO_QUALITY[interval] for interval in FLAT_INTERVAL_TEMPLATE)
EXTENSION_LABELS = tuple(SIMPLE_TO_EXTENSION.get(interval, interval) for interval in FLAT_INTERVAL_TEMPLATE)
EMPTY_LABELS = ("",) * 12

NOTE_LABEL_THEME_DATA = {
    "flat": {
        "name": "Flat Notes",
        "short_name": "Flat",
        "is_relative": False,
        "labels": FLAT_NOTE_LABELS,
    },
    "sharp": {
        "name": "Sharp Notes",
        "short_name": "Sharp",
        "is_relative": False,
        "labels": SHARP_NOTE_LABELS,
    },
    "relative": {
        "name": "Relative Intervals",
        "short_name": "Relative",
        "is_relative": True,
        "labels": FLAT_INTERVAL_TEMPLATE,
    },
    "quality": {
        "name": "Relative Interval Qualities",
        "short_name": "Quality",
        "is_relative": True,
        "labels": QUALITY_LABELS,
    },
    "extension": {
        "name": "Relative Interval Extensions",
        "short_name": "Extension",
        "is_relative": True,
        "labels": EXTENSION_LABELS,
    },
    "fixedDoFlat": {
        "name": "Solfege Fixed Do Flat Notes",
        "short_name": "Fixed Do Flat",
        "is_relative": False,
        "labels": ("do", "re♭", "re", "mi♭", "mi", "fa", "sol♭", "sol", "la♭", "la", "si♭", "si"),
    },
    "fixedDoSharp": {
        "name": "Solfege Fixed Do Sharp Notes",
        "short_name": "Fixed Do Sharp",
        "is_relative": False,
        "labels": ("do", "do♯", "re", "re♯", "mi", "fa", "fa♯", "sol", "sol♯", "la", "la♯", "si"),
    },
    "movableDo": {
        "name": "Solfege Movable Do Notes",
        "short_name": "Movable Do",
        "is_relative": True,
        "labels": ("do", "ra", "re", "me", "mi", "fa", "fi", "sol", "le", "la", "te", "ti"),
    },
    "movableLa": {
        "name": "Solfege Movable La Notes",
        "short_name": "Movable La",
        "is_relative": True,
        "labels": ("la", "te", "ti", "do", "di", "re", "re", "mi", "fa", "fi", "sol", "si"),
    },
    "triad": {
        "name": "Triad Chords",
        "short_name": "Triad",
        "is_relative": True,
        "labels": EMPTY_LABELS,
    },
    "romanTriad": {
        "name": "Roman Numeral Triad Chords",
        "short_name": "Roman Triad",
        "is_relative": True,
        "labels": EMPTY_LABELS,
    },
    "seventh": {
        "name": "Seventh Chords",
        "short_name": "Seventh",
        "is_relative": True,
        "labels": EMPTY_LABELS,
    },
    "romanSeventh": {
        "name": "Roman Numeral Seventh Chords",
        "short_name": "Roman Seventh",
        "is_relative": True,
        "labels": EMPTY_LABELS,
    },
}
