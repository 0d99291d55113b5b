from __future__ import annotations

import logging

LOGGER_NAME = "music_theory_data"
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_PREVIEW_CHARS = 200

SEMITONES_PER_OCTAVE = 12
NOTE_LETTER_COUNT = 7
MIN_INTERVAL_NUMBER = 1
MAX_INTERVAL_NUMBER = 15
MAX_SIMPLE_INTERVAL_NUMBER = 8
MIN_COMPOUND_INTERVAL_NUMBER = 9

MIDI_MIN = 0
MIDI_MAX = 127
DEFAULT_OCTAVE = 4

UNISON_INTERVAL = "1"
OCTAVE_INTERVALS = ("8", "♮8")

LABEL_THEME_NAMES = (
    "flat",
    "sharp",
    "relative",
    "quality",
    "extension",
    "fixedDoFlat",
    "fixedDoSharp",
    "movableDo",
    "movableLa",
    "triad",
    "romanTriad",
    "seventh",
    "romanSeventh",
)

CHORD_LABEL_THEME_NAMES = ("triad", "romanTriad", "seventh", "romanSeventh")

INTERVAL_TRANSFORMATIONS = (
    "simpleToExtension",
    "extensionToSimple",
    "simpleToCompound",
    "compoundToSimple",
)

COLLECTION_CATEGORIES = ("scale", "chord")
