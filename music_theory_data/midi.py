from __future__ import annotations

from typing import Optional

from .constants import DEFAULT_OCTAVE, MIDI_MAX, MIDI_MIN, SEMITONES_PER_OCTAVE
from .logger_config import logger
from .note_labels import INTERVAL_TO_INTEGER
from .note_names import note_name_string_to_integer


def _octave_base(octave: int) -> int:
    # C4 is MIDI 60
    return (octave + 1) * SEMITONES_PER_OCTAVE


def _in_range(midi: int) -> Optional[int]:
    if midi < MIDI_MIN or midi > MIDI_MAX:
        logger.debug("MIDI note out of range: %d", midi)
        return None
    return midi


def root_integer_and_interval_to_midi(
    root_note_integer: int,
    interval: str,
    octave: int = DEFAULT_OCTAVE,
) -> Optional[int]:
    if not 0 <= root_note_integer < SEMITONES_PER_OCTAVE:
        return None
    semitones = INTERVAL_TO_INTEGER.get(interval)
    if semitones is None:
        return None
    return _in_range(_octave_base(octave) + root_note_integer + semitones)


def root_midi_and_interval_to_midi(root_note_midi: int, interval: str) -> Optional[int]:
    semitones = INTERVAL_TO_INTEGER.get(interval)
    if semitones is None:
        return None
    return _in_range(root_note_midi + semitones)


def note_name_to_midi(note_name: str, octave: int = DEFAULT_OCTAVE) -> Optional[int]:
    """MIDI number of a note name in an octave.

    The octave belongs to the pitch class, not the letter, so "B♯4" and "C4"
    are both 60.
    """
    pitch_class = note_name_string_to_integer(note_name)
    if pitch_class is None:
        return None
    return _in_range(_octave_base(octave) + pitch_class)


def note_name_and_interval_to_midi(
    note_name: str,
    interval: str,
    octave: int = DEFAULT_OCTAVE,
) -> Optional[int]:
    pitch_class = note_name_string_to_integer(note_name)
    semitones = INTERVAL_TO_INTEGER.get(interval)
    if pitch_class is None or semitones is None:
        return None
    return _in_range(_octave_base(octave) + pitch_class + semitones)
