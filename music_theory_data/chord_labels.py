from __future__ import annotations

from enum import Enum
from typing import Dict, List, Sequence, Tuple, Union

from .constants import OCTAVE_INTERVALS
from .models import ChordDetails
from .utils import rotate_left


class ChordQuality(str, Enum):
    MAJOR = "M"
    MINOR = "m"
    DIMINISHED = "°"
    AUGMENTED = "+"
    MAJOR_SEVENTH = "M7"
    MINOR_SEVENTH = "m7"
    DOMINANT_SEVENTH = "7"
    HALF_DIMINISHED_SEVENTH = "ø7"
    MINOR_SEVENTH_FLAT_FIVE = "m7♭5"
    DIMINISHED_SEVENTH = "°7"
    MINOR_MAJOR_SEVENTH = "m(M7)"
    AUGMENTED_MAJOR_SEVENTH = "+M7"
    MAJOR_SEVENTH_SHARP_FIVE = "M7♯5"


ROMAN_NUMERALS = ("I", "II", "III", "IV", "V", "VI", "VII")

LOWERCASE_QUALITIES = frozenset(
    [
        ChordQuality.MINOR,
        ChordQuality.DIMINISHED,
        ChordQuality.MINOR_SEVENTH,
        ChordQuality.HALF_DIMINISHED_SEVENTH,
        ChordQuality.MINOR_SEVENTH_FLAT_FIVE,
        ChordQuality.DIMINISHED_SEVENTH,
        ChordQuality.MINOR_MAJOR_SEVENTH,
    ]
)

# triads print no suffix for plain major/minor
ROMAN_SUFFIXES = {
    ChordQuality.MAJOR: "",
    ChordQuality.MINOR: "",
}

DIATONIC_TRIADS = ("M", "m", "m", "M", "M", "m", "°")
DIATONIC_SEVENTHS = ("M7", "m7", "m7", "M7", "7", "m7", "ø7")

HARMONIC_MINOR_TRIADS = ("m", "°", "+", "m", "M", "M", "°")
HARMONIC_MINOR_SEVENTHS = ("m(M7)", "ø7", "+M7", "m7", "7", "M7", "°7")

MELODIC_MINOR_TRIADS = ("m", "m", "+", "M", "M", "°", "°")
MELODIC_MINOR_SEVENTHS = ("m(M7)", "m7", "+M7", "7", "7", "ø7", "ø7")

# triad and seventh patterns keyed by the parent scale of each mode family
CHORD_PATTERNS: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "ionian": (DIATONIC_TRIADS, DIATONIC_SEVENTHS),
    "harmonicMinor": (HARMONIC_MINOR_TRIADS, HARMONIC_MINOR_SEVENTHS),
    "melodicMinor": (MELODIC_MINOR_TRIADS, MELODIC_MINOR_SEVENTHS),
}

QualityValue = Union[ChordQuality, str]


def to_chord_quality(value: QualityValue) -> ChordQuality:
    try:
        return ChordQuality(value)
    except ValueError:
        raise ValueError(f"Unknown chord quality: {value}") from None


def to_roman_numeral(quality: QualityValue, degree: int) -> str:
    chord_quality = to_chord_quality(quality)
    numeral = ROMAN_NUMERALS[degree % len(ROMAN_NUMERALS)]
    if chord_quality in LOWERCASE_QUALITIES:
        numeral = numeral.lower()
    return numeral + ROMAN_SUFFIXES.get(chord_quality, chord_quality.value)


def generate_labels_override(
    integers: Sequence[int],
    rotation: int,
    triads: Sequence[QualityValue],
    sevenths: Sequence[QualityValue],
) -> Dict[str, Dict[int, str]]:
    """Chord labels for every degree of a mode, keyed by the degree's semitone.

    The parent family's triad and seventh patterns are rotated left by the
    mode's rotation and paired with ``integers``; pairing stops at the
    shorter sequence so a trailing octave is ignored.
    """
    rotated_triads = rotate_left(triads, rotation)
    rotated_sevenths = rotate_left(sevenths, rotation)

    labels: Dict[str, Dict[int, str]] = {
        "triad": {},
        "romanTriad": {},
        "seventh": {},
        "romanSeventh": {},
    }
    for degree, (integer, triad, seventh) in enumerate(zip(integers, rotated_triads, rotated_sevenths)):
        triad_quality = to_chord_quality(triad)
        seventh_quality = to_chord_quality(seventh)
        labels["triad"][integer] = triad_quality.value
        labels["romanTriad"][integer] = to_roman_numeral(triad_quality, degree)
        labels["seventh"][integer] = seventh_quality.value
        labels["romanSeventh"][integer] = to_roman_numeral(seventh_quality, degree)
    return labels


def generate_diatonic_labels_override(integers: Sequence[int], rotation: int) -> Dict[str, Dict[int, str]]:
    return generate_labels_override(integers, rotation, DIATONIC_TRIADS, DIATONIC_SEVENTHS)


def generate_harmonic_minor_labels_override(integers: Sequence[int], rotation: int) -> Dict[str, Dict[int, str]]:
    return generate_labels_override(integers, rotation, HARMONIC_MINOR_TRIADS, HARMONIC_MINOR_SEVENTHS)


def generate_melodic_minor_labels_override(integers: Sequence[int], rotation: int) -> Dict[str, Dict[int, str]]:
    return generate_labels_override(integers, rotation, MELODIC_MINOR_TRIADS, MELODIC_MINOR_SEVENTHS)


def get_chord_details_for_mode(
    intervals: Sequence[str],
    rotation: int,
    triads: Sequence[QualityValue],
    sevenths: Sequence[QualityValue],
) -> List[ChordDetails]:
    """Triad and seventh chord built on each degree of a mode, octave excluded."""
    degrees = [interval for interval in intervals if interval not in OCTAVE_INTERVALS]
    rotated_triads = rotate_left(triads, rotation)
    rotated_sevenths = rotate_left(sevenths, rotation)

    details = []
    for degree, (interval, triad, seventh) in enumerate(zip(degrees, rotated_triads, rotated_sevenths)):
        triad_quality = to_chord_quality(triad)
        seventh_quality = to_chord_quality(seventh)
        details.append(
            ChordDetails(
                interval=interval,
                triad=triad_quality.value,
                seventh=seventh_quality.value,
                roman_triad=to_roman_numeral(triad_quality, degree),
                roman_seventh=to_roman_numeral(seventh_quality, degree),
            )
        )
    return details
