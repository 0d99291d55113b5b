from __future__ import annotations

import re
from typing import Optional

ACCIDENTAL_RUN_PATTERN = re.compile(r"([#♯xX𝄪]+)|([b♭𝄫]+)")

SHARP_VALUES = {"#": 1, "♯": 1, "x": 2, "X": 2, "𝄪": 2}
FLAT_VALUES = {"b": -1, "♭": -1, "𝄫": -2}


def parse_accidental_run(value: str) -> Optional[int]:
    """Net semitone alteration of a run of sharp/flat symbols.

    ASCII and Unicode symbols may be mixed. Returns None when any character
    is not an accidental symbol.
    """
    if not value:
        return 0

    alteration = 0
    matched_length = 0
    for match in ACCIDENTAL_RUN_PATTERN.finditer(value):
        sharps, flats = match.groups()
        if sharps:
            alteration += sum(SHARP_VALUES[symbol] for symbol in sharps)
        if flats:
            alteration += sum(FLAT_VALUES[symbol] for symbol in flats)
        matched_length += len(match.group(0))

    if matched_length < len(value):
        return None
    return alteration


def render_accidentals(alteration: int) -> str:
    if alteration == 0:
        return ""
    double, single = "𝄪", "♯"
    if alteration < 0:
        double, single = "𝄫", "♭"
    count = abs(alteration)
    return double * (count // 2) + single * (count % 2)


def normalize_accidental_string(value: str) -> Optional[str]:
    alteration = parse_accidental_run(value)
    if alteration is None:
        return None
    return render_accidentals(alteration)
