from __future__ import annotations

MAJOR_VARIANTS = {
    "major": {
        "category": "chord",
        "most_similar_scale": "ionian",
        "primary_name": "M",
        "names": ["M", "maj", "Major", "Major Triad", "Δ"],
        "intervals": ["1", "3", "5"],
        "type": ["major", "chord", "arpeggio", "triad"],
        "characteristics": ["stable", "happy", "bright", "the most basic major chord"],
        "pattern": ["major third", "minor third"],
        "pattern_short": ["M3", "m3"],
    },
    "major6": {
        "category": "chord",
        "most_similar_scale": "ionian",
        "primary_name": "6",
        "names": ["6", "M6", "maj6", "Major 6th", "Major Sixth"],
        "intervals": ["1", "3", "5", "6"],
        "type": ["major", "chord", "arpeggio", "tetrad"],
        "characteristics": [
            "stable",
            "happy",
            "sweet",
            "melodic",
            "less tension than a major 7th",
            "common in early jazz and pop",
        ],
        "pattern": ["major third", "minor third", "major second"],
        "pattern_short": ["M3", "m3", "M2"],
    },
    "major7": {
        "category": "chord",
        "most_similar_scale": "ionian",
        "primary_name": "M7",
        "names": ["M7", "maj7", "Major 7th", "Major Seventh", "Δ7"],
        "intervals": ["1", "3", "5", "7"],
        "type": ["major", "chord", "arpeggio", "tetrad"],
        "characteristics": ["stable", "happy", "bright", "sophisticated", "lush", "jazzy and sophisticated"],
        "pattern": ["major third", "minor third", "major third"],
        "pattern_short": ["M3", "m3", "M3"],
    },
    "major9": {
        "category": "chord",
        "most_similar_scale": "ionian",
        "primary_name": "M9",
        "names": ["M9", "maj9", "Major 9th", "Major Ninth", "Δ9"],
        "intervals": ["1", "3", "5", "7", "9"],
        "type": ["major", "chord", "arpeggio", "pentad"],
        "characteristics": ["stable", "bright", "colorful", "rich", "airy", "adds a layer of complexity and color"],
        "pattern": ["major third", "minor third", "major third", "minor third"],
        "pattern_short": ["M3", "m3", "M3", "m3"],
    },
    "majorAdd9": {
        "category": "chord",
        "most_similar_scale": "ionian",
        "primary_name": "add9",
        "names": ["add9", "maj(add9)", "M(add9)", "Major add 9"],
        "intervals": ["1", "3", "5", "9"],
        "type": ["major", "chord", "arpeggio", "tetrad"],
        "characteristics": ["bright", "colorful", "open", "airy", "different from a major 9th as it lacks the 7th"],
        "pattern": ["major third", "minor third", "perfect fifth"],
        "pattern_short": ["M3", "m3", "P5"],
    },
    "major6Add9": {
        "category": "chord",
        "most_similar_scale": "ionian",
        "primary_name": "6/9",
        "names": ["6/9", "M6/9", "maj6/9", "Major 6/9", "6add9", "Major add 6 add 9"],
        "intervals": ["1", "3", "5", "6", "9"],
        "type": ["major", "chord", "arpeggio", "pentad"],
        "characteristics": [
            "sweet",
            "colorful",
            "rich",
            "open",
            "very lush and rich",
            "alternative to a major 7th chord",
            "popular in jazz piano voicings",
        ],
        "pattern": ["major third", "minor third", "major second", "perfect fourth"],
        "pattern_short": ["M3", "m3", "M2", "P4"],
    },
}

MINOR_VARIANTS = {
    "minor": {
        "category": "chord",
        "most_similar_scale": "aeolian",
        "primary_name": "m",
        "names": ["m", "min", "Minor", "Minor Triad", "-"],
        "intervals": ["1", "♭3", "5"],
        "type": ["minor", "chord", "arpeggio", "triad"],
        "characteristics": ["sad", "melancholic", "dark", "the most basic minor chord"],
        "pattern": ["minor third", "major third"],
        "pattern_short": ["m3", "M3"],
    },
    "minor6": {
        "category": "chord",
        "most_similar_scale": "dorian",
        "primary_name": "m6",
        "names": ["m6", "min6", "Minor 6th", "Minor Sixth"],
        "intervals": ["1", "♭3", "5", "6"],
        "type": ["minor", "chord", "arpeggio", "tetrad"],
        "characteristics": ["jazzy", "soulful", "less dissonant than m7", "dorian feel"],
        "pattern": ["minor third", "major third", "major second"],
        "pattern_short": ["m3", "M3", "M2"],
    },
    "minor7": {
        "category": "chord",
        "most_similar_scale": "aeolian",
        "primary_name": "m7",
        "names": ["m7", "min7", "Minor 7th", "Minor Seventh", "-7"],
        "intervals": ["1", "♭3", "5", "♭7"],
        "type": ["minor", "chord", "arpeggio", "tetrad"],
        "characteristics": ["smooth", "jazzy", "versatile"],
        "pattern": ["minor third", "major third", "minor third"],
        "pattern_short": ["m3", "M3", "m3"],
    },
    "minorMajor7": {
        "category": "chord",
        "most_similar_scale": "melodicMinor",
        "primary_name": "m(M7)",
        "names": ["m(M7)", "min(M7)", "Minor (Major 7th)", "Minor Major Seventh", "mM7", "-M7", "-(maj7)"],
        "intervals": ["1", "♭3", "5", "7"],
        "type": ["minor", "chord", "arpeggio", "tetrad"],
        "characteristics": ["smooth", "jazzy", "mysterious", "film noir"],
        "pattern": ["minor third", "major third", "major third"],
        "pattern_short": ["m3", "M3", "M3"],
    },
    "minor9": {
        "category": "chord",
        "most_similar_scale": "aeolian",
        "primary_name": "m9",
        "names": ["m9", "min9", "Minor 9th", "Minor Ninth", "-9"],
        "intervals": ["1", "♭3", "5", "♭7", "9"],
        "type": ["minor", "chord", "arpeggio", "pentad"],
        "characteristics": ["rich", "lush", "sophisticated", "common in jazz"],
        "pattern": ["minor third", "major third", "minor third", "major third"],
        "pattern_short": ["m3", "M3", "m3", "M3"],
    },
    "minorAdd9": {
        "category": "chord",
        "most_similar_scale": "aeolian",
        "primary_name": "m(add9)",
        "names": ["m(add9)", "min(add9)", "Minor add 9"],
        "intervals": ["1", "♭3", "5", "9"],
        "type": ["minor", "chord", "arpeggio", "tetrad"],
        "characteristics": ["open", "modern", "adds color without the 7th", "pop and rock music"],
        "pattern": ["minor third", "major third", "perfect fifth"],
        "pattern_short": ["m3", "M3", "P5"],
    },
    "minor6Add9": {
        "category": "chord",
        "most_similar_scale": "dorian",
        "primary_name": "m6/9",
        "names": ["m6/9", "min6/9", "Minor 6/9", "-6/9"],
        "intervals": ["1", "♭3", "5", "6", "9"],
        "type": ["minor", "chord", "arpeggio", "pentad"],
        "characteristics": ["rich", "jazzy", "dorian flavor", "sophisticated minor sound"],
        "pattern": ["minor third", "major third", "major second", "perfect fourth"],
        "pattern_short": ["m3", "M3", "M2", "P4"],
    },
}

DOMINANT_VARIANTS = {
    "dominant7": {
        "category": "chord",
        "most_similar_scale": "mixolydian",
        "primary_name": "7",
        "names": ["7", "dom7", "Dominant 7th", "Dominant Seventh"],
        "intervals": ["1", "3", "5", "♭7"],
        "type": ["dominant", "major", "chord", "arpeggio", "tetrad"],
        "characteristics": [
            "unstable",
            "bluesy",
            "tense",
            "jazzy",
            "major with flat 7th",
            "the most common dominant chord",
            "used in blues, jazz, and rock",
            "creates strong tension and resolution",
            "used in an authentic cadence",
        ],
        "pattern": ["major third", "minor third", "minor third"],
        "pattern_short": ["M3", "m3", "m3"],
    },
    "dominant9": {
        "category": "chord",
        "most_similar_scale": "mixolydian",
        "primary_name": "9",
        "names": ["9", "dom9", "Dominant 9th", "Dominant Ninth"],
        "intervals": ["1", "3", "5", "♭7", "9"],
        "type": ["dominant", "major", "chord", "arpeggio", "pentad"],
        "characteristics": ["unstable", "bluesy", "jazzy", "rich", "richer than a 7th chord", "common in jazz and R&B"],
        "pattern": ["major third", "minor third", "minor third", "major third"],
        "pattern_short": ["M3", "m3", "m3", "M3"],
    },
    "dominant11": {
        "category": "chord",
        "most_similar_scale": "mixolydian",
        "primary_name": "11",
        "names": ["11", "dom11", "Dominant 11th", "Dominant Eleventh"],
        "intervals": ["1", "3", "5", "♭7", "9", "11"],
        "type": ["dominant", "major", "chord", "arpeggio", "hexad"],
        "characteristics": [
            "unstable",
            "bluesy",
            "jazzy",
            "complex",
            "can be voiced without the 3rd and 5th",
            "can be dissonant",
        ],
        "pattern": ["major third", "minor third", "minor third", "major third", "minor third"],
        "pattern_short": ["M3", "m3", "m3", "M3", "m3"],
    },
    "dominant13": {
        "category": "chord",
        "most_similar_scale": "mixolydian",
        "primary_name": "13",
        "names": ["13", "dom13", "Dominant 13th", "Dominant Thirteenth"],
        "intervals": ["1", "3", "5", "♭7", "9", "11", "13"],
        "type": ["dominant", "major", "chord", "arpeggio", "heptad"],
        "characteristics": [
            "unstable",
            "bluesy",
            "jazzy",
            "complex",
            "lush",
            "the richest dominant extension",
            "common in big band and modern jazz",
        ],
        "pattern": ["major third", "minor third", "minor third", "major third", "minor third", "minor third"],
        "pattern_short": ["M3", "m3", "m3", "M3", "m3", "m3"],
    },
}

DIMINISHED = {
    "diminishedTriad": {
        "category": "chord",
        "most_similar_scale": "locrian",
        "primary_name": "dim",
        "names": ["dim", "°", "Diminished Triad"],
        "intervals": ["1", "♭3", "♭5"],
        "type": ["diminished", "chord", "arpeggio", "triad"],
        "characteristics": ["tense", "unstable", "dissonant"],
        "pattern": ["minor third", "minor third"],
        "pattern_short": ["m3", "m3"],
    },
    "diminished7": {
        "category": "chord",
        "most_similar_scale": "wholeHalfDiminished",
        "primary_name": "dim7",
        "names": ["dim7", "°7", "Diminished 7th", "Diminished Seventh"],
        "intervals": ["1", "♭3", "♭5", "𝄫7"],
        "type": ["diminished", "chord", "arpeggio", "tetrad", "symmetrical"],
        "characteristics": ["very tense", "unstable", "symmetrical", "passing chord"],
        "pattern": ["minor third", "minor third", "minor third"],
        "pattern_short": ["m3", "m3", "m3"],
    },
    "halfDiminished7": {
        "category": "chord",
        "most_similar_scale": "locrian",
        "primary_name": "m7♭5",
        "names": ["m7♭5", "ø7", "Half Diminished 7th", "Half Diminished Seventh"],
        "intervals": ["1", "♭3", "♭5", "♭7"],
        "type": ["diminished", "minor", "chord", "arpeggio", "tetrad"],
        "characteristics": ["tense", "jazzy", "leading to minor"],
        "pattern": ["minor third", "minor third", "major third"],
        "pattern_short": ["m3", "m3", "M3"],
    },
    "wholeHalfDiminished": {
        "category": "scale",
        "primary_name": "Whole Half Diminished",
        "names": ["Whole Half Diminished"],
        "intervals": ["1", "2", "♭3", "4", "♭5", "♭6", "6", "7", "8"],
        "type": ["diminished", "scale", "symmetrical", "octatonic"],
        "characteristics": ["tense", "jazzy", "symmetrical", "alternating tones"],
        "pattern": ["whole", "half", "whole", "half", "whole", "half", "whole", "half"],
        "pattern_short": ["W", "H", "W", "H", "W", "H", "W", "H"],
    },
    "halfWholeDiminished": {
        "category": "scale",
        "primary_name": "Half Whole Diminished",
        "names": ["Half Whole Diminished", "Dominant Diminished"],
        "intervals": ["1", "♭2", "♭3", "3", "♯4", "5", "6", "♭7", "8"],
        "type": ["diminished", "dominant", "scale", "symmetrical", "octatonic"],
        "characteristics": ["tense", "jazzy", "symmetrical", "used over dominant 7th chords"],
        "pattern": ["half", "whole", "half", "whole", "half", "whole", "half", "whole"],
        "pattern_short": ["H", "W", "H", "W", "H", "W", "H", "W"],
    },
}

AUGMENTED = {
    "augmentedTriad": {
        "category": "chord",
        "most_similar_scale": "wholeTone",
        "primary_name": "aug",
        "names": ["aug", "+", "Augmented Triad"],
        "intervals": ["1", "3", "♯5"],
        "type": ["augmented", "chord", "arpeggio", "triad", "symmetrical"],
        "characteristics": ["tense", "unstable", "dreamy", "dissonant"],
        "pattern": ["major third", "major third"],
        "pattern_short": ["M3", "M3"],
    },
    "augmented7": {
        "category": "chord",
        "most_similar_scale": "wholeTone",
        "primary_name": "aug7",
        "names": ["aug7", "+7", "7♯5", "Augmented Seventh"],
        "intervals": ["1", "3", "♯5", "♭7"],
        "type": ["augmented", "dominant", "chord", "arpeggio", "tetrad"],
        "characteristics": ["tense", "unstable", "dissonant", "dominant function"],
        "pattern": ["major third", "major third", "major second"],
        "pattern_short": ["M3", "M3", "M2"],
    },
    "italian6": {
        "category": "chord",
        "primary_name": "It+6",
        "names": ["It+6", "Italian 6th", "Italian Augmented Sixth"],
        "intervals": ["1", "3", "♭6"],
        "type": ["augmented", "chord", "arpeggio", "triad", "classical"],
        "characteristics": ["classical harmony", "pre-dominant function", "chromatic"],
        "pattern": ["major third", "diminished fourth"],
        "pattern_short": ["M3", "d4"],
    },
    "french6": {
        "category": "chord",
        "primary_name": "Fr+6",
        "names": ["Fr+6", "French 6th", "French Augmented Sixth"],
        "intervals": ["1", "3", "♯4", "♭6"],
        "type": ["augmented", "chord", "arpeggio", "tetrad", "classical"],
        "characteristics": ["classical harmony", "pre-dominant function", "chromatic", "contains a tritone"],
        "pattern": ["major third", "major second", "major second"],
        "pattern_short": ["M3", "M2", "M2"],
    },
    "german6": {
        "category": "chord",
        "primary_name": "Ger+6",
        "names": ["Ger+6", "German 6th", "German Augmented Sixth"],
        "intervals": ["1", "3", "5", "♭6"],
        "type": ["augmented", "chord", "arpeggio", "tetrad", "classical"],
        "characteristics": [
            "classical harmony",
            "pre-dominant function",
            "chromatic",
            "enharmonically equivalent to a dominant 7th",
        ],
        "pattern": ["major third", "minor third", "minor second"],
        "pattern_short": ["M3", "m3", "m2"],
    },
}
