from __future__ import annotations

DIATONIC_MODES = {
    "ionian": {
        "category": "scale",
        "rotation": 0,
        "rotated_scale": "ionian",
        "primary_name": "Major",
        "names": ["Major", "Ionian", "Major Scale", "Ionian Mode"],
        "intervals": ["1", "2", "3", "4", "5", "6", "7", "8"],
        "type": ["major", "ionian", "mode", "scale", "church mode", "diatonic mode", "first mode", "do mode"],
        "characteristics": [
            "bright",
            "happy",
            "stable",
            "uplifting",
            "consonant",
            "western",
            "commonly used western scale",
        ],
        "pattern": ["whole", "whole", "half", "whole", "whole", "whole", "half"],
        "pattern_short": ["W", "W", "H", "W", "W", "W", "H"],
    },
    "dorian": {
        "category": "scale",
        "rotation": 1,
        "rotated_scale": "ionian",
        "primary_name": "Dorian",
        "names": ["Dorian", "Minor ♮6", "Minor Raised 6th", "Jazz Minor Variant", "Dorian Mode"],
        "intervals": ["1", "2", "♭3", "4", "5", "6", "♭7", "8"],
        "type": ["minor", "dorian", "mode", "scale", "church mode", "diatonic mode", "second mode", "re mode"],
        "characteristics": [
            "soulful",
            "funky",
            "jazzy",
            "hopeful",
            "celtic",
            "folk",
            "medieval",
            "minor feel with a hopeful twist",
        ],
        "pattern": ["whole", "half", "whole", "whole", "whole", "half", "whole"],
        "pattern_short": ["W", "H", "W", "W", "W", "H", "W"],
    },
    "phrygian": {
        "category": "scale",
        "rotation": 2,
        "rotated_scale": "ionian",
        "primary_name": "Phrygian",
        "names": ["Phrygian", "Minor ♭2", "Minor Flat Second", "Spanish Gypsy Scale", "Phrygian Mode"],
        "intervals": ["1", "♭2", "♭3", "4", "5", "♭6", "♭7", "8"],
        "type": ["minor", "phrygian", "mode", "scale", "church mode", "diatonic mode", "third mode", "mi mode"],
        "characteristics": [
            "exotic",
            "spanish",
            "middle eastern",
            "flamenco",
            "tense",
            "mysterious",
            "dark",
            "dramatic",
            "darker emotional tones",
        ],
        "pattern": ["half", "whole", "whole", "whole", "half", "whole", "whole"],
        "pattern_short": ["H", "W", "W", "W", "H", "W", "W"],
    },
    "lydian": {
        "category": "scale",
        "rotation": 3,
        "rotated_scale": "ionian",
        "primary_name": "Lydian",
        "names": ["Lydian", "Major ♯4", "Major Raised Fourth", "Bright Major", "Lydian Mode"],
        "intervals": ["1", "2", "3", "♯4", "5", "6", "7", "8"],
        "type": ["major", "lydian", "mode", "scale", "church mode", "diatonic mode", "fourth mode", "fa mode"],
        "characteristics": [
            "dreamy",
            "floating",
            "ethereal",
            "cinematic",
            "expansive",
            "film scores",
            "soundscapes",
        ],
        "pattern": ["whole", "whole", "whole", "half", "whole", "whole", "half"],
        "pattern_short": ["W", "W", "W", "H", "W", "W", "H"],
    },
    "mixolydian": {
        "category": "scale",
        "rotation": 4,
        "rotated_scale": "ionian",
        "primary_name": "Mixolydian",
        "names": ["Mixolydian", "Major ♭7", "Major Flat Seventh", "Dominant Scale", "Mixolydian Mode"],
        "intervals": ["1", "2", "3", "4", "5", "6", "♭7", "8"],
        "type": [
            "major",
            "dominant",
            "mixolydian",
            "mode",
            "scale",
            "church mode",
            "diatonic mode",
            "fifth mode",
            "sol mode",
        ],
        "characteristics": [
            "folk",
            "bluesy",
            "funky",
            "rock",
            "energetic",
            "playful",
            "major feel",
            "twist of tension",
        ],
        "pattern": ["whole", "whole", "half", "whole", "whole", "half", "whole"],
        "pattern_short": ["W", "W", "H", "W", "W", "H", "W"],
    },
    "aeolian": {
        "category": "scale",
        "rotation": 5,
        "rotated_scale": "ionian",
        "primary_name": "Minor",
        "names": [
            "Minor",
            "Aeolian",
            "Natural Minor Scale",
            "Minor Scale",
            "Aeolian Mode",
            "Descending Melodic Minor Scale",
        ],
        "intervals": ["1", "2", "♭3", "4", "5", "♭6", "♭7", "8"],
        "type": [
            "minor",
            "aeolian",
            "natural",
            "mode",
            "scale",
            "church mode",
            "diatonic mode",
            "sixth mode",
            "la mode",
        ],
        "characteristics": [
            "melancholic",
            "sad",
            "somber",
            "introspective",
            "reflective",
            "default minor",
            "commonly used minor scale",
        ],
        "pattern": ["whole", "half", "whole", "whole", "half", "whole", "whole"],
        "pattern_short": ["W", "H", "W", "W", "H", "W", "W"],
    },
    "locrian": {
        "category": "scale",
        "rotation": 6,
        "rotated_scale": "ionian",
        "primary_name": "Locrian",
        "names": [
            "Locrian",
            "Minor ♭2 ♭5",
            "Minor Flat Second and Flat Fifth",
            "Half-Diminished Scale",
            "Locrian Mode",
        ],
        "intervals": ["1", "♭2", "♭3", "4", "♭5", "♭6", "♭7", "8"],
        "type": ["diminished", "locrian", "mode", "scale", "church mode", "diatonic mode", "seventh mode", "ti mode"],
        "characteristics": [
            "unsettling",
            "tense",
            "dark",
            "unstable",
            "dissonant",
            "eerie",
            "rarely used standalone",
        ],
        "pattern": ["half", "whole", "whole", "half", "whole", "whole", "whole"],
        "pattern_short": ["H", "W", "W", "H", "W", "W", "W"],
    },
}

PENTATONIC_VARIANTS = {
    "majorPentatonic": {
        "category": "scale",
        "rotation": 0,
        "rotated_scale": "majorPentatonic",
        "primary_name": "Major Pentatonic",
        "names": ["Major Pentatonic"],
        "intervals": ["1", "2", "3", "5", "6", "8"],
        "type": ["major", "pentatonic", "scale", "gapped scale"],
        "characteristics": ["open", "positive", "simple", "found in many cultures", "folk music", "country music"],
        "pattern": ["whole", "whole", "minor third", "whole", "minor third"],
        "pattern_short": ["W", "W", "m3", "W", "m3"],
    },
    "suspendedPentatonic": {
        "category": "scale",
        "rotation": 1,
        "rotated_scale": "majorPentatonic",
        "primary_name": "Suspended Pentatonic",
        "names": ["Suspended Pentatonic", "Egyptian Pentatonic"],
        "intervals": ["1", "2", "4", "5", "♭7", "8"],
        "type": ["suspended", "pentatonic", "scale", "gapped scale"],
        "characteristics": ["open", "stable", "neutral", "neither major nor minor"],
        "pattern": ["whole", "minor third", "whole", "minor third", "whole"],
        "pattern_short": ["W", "m3", "W", "m3", "W"],
    },
    "bluesMinorPentatonic": {
        "category": "scale",
        "rotation": 2,
        "rotated_scale": "majorPentatonic",
        "primary_name": "Blues Minor Pentatonic",
        "names": ["Blues Minor Pentatonic"],
        "intervals": ["1", "♭3", "4", "♭6", "♭7", "8"],
        "type": ["minor", "pentatonic", "scale", "gapped scale", "blues"],
        "characteristics": ["bluesy", "tense"],
        "pattern": ["minor third", "whole", "minor third", "whole", "whole"],
        "pattern_short": ["m3", "W", "m3", "W", "W"],
    },
    "bluesMajorPentatonic": {
        "category": "scale",
        "rotation": 3,
        "rotated_scale": "majorPentatonic",
        "primary_name": "Blues Major Pentatonic",
        "names": ["Blues Major Pentatonic"],
        "intervals": ["1", "2", "4", "5", "6", "8"],
        "type": ["major", "pentatonic", "scale", "gapped scale", "blues"],
        "characteristics": ["bluesy", "country"],
        "pattern": ["whole", "minor third", "whole", "whole", "minor third"],
        "pattern_short": ["W", "m3", "W", "W", "m3"],
    },
    "minorPentatonic": {
        "category": "scale",
        "rotation": 4,
        "rotated_scale": "majorPentatonic",
        "primary_name": "Minor Pentatonic",
        "names": ["Minor Pentatonic"],
        "intervals": ["1", "♭3", "4", "5", "♭7", "8"],
        "type": ["minor", "pentatonic", "scale", "gapped scale"],
        "characteristics": ["bluesy", "rock", "versatile", "found in many cultures", "relative of major pentatonic"],
        "pattern": ["minor third", "whole", "whole", "minor third", "whole"],
        "pattern_short": ["m3", "W", "W", "m3", "W"],
    },
}

HARMONIC_MINOR_MODES = {
    "harmonicMinor": {
        "category": "scale",
        "rotation": 0,
        "rotated_scale": "harmonicMinor",
        "primary_name": "Harmonic Minor",
        "names": ["Harmonic Minor", "Aeolian ♮7", "Aeolian Natural Seventh", "Aeolian Raised Seventh"],
        "intervals": ["1", "2", "♭3", "4", "5", "♭6", "7", "8"],
        "type": ["harmonic minor mode", "minor", "scale", "mode", "heptatonic"],
        "characteristics": [
            "dark",
            "tense",
            "exotic",
            "classical",
            "neo-classical",
            "middle-eastern",
            "first mode of harmonic minor",
        ],
        "pattern": ["whole", "half", "whole", "whole", "half", "augmented second", "half"],
        "pattern_short": ["W", "H", "W", "W", "H", "A2", "H"],
    },
    "locrianNatural6": {
        "category": "scale",
        "rotation": 1,
        "rotated_scale": "harmonicMinor",
        "primary_name": "Locrian ♮6",
        "names": ["Locrian ♮6", "Locrian Natural Sixth", "Locrian Raised Sixth"],
        "intervals": ["1", "♭2", "♭3", "4", "♭5", "6", "♭7", "8"],
        "type": ["harmonic minor mode", "diminished", "scale", "mode", "heptatonic"],
        "characteristics": ["dark", "unstable", "jazzy", "exotic", "second mode of harmonic minor"],
        "pattern": ["half", "whole", "whole", "half", "augmented second", "half", "whole"],
        "pattern_short": ["H", "W", "W", "H", "A2", "H", "W"],
    },
    "ionianSharp5": {
        "category": "scale",
        "rotation": 2,
        "rotated_scale": "harmonicMinor",
        "primary_name": "Ionian ♯5",
        "names": ["Ionian ♯5", "Ionian Sharp Fifth", "Augmented Major", "Ionian Augmented"],
        "intervals": ["1", "2", "3", "4", "♯5", "6", "7", "8"],
        "type": ["harmonic minor mode", "major", "augmented", "scale", "mode", "heptatonic"],
        "characteristics": ["bright", "dreamy", "unsettling", "magical", "third mode of harmonic minor"],
        "pattern": ["whole", "whole", "half", "augmented second", "half", "whole", "half"],
        "pattern_short": ["W", "W", "H", "A2", "H", "W", "H"],
    },
    "dorianSharp4": {
        "category": "scale",
        "rotation": 3,
        "rotated_scale": "harmonicMinor",
        "primary_name": "Dorian ♯4",
        "names": [
            "Dorian ♯4",
            "Dorian Sharp Fourth",
            "Dorian ♯11",
            "Dorian Sharp Eleventh",
            "Ukrainian Dorian",
            "Romanian Minor",
        ],
        "intervals": ["1", "2", "♭3", "♯4", "5", "6", "♭7", "8"],
        "type": ["harmonic minor mode", "minor", "scale", "mode", "heptatonic"],
        "characteristics": ["exotic minor", "eastern european folk", "gypsy", "fourth mode of harmonic minor"],
        "pattern": ["whole", "half", "augmented second", "half", "whole", "half", "whole"],
        "pattern_short": ["W", "H", "A2", "H", "W", "H", "W"],
    },
    "phrygianDominant": {
        "category": "scale",
        "rotation": 4,
        "rotated_scale": "harmonicMinor",
        "primary_name": "Phrygian Dominant",
        "names": [
            "Phrygian Dominant",
            "Phrygian ♮3",
            "Phrygian Natural Third",
            "Phrygian Raised Third",
            "Spanish Gypsy Scale",
            "Freygish Scale",
            "Phrygian Major",
            "Harmonic Dominant",
        ],
        "intervals": ["1", "♭2", "3", "4", "5", "♭6", "♭7", "8"],
        "type": ["harmonic minor mode", "dominant", "scale", "mode", "heptatonic"],
        "characteristics": [
            "very exotic",
            "spanish",
            "flamenco",
            "klezmer",
            "arabic",
            "middle-eastern",
            "tense",
            "fifth mode of harmonic minor",
        ],
        "pattern": ["half", "augmented second", "half", "whole", "half", "whole", "whole"],
        "pattern_short": ["H", "A2", "H", "W", "H", "W", "W"],
    },
    "lydianSharp2": {
        "category": "scale",
        "rotation": 5,
        "rotated_scale": "harmonicMinor",
        "primary_name": "Lydian ♯2",
        "names": ["Lydian ♯2", "Lydian Sharp Second", "Lydian ♯9", "Lydian Sharp Ninth"],
        "intervals": ["1", "♯2", "3", "♯4", "5", "6", "7", "8"],
        "type": ["harmonic minor mode", "major", "scale", "mode", "heptatonic"],
        "characteristics": ["very bright", "unusual", "exotic", "sixth mode of harmonic minor"],
        "pattern": ["augmented second", "half", "whole", "half", "whole", "whole", "half"],
        "pattern_short": ["A2", "H", "W", "H", "W", "W", "H"],
    },
    "superLocrianDoubleFlat7": {
        "category": "scale",
        "rotation": 6,
        "rotated_scale": "harmonicMinor",
        "primary_name": "Super Locrian 𝄫7",
        "names": ["Super Locrian 𝄫7", "Super Locrian Diminished 7", "Altered Diminished", "Altered 𝄫7"],
        "intervals": ["1", "♭2", "♭3", "♭4", "♭5", "♭6", "𝄫7", "8"],
        "type": ["harmonic minor mode", "diminished", "scale", "mode", "heptatonic"],
        "characteristics": [
            "extremely tense",
            "highly dissonant",
            "altered",
            "theoretical",
            "seventh mode of harmonic minor",
        ],
        "pattern": ["half", "whole", "half", "whole", "whole", "half", "augmented second"],
        "pattern_short": ["H", "W", "H", "W", "W", "H", "A2"],
    },
}

MELODIC_MINOR_MODES = {
    "melodicMinor": {
        "category": "scale",
        "rotation": 0,
        "rotated_scale": "melodicMinor",
        "primary_name": "Melodic Minor",
        "names": [
            "Melodic Minor",
            "Jazz Minor",
            "Ascending Melodic Minor Scale",
            "Jazz Minor Scale",
            "Minor Ionian",
            "Ionian ♭3",
            "Ionian Flat Third",
            "Major Scale with Minor Third",
            "Dorian Major 7",
        ],
        "intervals": ["1", "2", "♭3", "4", "5", "6", "7", "8"],
        "type": ["melodic minor mode", "minor", "mode", "scale", "heptatonic"],
        "characteristics": [
            "minor tonality",
            "minor scale start, major scale finish",
            "jazz and classical music",
            "classical: raised 6th and 7th degrees when ascending",
            "jazz: raised 6th and 7th degrees in both directions",
            "a staple of jazz improvisation",
            "first mode of melodic minor",
        ],
        "pattern": ["whole", "half", "whole", "whole", "whole", "whole", "half"],
        "pattern_short": ["W", "H", "W", "W", "W", "W", "H"],
    },
    "dorianFlat2": {
        "category": "scale",
        "rotation": 1,
        "rotated_scale": "melodicMinor",
        "primary_name": "Dorian ♭2",
        "names": ["Dorian ♭2", "Dorian Flat Second", "Phrygian ♮6", "Phrygian Natural Sixth", "Phrygian Raised Sixth"],
        "intervals": ["1", "♭2", "♭3", "4", "5", "6", "♭7", "8"],
        "type": ["melodic minor mode", "minor", "mode", "scale", "heptatonic"],
        "characteristics": [
            "exotic",
            "mysterious",
            "used in jazz improvisation",
            "dark but hopeful",
            "second mode of melodic minor",
        ],
        "pattern": ["half", "whole", "whole", "whole", "whole", "half", "whole"],
        "pattern_short": ["H", "W", "W", "W", "W", "H", "W"],
    },
    "lydianAugmented": {
        "category": "scale",
        "rotation": 2,
        "rotated_scale": "melodicMinor",
        "primary_name": "Lydian Augmented",
        "names": ["Lydian Augmented", "Lydian ♯5", "Lydian Sharp Fifth"],
        "intervals": ["1", "2", "3", "♯4", "♯5", "6", "7", "8"],
        "type": ["melodic minor mode", "augmented", "mode", "scale", "heptatonic"],
        "characteristics": [
            "dreamy",
            "unsettling",
            "ethereal",
            "sci-fi",
            "used over major 7th sharp 5 chords",
            "third mode of melodic minor",
        ],
        "pattern": ["whole", "whole", "whole", "whole", "half", "whole", "half"],
        "pattern_short": ["W", "W", "W", "W", "H", "W", "H"],
    },
    "lydianDominant": {
        "category": "scale",
        "rotation": 3,
        "rotated_scale": "melodicMinor",
        "primary_name": "Lydian Dominant",
        "names": [
            "Lydian Dominant",
            "Acoustic Scale",
            "Overtone Scale",
            "Lydian ♭7",
            "Lydian Flat Seventh",
            "Mixolydian ♯4",
            "Mixolydian Sharp Fourth",
        ],
        "intervals": ["1", "2", "3", "♯4", "5", "6", "♭7", "8"],
        "type": ["melodic minor mode", "dominant", "mode", "scale", "heptatonic"],
        "characteristics": [
            "bright",
            "dominant tonality",
            "quirky",
            "bluesy",
            "jazzy",
            "a very common scale in jazz for non-resolving dominant chords",
            "fourth mode of melodic minor",
        ],
        "pattern": ["whole", "whole", "whole", "half", "whole", "half", "whole"],
        "pattern_short": ["W", "W", "W", "H", "W", "H", "W"],
    },
    "mixolydianFlat6": {
        "category": "scale",
        "rotation": 4,
        "rotated_scale": "melodicMinor",
        "primary_name": "Mixolydian ♭6",
        "names": [
            "Mixolydian ♭6",
            "Mixolydian Flat Sixth",
            "Aeolian Dominant",
            "Aeolian ♯3",
            "Aeolian Sharp Third",
            "Descending Melodic Major",
            "Hindu Scale",
        ],
        "intervals": ["1", "2", "3", "4", "5", "♭6", "♭7", "8"],
        "type": ["melodic minor mode", "dominant", "mode", "scale", "heptatonic"],
        "characteristics": [
            "bluesy",
            "dark",
            "tense",
            "often used over dominant chords resolving to a minor chord",
            "fifth mode of melodic minor",
        ],
        "pattern": ["whole", "whole", "half", "whole", "half", "whole", "whole"],
        "pattern_short": ["W", "W", "H", "W", "H", "W", "W"],
    },
    "aeolianFlat5": {
        "category": "scale",
        "rotation": 5,
        "rotated_scale": "melodicMinor",
        "primary_name": "Aeolian ♭5",
        "names": [
            "Aeolian ♭5",
            "Aeolian Flat Fifth",
            "Locrian ♮2",
            "Locrian Natural Second",
            "Locrian Raised Second",
            "Half-Diminished Scale",
        ],
        "intervals": ["1", "2", "♭3", "4", "♭5", "♭6", "♭7", "8"],
        "type": ["melodic minor mode", "minor", "mode", "scale", "heptatonic"],
        "characteristics": [
            "dark",
            "tense",
            "jazz and fusion genres",
            "half-diminished",
            "used over half-diminished chords",
            "sixth mode of melodic minor",
        ],
        "pattern": ["whole", "half", "whole", "half", "whole", "whole", "whole"],
        "pattern_short": ["W", "H", "W", "H", "W", "W", "W"],
    },
    "altered": {
        "category": "scale",
        "rotation": 6,
        "rotated_scale": "melodicMinor",
        "primary_name": "Altered Scale",
        "names": [
            "Altered Scale",
            "Super Locrian Scale",
            "Altered Dominant Scale",
            "Locrian ♭4",
            "Locrian Flat Fourth",
        ],
        "intervals": ["1", "♭2", "♭3", "♭4", "♭5", "♭6", "♭7", "8"],
        "type": ["melodic minor mode", "dominant", "mode", "scale", "heptatonic"],
        "characteristics": [
            "tense",
            "dissonant",
            "jazzy",
            "maximum tension over a dominant chord",
            "contains many altered extensions (♭9, ♯9, ♭5, ♯5)",
            "seventh mode of melodic minor",
        ],
        "pattern": ["half", "whole", "half", "whole", "whole", "whole", "whole"],
        "pattern_short": ["H", "W", "H", "W", "W", "W", "W"],
    },
}

OTHER_NOTE_COLLECTIONS = {
    "rootAndFifth": {
        "category": "chord",
        "most_similar_scale": "ionian",
        "primary_name": "Root and Fifth",
        "names": ["Root and Fifth", "Power Chord", "5"],
        "intervals": ["1", "5"],
        "type": ["chord", "power chord"],
        "characteristics": ["rock", "blues", "metal"],
        "pattern": ["perfect fifth"],
        "pattern_short": ["P5"],
    },
    "bluesPentatonic": {
        "category": "scale",
        "most_similar_scale": "aeolian",
        "primary_name": "Blues Pentatonic",
        "names": ["Blues Pentatonic", "Blues Scale"],
        "intervals": ["1", "♭3", "4", "♭5", "5", "♭7", "8"],
        "type": ["blues", "pentatonic", "scale", "gapped scale"],
        "characteristics": ["bluesy", "rock"],
        "pattern": ["minor third", "whole", "half", "half", "minor third", "whole"],
        "pattern_short": ["m3", "W", "H", "H", "m3", "W"],
    },
    "chromatic": {
        "category": "scale",
        "most_similar_scale": "ionian",
        "primary_name": "Chromatic",
        "names": ["Chromatic", "Twelve-Tone Scale"],
        "intervals": ["1", "♭2", "2", "♭3", "3", "4", "♭5", "5", "♭6", "6", "♭7", "7", "8"],
        "type": ["chromatic", "scale", "non-diatonic", "dodecaphonic"],
        "characteristics": [
            "atonal",
            "dissonant",
            "no tonal center",
            "contains all 12 pitches",
            "used for passing tones and creating tension",
        ],
        "pattern": ["half"] * 12,
        "pattern_short": ["H"] * 12,
    },
    "wholeTone": {
        "category": "scale",
        "most_similar_scale": "ionian",
        "primary_name": "Whole Tone Scale",
        "names": ["Whole Tone Scale", "Whole Tone"],
        "intervals": ["1", "2", "3", "♯4", "♯5", "♯6", "8"],
        "type": ["whole tone", "scale", "symmetrical", "hexatonic"],
        "characteristics": [
            "six pitches in an octave",
            "no tonal center",
            "used in impressionistic music",
            "creates a dreamy or ethereal sound",
            "associated with composers like Debussy and Ravel",
        ],
        "pattern": ["whole"] * 6,
        "pattern_short": ["W"] * 6,
    },
}
