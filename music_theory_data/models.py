from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .constants import LABEL_THEME_NAMES, SEMITONES_PER_OCTAVE
from .note_labels import INTERVAL_TO_INTEGER

IntervalTransformation = Literal[
    "simpleToExtension",
    "extensionToSimple",
    "simpleToCompound",
    "compoundToSimple",
]

OptionsModel = TypeVar("OptionsModel", bound=BaseModel)

# options accept snake_case or camelCase keys; unknown keys are rejected
OPTIONS_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class NoteLabelTheme(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    short_name: str
    is_relative: bool
    labels: Tuple[str, ...] = Field(min_length=SEMITONES_PER_OCTAVE, max_length=SEMITONES_PER_OCTAVE)


class NoteCollection(BaseModel):
    """A named scale or chord from the catalog.

    ``integers`` is aligned with ``intervals`` position by position, so a
    scale's trailing ``"8"`` maps to 12 and a chord's ``"9"`` maps to 14.
    ``labels_override`` maps a label theme name to pitch-class specific labels.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    category: Literal["scale", "chord"]
    primary_name: str
    names: Tuple[str, ...]
    intervals: Tuple[str, ...]
    integers: Tuple[int, ...]
    type: Tuple[str, ...]
    characteristics: Tuple[str, ...] = ()
    pattern: Tuple[str, ...] = ()
    pattern_short: Tuple[str, ...] = ()
    rotation: Optional[int] = None
    rotated_scale: Optional[str] = None
    most_similar_scale: Optional[str] = None
    labels_override: Dict[str, Dict[int, str]] = Field(default_factory=dict)

    @field_validator("intervals")
    @classmethod
    def check_intervals(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        unknown = [interval for interval in value if interval not in INTERVAL_TO_INTEGER]
        if unknown:
            raise ValueError(f"Unknown interval tokens: {unknown}")
        return value

    @field_validator("labels_override")
    @classmethod
    def check_labels_override(cls, value: Dict[str, Dict[int, str]]) -> Dict[str, Dict[int, str]]:
        for theme, labels in value.items():
            if theme not in LABEL_THEME_NAMES:
                raise ValueError(f"Unknown label theme: {theme}")
            for pitch_class in labels:
                if not 0 <= pitch_class < SEMITONES_PER_OCTAVE:
                    raise ValueError(f"Invalid pitch class in {theme} override: {pitch_class}")
        return value

    @model_validator(mode="after")
    def check_integers_match_intervals(self) -> "NoteCollection":
        if len(self.integers) != len(self.intervals):
            raise ValueError(
                f"{self.key}: {len(self.intervals)} intervals but {len(self.integers)} integers"
            )
        for interval, integer in zip(self.intervals, self.integers):
            if INTERVAL_TO_INTEGER[interval] != integer:
                raise ValueError(f"{self.key}: interval {interval} does not match integer {integer}")
        return self


class ChordDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    interval: str
    triad: str
    seventh: str
    roman_triad: str
    roman_seventh: str


class TransformOptions(BaseModel):
    model_config = OPTIONS_CONFIG

    interval_transformation: Optional[IntervalTransformation] = None
    filter_out_octave: bool = False
    should_sort: bool = False
    rotate_left: int = 0
    fill_chromatic: bool = False
    most_similar_scale: Optional[str] = None
    rotate_to_root_integer_0: bool = False
    root_note_integer: Optional[int] = None


class SearchOptions(BaseModel):
    model_config = OPTIONS_CONFIG

    query: Optional[str] = None
    intervals: Optional[List[str]] = None
    type: Optional[str] = None


def coerce_options(options: Any, model: Type[OptionsModel]) -> OptionsModel:
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    if isinstance(options, BaseModel):
        return model.model_validate(options.model_dump())
    return model.model_validate(dict(options))
