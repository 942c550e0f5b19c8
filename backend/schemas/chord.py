from typing import List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

# Closed set of chord families used for labelling and transformation routing
ChordFamily = Literal[
    "Major", "Minor", "Dim", "Aug", "Sus", "Seventh", "Other", "Unknown",
]

TransformType = Literal["P", "L", "R"]


class Chord(BaseModel):
    """Pitch-class set in canonical form: reduced mod 12, ascending, no duplicates.

    Two chords compare equal iff they contain the same pitch classes,
    whatever order or octave the notes were given in.
    """

    model_config = ConfigDict(frozen=True)

    pitch_classes: Tuple[int, ...]

    @field_validator("pitch_classes", mode="before")
    @classmethod
    def canonical_form(cls, v) -> Tuple[int, ...]:
        return tuple(sorted({int(n) % 12 for n in v}))

    @classmethod
    def of(cls, notes) -> "Chord":
        return cls(pitch_classes=notes)

    def __len__(self) -> int:
        return len(self.pitch_classes)


class ChordDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    suffix: str
    intervals: Tuple[int, ...]
    family: ChordFamily = "Other"

    @field_validator("intervals")
    @classmethod
    def intervals_ascending_from_root(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        if not v or v[0] != 0:
            raise ValueError("intervals must start at 0")
        if any(b <= a for a, b in zip(v, v[1:])):
            raise ValueError("intervals must be strictly ascending")
        return v

    @property
    def chord(self) -> Chord:
        """Pitch-class shape of this quality rooted on C."""
        return Chord.of(self.intervals)


class ChordInfo(BaseModel):
    root: int
    type: ChordFamily
    label: str
    name: str


class TrichordStructure(BaseModel):
    root: int
    x: int
    y: int
    type: ChordFamily
    is_symmetric: bool


class TransformationResult(BaseModel):
    # Notes keep the caller's voice order; use .chord for comparisons.
    notes: List[int]
    is_self_map: bool
    type: ChordFamily

    @property
    def chord(self) -> Chord:
        return Chord.of(self.notes)


class Displacement(BaseModel):
    dx: float
    dy: float
