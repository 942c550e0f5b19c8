from typing import List, Optional

from pydantic import BaseModel, field_validator

from schemas.chord import ChordFamily, ChordInfo, Displacement


class NotesRequest(BaseModel):
    notes: List[int]

    @field_validator("notes")
    @classmethod
    def notes_not_empty(cls, v: List[int]) -> List[int]:
        if not v:
            raise ValueError("notes must contain at least one note")
        return v


class ParseRequest(BaseModel):
    text: str


class ParseResponse(BaseModel):
    text: str
    notes: List[int]
    chord: ChordInfo


class TransformRequest(NotesRequest):
    transform: str
    distance: Optional[float] = None


class TraversalStep(BaseModel):
    transform: str
    is_self_map: bool
    notes: List[int]
    label: str
    type: ChordFamily
    previous: ChordInfo
    displacement: Displacement


class ReflectRequest(NotesRequest):
    key_root: Optional[int] = None


class ReflectResponse(BaseModel):
    key_root: int
    notes: List[int]
    reflected: List[int]


class ProgressionRequest(BaseModel):
    progression: str
    key_root: Optional[int] = None


class ProgressionEntry(BaseModel):
    original: str
    notes: List[int]
    negative_notes: List[int]
    negative_label: str


class ProgressionResponse(BaseModel):
    key_root: int
    entries: List[ProgressionEntry]
    compact: str


class PresetProgression(BaseModel):
    name: str
    chords: str
    description: str


class FrequencyRequest(NotesRequest):
    octave: Optional[int] = None


class FrequencyResponse(BaseModel):
    octave: int
    a4_frequency_hz: float
    frequencies: List[float]
