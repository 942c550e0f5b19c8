"""Negative harmony: reflecting notes across a key's tonic-dominant axis.

The axis lies halfway between the tonic and its fifth, so in C it sits
between E and Eb. A note and its reflection always sum to axis_sum(key).
"""

import logging
import re
from typing import Iterable, List

from schemas.harmony import PresetProgression, ProgressionEntry
from services.identify import identify_chord
from services.parsing import parse_chord_string
from services.theory import reduce_pc

logger = logging.getLogger(__name__)

_TOKEN_SPLIT_RE = re.compile(r"[\s,]+")

PRESET_PROGRESSIONS = (
    PresetProgression(name="ii-V-I (Jazz)", chords="Dm7 G7 Cmaj7", description="Classic jazz cadence"),
    PresetProgression(name="I-vi-IV-V (50s)", chords="C Am F G", description="50s doo-wop progression"),
    PresetProgression(name="I-IV-V-I (Blues)", chords="C F G C", description="Basic blues structure"),
    PresetProgression(name="I-V-vi-IV (Pop)", chords="C G Am F", description="Modern pop standard"),
    PresetProgression(name="vi-IV-I-V (Emo)", chords="Am F C G", description="Emotional pop progression"),
    PresetProgression(name="ii-V-I-VI (Turnaround)", chords="Dm7 G7 Cmaj7 A7", description="Jazz turnaround"),
    PresetProgression(name="I-bVII-IV (Rock)", chords="C Bb F", description="Classic rock sound"),
    PresetProgression(name="Coltrane Changes", chords="Cmaj7 Eb7 Abmaj7 B7 Emaj7 G7", description="Giant Steps"),
)


def axis_sum(key_root: int) -> int:
    return reduce_pc(key_root + reduce_pc(key_root + 7))


def reflect_note(note: int, key_root: int = 0) -> int:
    """Mirror a note across the axis of key_root; C <-> G and E <-> Eb in C."""
    return reduce_pc(axis_sum(key_root) - note)


def reflect_chord(notes: Iterable[int], key_root: int = 0) -> List[int]:
    """Reflect every note, keeping the input order."""
    return [reflect_note(n, key_root) for n in notes]


def split_progression(text: str) -> List[str]:
    return [token for token in _TOKEN_SPLIT_RE.split(text) if token.strip()]


def convert_progression(text: str, key_root: int = 0) -> List[ProgressionEntry]:
    """Parse a chord progression and reflect each chord into negative harmony.

    Tokens that do not parse are kept with empty note lists and a '?' label
    so the output lines up with the input.
    """
    entries = []
    for token in split_progression(text):
        notes = parse_chord_string(token)
        if notes is None:
            logger.debug("Skipping unparsable chord %r", token)
            entries.append(ProgressionEntry(
                original=token, notes=[], negative_notes=[], negative_label="?",
            ))
            continue

        negative = reflect_chord(notes, key_root)
        entries.append(ProgressionEntry(
            original=token,
            notes=notes,
            negative_notes=negative,
            negative_label=identify_chord(negative).label,
        ))
    return entries


def compact_output(entries: Iterable[ProgressionEntry]) -> str:
    return "  ".join(e.negative_label for e in entries)
