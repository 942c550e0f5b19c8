from typing import Iterable, List

# Primary spelling for each pitch class (flats for Eb, Ab, Bb)
NOTE_NAMES = [
    "C", "C#", "D", "Eb", "E", "F",
    "F#", "G", "Ab", "A", "Bb", "B",
]

# Alternate spellings consulted when a root is not in NOTE_NAMES
ENHARMONICS = {
    "Db": 1, "D#": 3, "Eb": 3, "Gb": 6, "G#": 8,
    "Ab": 8, "A#": 10, "Bb": 10, "E#": 5, "B#": 0,
    "Cb": 11, "Fb": 4,
}

A4_FREQUENCY_HZ = 440.0
A4_PITCH_CLASS = 9


def reduce_pc(n: int, base: int = 12) -> int:
    """Reduce any integer into [0, base); -1 -> 11, 13 -> 1."""
    return n % base


def normalize(notes: Iterable[int]) -> List[int]:
    """Reduce every note to a pitch class and sort ascending.

    Duplicates are kept; use schemas.chord.Chord for set semantics.
    """
    return sorted(reduce_pc(n) for n in notes)


def label_of(n: int) -> str:
    return NOTE_NAMES[reduce_pc(n)]


def label_with_octave(note: int, base_octave: int = 4) -> str:
    """Note name plus octave, for keyboards spanning several octaves (13 -> 'C#5')."""
    return f"{label_of(note)}{base_octave + note // 12}"


def resolve_root(name: str) -> int | None:
    """Return the pitch class for a root spelling like 'F#' or 'Cb', or None."""
    if name in NOTE_NAMES:
        return NOTE_NAMES.index(name)
    return ENHARMONICS.get(name)


def build_chord(root: int, intervals: Iterable[int]) -> List[int]:
    """Stack intervals on a root, keeping interval order."""
    return [reduce_pc(root + i) for i in intervals]


def frequency_of(
    pitch_class: int, octave: int = 4, a4_hz: float = A4_FREQUENCY_HZ
) -> float:
    """Equal-tempered frequency in Hz, measured in semitones from A4."""
    semitones_from_a4 = (octave - 4) * 12 + (pitch_class - A4_PITCH_CLASS)
    return a4_hz * 2 ** (semitones_from_a4 / 12)


def chord_to_frequencies(
    notes: Iterable[int], octave: int = 4, a4_hz: float = A4_FREQUENCY_HZ
) -> List[float]:
    return [frequency_of(n, octave, a4_hz) for n in notes]


def interval_shape(notes: Iterable[int], root: int) -> List[int]:
    """Ascending intervals of every note above root, duplicates kept."""
    return sorted(reduce_pc(n - root) for n in notes)
