import pytest
from pydantic import ValidationError

from schemas.chord import Chord
from services.theory import (
    build_chord,
    chord_to_frequencies,
    frequency_of,
    interval_shape,
    label_of,
    label_with_octave,
    normalize,
    reduce_pc,
    resolve_root,
)


@pytest.mark.parametrize("n, expected", [(-1, 11), (13, 1), (24, 0), (-13, 11), (5, 5)])
def test_reduce_pc(n, expected):
    assert reduce_pc(n) == expected


def test_reduce_pc_other_base():
    assert reduce_pc(-1, 7) == 6


def test_normalize_sorts_and_reduces():
    assert normalize([14, 4, 7]) == [2, 4, 7]


def test_normalize_keeps_duplicates():
    assert normalize([12, 0, 4]) == [0, 0, 4]


@pytest.mark.parametrize("notes", [[], [0, 4, 7], [-5, 30, 7, 7], [11, -1, 23, 100]])
def test_normalize_is_idempotent(notes):
    assert normalize(normalize(notes)) == normalize(notes)


def test_labels():
    assert label_of(0) == "C"
    assert label_of(3) == "Eb"
    assert label_of(-1) == "B"
    assert label_with_octave(0) == "C4"
    assert label_with_octave(13) == "C#5"
    assert label_with_octave(23, base_octave=3) == "B4"


def test_resolve_root_uses_both_spelling_tables():
    assert resolve_root("F#") == 6
    assert resolve_root("Db") == 1
    assert resolve_root("E#") == 5
    assert resolve_root("Cb") == 11
    assert resolve_root("H") is None


def test_build_chord_keeps_interval_order():
    assert build_chord(9, (0, 3, 7)) == [9, 0, 4]
    assert build_chord(0, (0, 3, 7, 10, 14)) == [0, 3, 7, 10, 2]


def test_interval_shape():
    assert interval_shape([0, 4, 9], 9) == [0, 3, 7]


def test_frequency_of():
    assert frequency_of(9) == pytest.approx(440.0)
    assert frequency_of(9, octave=5) == pytest.approx(880.0)
    assert frequency_of(0, octave=4) == pytest.approx(261.6256, abs=1e-3)
    assert frequency_of(9, a4_hz=432.0) == pytest.approx(432.0)


def test_chord_to_frequencies():
    assert chord_to_frequencies([9, 9], octave=3) == pytest.approx([220.0, 220.0])


def test_chord_canonical_form():
    chord = Chord.of([12, 4, 7, 0, -5])
    assert chord.pitch_classes == (0, 4, 7)
    assert chord == Chord.of([7, 4, 0])
    assert len(chord) == 3
    assert hash(chord) == hash(Chord.of([0, 4, 7]))


def test_chord_is_frozen():
    chord = Chord.of([0, 4, 7])
    with pytest.raises(ValidationError):
        chord.pitch_classes = (1, 2, 3)
