from typing import Iterable, Iterator, List

from schemas.chord import ChordDefinition


class ChordCatalog:
    """Ordered, read-only table of chord qualities.

    Order matters: identification accepts the first matching entry, so
    earlier entries win ties between rotations of the same pitch-class set.
    """

    def __init__(self, definitions: Iterable[ChordDefinition]):
        self._definitions = tuple(definitions)

    def __iter__(self) -> Iterator[ChordDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"ChordCatalog({[d.name for d in self._definitions]})"

    def by_suffix_length(self) -> List[ChordDefinition]:
        """Definitions ordered longest suffix first, ties in catalog order."""
        return sorted(self._definitions, key=lambda d: len(d.suffix), reverse=True)

    def find(self, name: str) -> ChordDefinition | None:
        for definition in self._definitions:
            if definition.name == name:
                return definition
        return None


DEFAULT_CATALOG = ChordCatalog([
    ChordDefinition(name="Major", suffix="", intervals=(0, 4, 7), family="Major"),
    ChordDefinition(name="Minor", suffix="m", intervals=(0, 3, 7), family="Minor"),
    ChordDefinition(name="Diminished", suffix="dim", intervals=(0, 3, 6), family="Dim"),
    ChordDefinition(name="Augmented", suffix="aug", intervals=(0, 4, 8), family="Aug"),
    ChordDefinition(name="Major 7", suffix="maj7", intervals=(0, 4, 7, 11), family="Seventh"),
    ChordDefinition(name="Minor 7", suffix="m7", intervals=(0, 3, 7, 10), family="Seventh"),
    ChordDefinition(name="Dominant 7", suffix="7", intervals=(0, 4, 7, 10), family="Seventh"),
    ChordDefinition(name="Diminished 7", suffix="dim7", intervals=(0, 3, 6, 9), family="Seventh"),
    ChordDefinition(name="Half Dim 7", suffix="m7b5", intervals=(0, 3, 6, 10), family="Seventh"),
    ChordDefinition(name="Sus 4", suffix="sus4", intervals=(0, 5, 7), family="Sus"),
    ChordDefinition(name="Sus 2", suffix="sus2", intervals=(0, 2, 7), family="Sus"),
    ChordDefinition(name="Add 9", suffix="add9", intervals=(0, 2, 4, 7), family="Seventh"),
    # Ninths are spelled above the octave; they reduce to pitch class 2.
    ChordDefinition(name="Minor 9", suffix="m9", intervals=(0, 3, 7, 10, 14), family="Seventh"),
    ChordDefinition(name="Major 9", suffix="maj9", intervals=(0, 4, 7, 11, 14), family="Seventh"),
    ChordDefinition(name="Dominant 9", suffix="9", intervals=(0, 4, 7, 10, 14), family="Seventh"),
])
