from typing import Sequence

from schemas.chord import ChordFamily, TrichordStructure
from services.catalog import ChordCatalog, DEFAULT_CATALOG
from services.identify import identify_chord
from services.theory import interval_shape, normalize

# (x, y) -> family, in priority order. Exact pairs: (5, 2) and (2, 5) are
# distinct shapes even though both are Sus.
KNOWN_SHAPES: dict[tuple[int, int], ChordFamily] = {
    (4, 3): "Major",
    (3, 4): "Minor",
    (3, 3): "Dim",
    (4, 4): "Aug",
    (5, 2): "Sus",
    (2, 5): "Sus",
}


def analyze_trichord(
    notes: Sequence[int], catalog: ChordCatalog = DEFAULT_CATALOG
) -> TrichordStructure:
    """Reduce a chord to its {0, x, x+y} signature relative to a root.

    Only three-note chords are analysed for real. Anything else is labelled
    by identify_chord and given a major-shaped (4, 3) signature so the
    transformations still have something to act on.
    """
    if len(notes) != 3:
        info = identify_chord(notes, catalog)
        return TrichordStructure(
            root=info.root, x=4, y=3, type=info.type, is_symmetric=False,
        )

    ordered = normalize(notes)
    for root in ordered:
        _, a, b = interval_shape(ordered, root)
        x, y = a, b - a
        family = KNOWN_SHAPES.get((x, y))
        if family is not None:
            return TrichordStructure(
                root=root, x=x, y=y, type=family, is_symmetric=(x == y),
            )

    root = ordered[0]
    _, a, b = interval_shape(ordered, root)
    x, y = a, b - a
    return TrichordStructure(
        root=root, x=x, y=y, type="Unknown", is_symmetric=(x == y),
    )
