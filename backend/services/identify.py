import logging
from typing import Iterable

from schemas.chord import Chord, ChordInfo
from services.catalog import ChordCatalog, DEFAULT_CATALOG
from services.theory import NOTE_NAMES, normalize

logger = logging.getLogger(__name__)


def identify_chord(
    notes: Iterable[int], catalog: ChordCatalog = DEFAULT_CATALOG
) -> ChordInfo:
    """Name a note collection by trying each note as root against the catalog.

    Roots are tried in ascending pitch-class order and, for each root, the
    catalog is scanned in its declared order; the first match wins.
    """
    ordered = normalize(notes)

    for root in ordered:
        shape = Chord.of(n - root for n in ordered)
        for definition in catalog:
            if definition.chord == shape:
                return ChordInfo(
                    root=root,
                    type=definition.family,
                    label=NOTE_NAMES[root] + definition.suffix,
                    name=definition.name,
                )

    logger.debug("No catalog match for %s", ordered)
    return ChordInfo(
        root=ordered[0] if ordered else 0,
        type="Unknown",
        label="?",
        name="Unknown",
    )


def same_chord(a: Iterable[int], b: Iterable[int]) -> bool:
    """True if both collections hold the same pitch classes."""
    return Chord.of(a) == Chord.of(b)
