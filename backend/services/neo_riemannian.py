"""Generalised Neo-Riemannian P, L and R transformations.

A chord is read as the trichord {0, x, x+y} above a root (see
services.trichord). Each transformation moves exactly one note:

  P  note at x      -> root + y       (swaps the two intervals)
  L  root down a semitone when x >= y, otherwise top note up a semitone
  R  top note up a whole tone when x >= y, otherwise root down a whole tone

Symmetric chords are special-cased. P fixes every chord with x == y, L and
R fix augmented triads, and L and R send diminished triads a minor third
or major sixth away. A fixed point is flagged with is_self_map so callers
know not to record a new traversal step. Any other move that happens to
leave the pitch-class set unchanged is flagged the same way.
"""

import logging
from typing import Callable, Dict, List, Sequence

from schemas.chord import Chord, ChordFamily, TransformationResult
from services.catalog import ChordCatalog, DEFAULT_CATALOG
from services.identify import identify_chord
from services.theory import reduce_pc
from services.trichord import analyze_trichord

logger = logging.getLogger(__name__)


def _move(notes: Sequence[int], root: int, interval: int, to: int) -> List[int]:
    """Replace every note sitting `interval` above root with `to`."""
    target = reduce_pc(interval)
    return [
        reduce_pc(to) if reduce_pc(n - root) == target else reduce_pc(n)
        for n in notes
    ]


def _shift(notes: Sequence[int], root: int, interval: int, by: int) -> List[int]:
    return _move(notes, root, interval, root + interval + by)


def _self_map(
    notes: Sequence[int], family: ChordFamily
) -> TransformationResult:
    return TransformationResult(
        notes=[reduce_pc(n) for n in notes], is_self_map=True, type=family,
    )


def _result(
    before: Sequence[int],
    after: List[int],
    catalog: ChordCatalog,
    family: ChordFamily | None = None,
) -> TransformationResult:
    # Any move that lands on the same pitch-class set is a fixed point,
    # e.g. a dim7 read as major-shaped has no note at the moved interval.
    if Chord.of(after) == Chord.of(before):
        return _self_map(before, identify_chord(before, catalog).type)
    if family is None:
        family = identify_chord(after, catalog).type
    return TransformationResult(notes=after, is_self_map=False, type=family)


def transform_p(
    notes: Sequence[int], catalog: ChordCatalog = DEFAULT_CATALOG
) -> TransformationResult:
    s = analyze_trichord(notes, catalog)
    if s.is_symmetric:
        return _self_map(notes, s.type)
    return _result(notes, _move(notes, s.root, s.x, s.root + s.y), catalog)


def transform_l(
    notes: Sequence[int], catalog: ChordCatalog = DEFAULT_CATALOG
) -> TransformationResult:
    s = analyze_trichord(notes, catalog)
    top = s.x + s.y
    if s.type == "Aug":
        return _self_map(notes, s.type)
    if s.type == "Dim":
        return _result(notes, _shift(notes, s.root, top, 3), catalog, "Aug")
    if s.x >= s.y:
        return _result(notes, _shift(notes, s.root, 0, -1), catalog)
    return _result(notes, _shift(notes, s.root, top, 1), catalog)


def transform_r(
    notes: Sequence[int], catalog: ChordCatalog = DEFAULT_CATALOG
) -> TransformationResult:
    s = analyze_trichord(notes, catalog)
    top = s.x + s.y
    if s.type == "Aug":
        return _self_map(notes, s.type)
    if s.type == "Dim":
        return _result(notes, _shift(notes, s.root, 0, 2 * s.x + s.y), catalog, "Aug")
    if s.x >= s.y:
        return _result(notes, _shift(notes, s.root, top, 2), catalog)
    return _result(notes, _shift(notes, s.root, 0, -2), catalog)


TRANSFORMS: Dict[str, Callable[..., TransformationResult]] = {
    "P": transform_p,
    "L": transform_l,
    "R": transform_r,
}


def apply_transform(
    notes: Sequence[int],
    transform_type: str,
    catalog: ChordCatalog = DEFAULT_CATALOG,
) -> TransformationResult:
    """Dispatch on 'P', 'L' or 'R'; any other tag returns the input as given."""
    transform = TRANSFORMS.get(transform_type)
    if transform is None:
        logger.debug("Unknown transform %r; returning chord unchanged", transform_type)
        return TransformationResult(
            notes=list(notes),
            is_self_map=False,
            type=identify_chord(notes, catalog).type,
        )
    return transform(notes, catalog)
