import logging
import re
from typing import List

from schemas.chord import ChordDefinition
from services.catalog import ChordCatalog, DEFAULT_CATALOG
from services.theory import build_chord, resolve_root

logger = logging.getLogger(__name__)

# Root letter (any case), optional accidental, then the quality suffix
_CHORD_RE = re.compile(r"^([A-Ga-g])([#b]?)(.*)$")

_MAJOR_INTERVALS = (0, 4, 7)


def _matches_quality(definition: ChordDefinition, quality: str) -> bool:
    if definition.suffix == "" and quality in ("", "maj"):
        return True
    if definition.suffix == "m" and quality in ("min", "-"):
        return True
    if definition.suffix == "aug" and quality == "+":
        return True
    if definition.suffix == "dim" and quality == "o":
        return True
    return definition.suffix.lower() == quality


def parse_chord_string(
    text: str, catalog: ChordCatalog = DEFAULT_CATALOG
) -> List[int] | None:
    """Convert chord notation like 'F#m7' or 'Bbdim7' into pitch classes.

    Notes come back in catalog interval order starting from the root.
    Returns None when the root cannot be read. An unknown quality falls
    back to a major triad.
    """
    m = _CHORD_RE.match(text.strip())
    if not m:
        logger.debug("No chord root in %r", text)
        return None

    root_name = m.group(1).upper() + m.group(2)
    root = resolve_root(root_name)
    if root is None:
        logger.debug("Unknown root spelling %r in %r", root_name, text)
        return None

    raw_quality = m.group(3)
    # Upper-case M is the only case-sensitive spelling: major, not minor
    quality = "maj" if raw_quality == "M" else raw_quality.lower()
    for definition in catalog.by_suffix_length():
        if _matches_quality(definition, quality):
            return build_chord(root, definition.intervals)

    logger.debug("Unknown chord quality %r in %r; using major triad", raw_quality, text)
    return build_chord(root, _MAJOR_INTERVALS)
