from typing import Sequence

from schemas.chord import Displacement
from schemas.harmony import TraversalStep
from services.catalog import ChordCatalog, DEFAULT_CATALOG
from services.identify import identify_chord
from services.neo_riemannian import apply_transform
from services.tonnetz import DEFAULT_NODE_DISTANCE, displacement


def next_step(
    notes: Sequence[int],
    transform_type: str,
    distance: float = DEFAULT_NODE_DISTANCE,
    catalog: ChordCatalog = DEFAULT_CATALOG,
) -> TraversalStep:
    """Work out where a transformation leads from the current chord.

    A self-map keeps the current chord and label with no displacement;
    callers should replay it rather than add a node. Otherwise the new
    chord is labelled and placed relative to the current node, using the
    current chord's family to pick the direction.
    """
    current = identify_chord(notes, catalog)
    result = apply_transform(notes, transform_type, catalog)

    if result.is_self_map:
        return TraversalStep(
            transform=transform_type,
            is_self_map=True,
            notes=list(result.chord.pitch_classes),
            label=current.label,
            type=current.type,
            previous=current,
            displacement=Displacement(dx=0.0, dy=0.0),
        )

    info = identify_chord(result.notes, catalog)
    return TraversalStep(
        transform=transform_type,
        is_self_map=False,
        notes=list(result.chord.pitch_classes),
        label=info.label,
        type=info.type,
        previous=current,
        displacement=displacement(transform_type, current.type, distance),
    )
