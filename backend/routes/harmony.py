import logging

from fastapi import APIRouter, HTTPException

from config import settings
from schemas.harmony import (
    FrequencyRequest,
    FrequencyResponse,
    NotesRequest,
    ParseRequest,
    ParseResponse,
    ProgressionRequest,
    ProgressionResponse,
    ReflectRequest,
    ReflectResponse,
    TransformRequest,
)
from services.identify import identify_chord
from services.negative_harmony import (
    PRESET_PROGRESSIONS,
    compact_output,
    convert_progression,
    reflect_chord,
)
from services.parsing import parse_chord_string
from services.theory import chord_to_frequencies, reduce_pc
from services.traversal import next_step

router = APIRouter()
logger = logging.getLogger(__name__)


def _key_root(key_root: int | None) -> int:
    if key_root is None:
        return reduce_pc(settings.default_key_root)
    return reduce_pc(key_root)


@router.post("/chords/identify")
def identify(req: NotesRequest) -> dict:
    return identify_chord(req.notes).model_dump()


@router.post("/chords/parse")
def parse(req: ParseRequest) -> dict:
    notes = parse_chord_string(req.text)
    if notes is None:
        logger.info("Rejected chord text %r", req.text)
        raise HTTPException(status_code=400, detail=f"Cannot parse chord: {req.text!r}")

    return ParseResponse(
        text=req.text,
        notes=notes,
        chord=identify_chord(notes),
    ).model_dump()


@router.post("/transform")
def transform(req: TransformRequest) -> dict:
    if req.transform not in ("P", "L", "R"):
        raise HTTPException(
            status_code=400,
            detail=f"Unknown transform {req.transform!r}; expected P, L or R",
        )

    distance = req.distance if req.distance is not None else settings.tonnetz_node_distance
    step = next_step(req.notes, req.transform, distance)
    if step.is_self_map:
        logger.info("%s maps %s onto itself", req.transform, step.label)
    return step.model_dump()


@router.post("/negative/notes")
def reflect_notes(req: ReflectRequest) -> dict:
    key_root = _key_root(req.key_root)
    return ReflectResponse(
        key_root=key_root,
        notes=req.notes,
        reflected=reflect_chord(req.notes, key_root),
    ).model_dump()


@router.post("/negative/progression")
def convert(req: ProgressionRequest) -> dict:
    key_root = _key_root(req.key_root)
    entries = convert_progression(req.progression, key_root)
    if not entries:
        raise HTTPException(status_code=400, detail="Progression contains no chords")

    return ProgressionResponse(
        key_root=key_root,
        entries=entries,
        compact=compact_output(entries),
    ).model_dump()


@router.get("/progressions/presets")
def list_presets() -> dict:
    return {"presets": [p.model_dump() for p in PRESET_PROGRESSIONS]}


@router.post("/frequencies")
def frequencies(req: FrequencyRequest) -> dict:
    octave = req.octave if req.octave is not None else settings.default_octave
    return FrequencyResponse(
        octave=octave,
        a4_frequency_hz=settings.a4_frequency_hz,
        frequencies=chord_to_frequencies(req.notes, octave, settings.a4_frequency_hz),
    ).model_dump()
