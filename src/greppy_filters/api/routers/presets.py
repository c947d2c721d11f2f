"""Filter presets API router.

List, fetch, create and delete saved filter presets. Presets live in the
durable key-value storage under a single key; until the first save the
built-in presets are returned.
"""

from fastapi import APIRouter, Depends, HTTPException

from greppy_filters.api.dependencies import get_preset_store
from greppy_filters.api.schemas import CreatePresetRequest, PresetResponse
from greppy_filters.config.logging_config import get_logger
from greppy_filters.filtering.presets import PresetStore
from greppy_filters.filtering.serializer import to_query_string
from greppy_filters.filtering.spec import FilterSpec

router = APIRouter()
logger = get_logger("api.presets")


@router.get("", response_model=list[PresetResponse])
async def list_presets(store: PresetStore = Depends(get_preset_store)):
    """List all filter presets."""
    return [p.to_dict() for p in store.load()]


@router.get("/{preset_id}", response_model=PresetResponse)
async def get_preset(preset_id: str, store: PresetStore = Depends(get_preset_store)):
    """Get a single preset by ID."""
    preset = store.get(preset_id)
    if preset is None:
        raise HTTPException(status_code=404, detail="Preset not found")
    return preset.to_dict()


@router.post("", status_code=201, response_model=PresetResponse)
async def create_preset(
    request: CreatePresetRequest,
    store: PresetStore = Depends(get_preset_store),
):
    """Create a preset from a query, or from a filter spec via its canonical query."""
    name = request.name.strip()
    if request.query is not None:
        query = request.query.strip()
    elif request.filters is not None:
        query = to_query_string(FilterSpec.from_dict(request.filters.model_dump()))
    else:
        query = ""

    if not name:
        raise HTTPException(status_code=422, detail="Preset name must not be blank")
    if not query:
        raise HTTPException(status_code=422, detail="No active filters to save")

    preset = store.add(name, query)
    logger.info(f"Created preset {preset.id} ({name!r})")
    return preset.to_dict()


@router.delete("/{preset_id}", status_code=204)
async def delete_preset(preset_id: str, store: PresetStore = Depends(get_preset_store)):
    """Delete a preset."""
    if store.get(preset_id) is None:
        raise HTTPException(status_code=404, detail="Preset not found")
    store.remove(preset_id)
    return None
