"""
Router FastAPI — endpoints template builder.

GET  /template-builder/catalog                 → blocs disponibles + catégories
GET  /template-builder/catalog/{type}/variants → variants d'un type + config par défaut
POST /template-builder/resolve                 → {type, variant, overrides} → config effective
POST /template-builder/validate                → template JSON → {"valid": bool, "error"?}
POST /template-builder/preview                 → template JSON → HTML outline du canvas
"""
from typing import Any, Dict

from fastapi import APIRouter, Body
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, Field, ValidationError

from .blocks.registry import default_registry
from .core.resolver import resolve as resolve_config
from .core.schemas import Template
from .editor.state import EditorState
from .renderer.canvas import render_canvas

router = APIRouter(prefix="/template-builder", tags=["template_builder"])


class ResolveRequest(BaseModel):
    type: str
    variant: str
    overrides: Dict[str, Any] = Field(default_factory=dict)


def _validate(data: Any) -> Template:
    if not isinstance(data, dict) or not isinstance(data.get("sections"), list):
        raise ValueError("Le template doit contenir une liste 'sections'")
    return Template.model_validate(data)


@router.get("/catalog", summary="Liste les blocs disponibles par catégorie")
def catalog() -> JSONResponse:
    registry = default_registry()
    blocks = [m.model_dump(mode="json") for m in registry.all_blocks()]
    return JSONResponse({"blocks": blocks, "categories": registry.categories()})


@router.get("/catalog/{block_type}/variants", summary="Variants d'un type de bloc")
def variants(block_type: str) -> JSONResponse:
    registry = default_registry()
    meta = registry.get_block_meta(block_type)
    if meta is None:
        return JSONResponse({"error": f"Bloc '{block_type}' inconnu"}, status_code=404)
    return JSONResponse({
        "type":           meta.type.value,
        "defaultVariant": meta.default_variant,
        "variants":       [v.model_dump(mode="json") for v in registry.get_block_variants(block_type)],
    })


@router.post("/resolve", summary="Calcule la configuration effective d'un bloc")
def resolve(req: ResolveRequest) -> dict:
    return {"config": resolve_config(req.type, req.variant, req.overrides)}


@router.post("/validate", summary="Valide un template sans le charger")
def validate(payload: Any = Body(...)) -> dict:
    try:
        _validate(payload)
        return {"valid": True}
    except (ValidationError, ValueError) as e:
        return {"valid": False, "error": str(e)}


@router.post("/preview", response_class=HTMLResponse, summary="Rend l'outline HTML d'un template")
def preview(payload: Any = Body(...)):
    try:
        template = _validate(payload)
    except (ValidationError, ValueError) as e:
        return JSONResponse({"error": str(e)}, status_code=422)
    return HTMLResponse(content=render_canvas(EditorState(template=template)))
