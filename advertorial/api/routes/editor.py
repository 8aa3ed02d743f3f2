"""
POST   /api/render                          — rendu sans session (blocs + thème → HTML)
GET    /api/sessions/{sid}                  — état de la session
POST   /api/sessions/{sid}/apply            — opération d'édition + aperçu
PUT    /api/sessions/{sid}/theme            — change le thème
GET    /api/sessions/{sid}/blocks/{bid}     — aperçu d'un bloc seul
DELETE /api/sessions/{sid}                  — abandon de la session
"""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ... import editor
from ...blocks import BlockUnion
from ...errors import NoDocumentError
from ...renderer import ThemeOptions, render_block, render_document
from ..sessions import close_session, get_session, session_view

router = APIRouter(prefix="/api", tags=["Editor"])


class RenderInput(BaseModel):
    blocks: List[BlockUnion]       = Field(default_factory=list)
    theme:  Optional[ThemeOptions] = None


class ApplyInput(BaseModel):
    op:     str
    index:  Optional[int]          = None
    kind:   Optional[str]          = None
    id:     Optional[str]          = None
    patch:  Dict[str, Any]         = Field(default_factory=dict)
    field:  Optional[str]          = None
    item:   Optional[int]          = None


@router.post("/render")
def api_render(req: RenderInput):
    blocks = editor.ensure_unique_ids(req.blocks)
    return {
        "html":   render_document(blocks, req.theme),
        "blocks": {b.id: render_block(b, req.theme) for b in blocks},
    }


@router.get("/sessions/{sid}")
def api_session(sid: str):
    return session_view(get_session(sid))


def _apply_args(req: ApplyInput) -> tuple:
    """Arguments positionnels de l'opération, après contrôle des champs requis."""
    if req.op == "insert_after":
        if not req.kind:
            raise HTTPException(400, "kind requis")
        return req.index, req.kind
    if req.op in ("move_up", "move_down", "duplicate"):
        if req.index is None:
            raise HTTPException(400, "index requis")
        return (req.index,)
    if req.op not in editor.OPERATIONS:
        raise HTTPException(400, f"Opération inconnue : {req.op}")
    if not req.id:
        raise HTTPException(400, "id requis")
    if req.op == "delete":
        return (req.id,)
    if req.op == "update":
        return req.id, req.patch
    if not req.field:
        raise HTTPException(400, "field requis")
    if req.op == "update_item":
        return req.id, req.field, req.item or 0, req.patch
    if req.op == "add_item":
        return req.id, req.field
    return req.id, req.field, req.item or 0


@router.post("/sessions/{sid}/apply")
def api_apply(sid: str, req: ApplyInput):
    s = get_session(sid)
    args = _apply_args(req)
    try:
        _, new_id = s.apply(req.op, *args)
    except NoDocumentError:
        raise HTTPException(409, "Aucun document dans cette session")
    except ValueError as e:
        raise HTTPException(400, str(e))
    return session_view(s, new_id=new_id)


@router.put("/sessions/{sid}/theme")
def api_theme(sid: str, theme: ThemeOptions):
    s = get_session(sid)
    if s.document is None:
        raise HTTPException(409, "Aucun document dans cette session")
    s.set_theme(theme)
    return session_view(s)


@router.get("/sessions/{sid}/blocks/{bid}")
def api_block_preview(sid: str, bid: str):
    s = get_session(sid)
    try:
        return {"id": bid, "html": s.preview_block(bid)}
    except (KeyError, ValueError):
        raise HTTPException(404, "Bloc introuvable")


@router.delete("/sessions/{sid}")
def api_close(sid: str):
    get_session(sid)
    close_session(sid)
    return {"ok": True}
