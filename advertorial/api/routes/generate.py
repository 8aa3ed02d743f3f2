"""
POST /api/generate/template — archétype + produit + angle → nouvelle session d'édition
POST /api/generate/ai       — brief IA + produit → session (nouvelle ou existante)
"""
from datetime import date
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ...archetypes import generate_from_archetype
from ...errors import GenerationError, ValidationError
from ...models import AIBrief, ProductFacts, TemplateRequest
from ...renderer import ThemeOptions
from ...session import EditingSession
from ..sessions import get_session, open_session, register_session, session_view

router = APIRouter(prefix="/api/generate", tags=["Generate"])


class AIGenerateInput(BaseModel):
    brief:      AIBrief
    product:    Optional[ProductFacts] = None
    theme:      Optional[ThemeOptions] = None
    session_id: Optional[str]          = None


@router.post("/template")
def api_generate_template(req: TemplateRequest):
    try:
        doc = generate_from_archetype(req.archetype_id, req.product, req.angle, today=date.today())
    except ValidationError as e:
        raise HTTPException(400, {"field": e.field, "message": str(e)})
    doc.theme = req.theme
    return session_view(open_session(doc))


@router.post("/ai")
async def api_generate_ai(req: AIGenerateInput):
    # Sans session_id, la session n'est enregistrée qu'une fois la génération réussie
    s = get_session(req.session_id) if req.session_id else EditingSession()
    try:
        doc = await s.generate_with_ai(req.brief, req.product)
    except ValidationError as e:
        raise HTTPException(400, {"field": e.field, "message": str(e)})
    except GenerationError as e:
        raise HTTPException(502, str(e))
    if doc is None:
        # Réponse périmée : une génération plus récente a été lancée sur cette session
        return session_view(s, superseded=True)
    if req.theme is not None:
        s.set_theme(req.theme)
    if not req.session_id:
        register_session(s)
    return session_view(s, superseded=False)
