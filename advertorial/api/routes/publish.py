"""
POST /api/sessions/{sid}/publish — rendu final → page boutique → enregistrement
GET  /api/advertorials           — historique (filtrable par boutique)
GET  /api/advertorials/{id}      — détail
DELETE /api/advertorials/{id}    — suppression de l'historique (la page boutique reste en ligne)
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ...database import db_delete_advertorial, db_get_advertorial, db_list_advertorials, get_db, jl
from ...errors import PublishError, ValidationError
from ...models import AdvertorialDB, ProductFacts
from ...publish import publish_document
from ...shop import ShopClient
from ..sessions import close_session, get_session
from .products import get_shop_client

router = APIRouter(prefix="/api", tags=["Publish"])


class PublishInput(BaseModel):
    shop:    str
    product: ProductFacts
    title:   Optional[str] = None


def _record(a: AdvertorialDB, with_content: bool = False) -> dict:
    d = {
        "id":               a.id,
        "shop":             a.shop,
        "product_id":       a.product_id,
        "product_title":    a.product_title,
        "product_handle":   a.product_handle,
        "template":         a.template,
        "angle":            a.angle,
        "title":            a.title,
        "shopify_page_id":  a.shopify_page_id,
        "shopify_page_url": a.shopify_page_url,
        "created_at":       a.created_at.isoformat() if a.created_at else None,
    }
    if with_content:
        d["content"] = a.content
        d["blocks"]  = jl(a.blocks)
    return d


@router.post("/sessions/{sid}/publish")
def api_publish(sid: str, req: PublishInput, db: Session = Depends(get_db),
                client: ShopClient = Depends(get_shop_client)):
    s = get_session(sid)
    if s.document is None:
        raise HTTPException(409, "Aucun document dans cette session")
    doc = s.document if not req.title else s.document.model_copy(update={"title": req.title})
    try:
        record = publish_document(db, client, req.shop, doc, req.product)
    except ValidationError as e:
        raise HTTPException(400, {"field": e.field, "message": str(e)})
    except PublishError as e:
        raise HTTPException(502, str(e))
    close_session(sid)
    return _record(record)


@router.get("/advertorials")
def api_advertorials(shop: Optional[str] = None, db: Session = Depends(get_db)):
    return [_record(a) for a in db_list_advertorials(db, shop)]


@router.get("/advertorials/{aid}")
def api_advertorial(aid: str, db: Session = Depends(get_db)):
    a = db_get_advertorial(db, aid)
    if not a:
        raise HTTPException(404, "Advertorial introuvable")
    return _record(a, with_content=True)


@router.delete("/advertorials/{aid}")
def api_delete_advertorial(aid: str, db: Session = Depends(get_db)):
    if not db_delete_advertorial(db, aid):
        raise HTTPException(404, "Advertorial introuvable")
    return {"ok": True}
