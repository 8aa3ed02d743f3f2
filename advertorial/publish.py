"""
Finalisation : rendu → publication boutique → persistance, dans cet ordre.
Aucune écriture en base si la publication échoue.
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from .blocks.payload import blocks_to_payloads
from .database import db_create_advertorial, jd
from .errors import PublishError, ValidationError
from .models import AdvertorialDB, GeneratedDocument, ProductFacts
from .renderer import ThemeOptions, render_document
from .shop import ShopClient

log = logging.getLogger(__name__)


def publish_document(
    db: Session,
    client: ShopClient,
    shop: str,
    document: GeneratedDocument,
    product: ProductFacts,
    theme: Optional[ThemeOptions] = None,
) -> AdvertorialDB:
    if not document.title.strip():
        raise ValidationError("title", "Titre de page vide")
    html = render_document(document.blocks, theme or document.theme)

    try:
        page = client.create_page(document.title, html)
    except PublishError as e:
        log.error("Publication échouée (%s) : %s", product.handle, e)
        raise

    record = AdvertorialDB(
        shop=shop,
        product_id=product.id,
        product_title=product.title,
        product_handle=product.handle,
        template=document.provenance,
        angle=document.variant,
        title=document.title,
        content=html,
        blocks=jd(blocks_to_payloads(document.blocks)),
        shopify_page_id=page.id,
        shopify_page_url=page.url,
    )
    db_create_advertorial(db, record)
    log.info("Advertorial publié : %s → %s", record.id, page.url or page.id)
    return record
