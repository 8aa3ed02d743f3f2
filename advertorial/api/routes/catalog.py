"""
GET /api/catalog    — palette des blocs (label, icône, description, schéma JSON)
GET /api/archetypes — archétypes disponibles pour la génération par template
"""
from fastapi import APIRouter

from ...archetypes import list_archetypes
from ...blocks import BLOCK_CLASSES
from ...catalog import BLOCK_CATALOG

router = APIRouter(prefix="/api", tags=["Catalog"])


@router.get("/catalog")
def api_catalog():
    return [
        {**e.model_dump(), "schema": BLOCK_CLASSES[e.block_type].model_json_schema()}
        for e in BLOCK_CATALOG
    ]


@router.get("/archetypes")
def api_archetypes():
    return list_archetypes()
