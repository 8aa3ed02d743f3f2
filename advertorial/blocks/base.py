"""
Blocs de base de l'advertorial.
Structure (options visuelles) / Seed (contenu) séparés + BaseBlock discriminé par block_type.
"""
from typing import Optional
from pydantic import BaseModel


class BlockStructure(BaseModel):
    """Structure visuelle d'un bloc (taille, alignement, variante, layout)."""
    pass


class BlockSeed(BaseModel):
    """Contenu éditable d'un bloc (textes, URLs, listes ordonnées)."""
    pass


class BaseBlock(BaseModel):
    """Bloc de base — id unique dans la séquence, position = index dans la liste."""
    block_type: str
    id: str = ""
    css_class: Optional[str] = None
