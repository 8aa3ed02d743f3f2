"""
Générateur par archétype : (archétype, produit, angle) → GeneratedDocument.
Pur : aucun accès réseau ni persistance. L'angle ne change que le texte, jamais la liste des blocs.
"""
import logging
from datetime import date
from typing import Dict, List, Optional, Union

from ..errors import ValidationError
from ..models import Angle, GeneratedDocument, ProductFacts
from .common import Archetype
from .before_after import BEFORE_AFTER
from .editorial import EDITORIAL
from .listicle import LISTICLE
from .personal_story import PERSONAL_STORY
from .reasons import REASONS_LISTICLE
from .research_report import RESEARCH_REPORT
from .story import STORY
from .variants import LISTICLE_COMPARISON, STORY_CLASSIC, STORY_PROBLEM_SOLUTION, STORY_UVP_SIDEBAR

log = logging.getLogger(__name__)

DEFAULT_ARCHETYPE = "editorial"
DEFAULT_ANGLE = Angle.DESIRE

ARCHETYPES: Dict[str, Archetype] = {
    a.id: a for a in (
        EDITORIAL, PERSONAL_STORY, LISTICLE, RESEARCH_REPORT, BEFORE_AFTER,
        STORY, REASONS_LISTICLE, STORY_CLASSIC, STORY_UVP_SIDEBAR, STORY_PROBLEM_SOLUTION, LISTICLE_COMPARISON,
    )
}


def list_archetypes() -> List[dict]:
    return [{"id": a.id, "name": a.name, "description": a.description} for a in ARCHETYPES.values()]


def resolve_angle(angle: Union[Angle, str, None]) -> Angle:
    if isinstance(angle, Angle):
        return angle
    for a in Angle:
        if isinstance(angle, str) and angle.strip().lower() == a.value.lower():
            return a
    log.warning("Angle inconnu %r : fallback %s", angle, DEFAULT_ANGLE.value)
    return DEFAULT_ANGLE


def resolve_archetype(archetype_id: Optional[str]) -> Archetype:
    arch = ARCHETYPES.get(archetype_id or "")
    if arch is None:
        log.warning("Archétype inconnu %r : fallback %s", archetype_id, DEFAULT_ARCHETYPE)
        arch = ARCHETYPES[DEFAULT_ARCHETYPE]
    return arch


def generate_from_archetype(
    archetype_id: Optional[str],
    product: Optional[ProductFacts],
    angle: Union[Angle, str, None] = DEFAULT_ANGLE,
    today: Optional[date] = None,
) -> GeneratedDocument:
    if product is None:
        raise ValidationError("product", "Aucun produit sélectionné")
    arch = resolve_archetype(archetype_id)
    ang = resolve_angle(angle)
    return GeneratedDocument(
        title=arch.title(product, ang),
        blocks=arch.build(product, ang, today),
        provenance=arch.id,
        variant=ang.value,
    )


__all__ = [
    "ARCHETYPES", "DEFAULT_ARCHETYPE", "DEFAULT_ANGLE", "Archetype",
    "list_archetypes", "resolve_angle", "resolve_archetype", "generate_from_archetype",
]
