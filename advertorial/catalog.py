"""
Catalogue des blocs : métadonnées de palette (label, description, icône) + constructeur par défaut.
Les métadonnées servent uniquement à l'UI ; aucune règle métier ne les lit.
"""
import uuid
from typing import Iterable, List

from pydantic import BaseModel

from .blocks import BLOCK_CLASSES, BLOCK_TYPES, BaseBlock
from .errors import UnknownBlockType


class CatalogEntry(BaseModel):
    block_type: str
    label: str
    description: str
    icon: str


BLOCK_CATALOG: List[CatalogEntry] = [
    CatalogEntry(block_type="headline",         label="Headline",         description="Large heading text",                       icon="📰"),
    CatalogEntry(block_type="text",             label="Text",             description="Narrative paragraph(s)",                   icon="📝"),
    CatalogEntry(block_type="image",            label="Image",            description="Image placeholder or uploaded image",      icon="🖼️"),
    CatalogEntry(block_type="cta",              label="Call to Action",   description="Button with headline and subtext",         icon="🔘"),
    CatalogEntry(block_type="social_proof",     label="Social Proof",     description="Star rating + review counts",              icon="⭐"),
    CatalogEntry(block_type="stats",            label="Statistics",       description="Grid of big numbers",                      icon="📊"),
    CatalogEntry(block_type="testimonials",     label="Testimonials",     description="Customer review cards",                    icon="💬"),
    CatalogEntry(block_type="numbered_section", label="Numbered Section", description="Numbered benefit block",                   icon="🔢"),
    CatalogEntry(block_type="comparison",       label="Comparison Table", description="Us vs. them comparison",                   icon="⚖️"),
    CatalogEntry(block_type="pros_cons",        label="Pros & Cons",      description="Pros and cons list",                       icon="✅"),
    CatalogEntry(block_type="timeline",         label="Timeline",         description="Step-by-step progression",                 icon="📅"),
    CatalogEntry(block_type="guarantee",        label="Guarantee",        description="Trust badges & guarantee bar",             icon="🛡️"),
    CatalogEntry(block_type="divider",          label="Divider",          description="Visual separator",                         icon="➖"),
    CatalogEntry(block_type="note",             label="Callout Note",     description="Highlighted callout box",                  icon="📌"),
    CatalogEntry(block_type="faq",              label="FAQ",              description="Frequently asked questions accordion",     icon="❓"),
    CatalogEntry(block_type="as_seen_in",       label="As Seen In",       description="Press & media logos bar",                  icon="🗞️"),
    CatalogEntry(block_type="author_byline",    label="Author Byline",    description="Author name, date & category",             icon="✍️"),
    CatalogEntry(block_type="feature_list",     label="Feature List",     description="Checkmark bullet list",                    icon="☑️"),
    CatalogEntry(block_type="offer_box",        label="Offer Box",        description="Product offer with discount & guarantee",  icon="🎁"),
    CatalogEntry(block_type="comments",         label="Comments",         description="Social proof comment thread",              icon="🗨️"),
    CatalogEntry(block_type="disclaimer",       label="Disclaimer",       description="Advertorial disclosure footer",            icon="📜"),
    CatalogEntry(block_type="urgency_banner",   label="Urgency Banner",   description="Top bar with time-sensitive message",      icon="🔴"),
    CatalogEntry(block_type="pricing_tiers",    label="Pricing Tiers",    description="3-tier pricing (Single / Bundle / Best Value)", icon="💰"),
]

_CATALOG_BY_TYPE = {e.block_type: e for e in BLOCK_CATALOG}

if set(_CATALOG_BY_TYPE) != set(BLOCK_TYPES):
    raise RuntimeError(f"Catalogue désynchronisé : {sorted(set(_CATALOG_BY_TYPE) ^ set(BLOCK_TYPES))}")


def catalog_entry(kind: str) -> CatalogEntry:
    try:
        return _CATALOG_BY_TYPE[kind]
    except KeyError:
        raise UnknownBlockType(kind) from None


def new_block_id(existing: Iterable[str] = ()) -> str:
    """Identifiant blk_<12 hex>, garanti absent de existing."""
    taken = set(existing)
    while True:
        bid = f"blk_{uuid.uuid4().hex[:12]}"
        if bid not in taken:
            return bid


def create_block(kind: str, existing: Iterable[str] = ()) -> BaseBlock:
    """Bloc neuf de type kind, contenu placeholder, id frais."""
    try:
        cls = BLOCK_CLASSES[kind]
    except KeyError:
        raise UnknownBlockType(kind) from None
    return cls(id=new_block_id(existing))
