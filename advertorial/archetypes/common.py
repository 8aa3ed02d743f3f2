"""Outils partagés par les archétypes : accumulateur de blocs, liens produit, dates, images."""
from dataclasses import dataclass
from datetime import date
from html import escape
from typing import Callable, Dict, List, Optional

from ..blocks import BaseBlock
from ..blocks.payload import make_block
from ..catalog import new_block_id
from ..models import Angle, ProductFacts

DISCLAIMER = (
    "<strong>ADVERTISEMENT.</strong> This is an advertorial and not an actual news article, blog, "
    "or consumer protection update. Individual results may vary. Testimonials reflect the experiences "
    "of individual customers and are not a guarantee of future results."
)

# Mention longue des formats récit / raisons
ADVERTISEMENT_NOTICE = (
    "THIS IS AN ADVERTISEMENT AND NOT AN ACTUAL NEWS ARTICLE, BLOG, OR CONSUMER PROTECTION UPDATE. "
    "THE RESULTS PORTRAYED IN THE STORY AND IN THE COMMENTS ARE ILLUSTRATIVE, AND MAY NOT BE THE RESULTS "
    "THAT YOU ACHIEVE WITH THESE PRODUCTS. <strong>MARKETING DISCLOSURE:</strong> This website is a "
    "marketplace. The owner has a monetary connection to the products and services advertised on this site."
)


@dataclass(frozen=True)
class Archetype:
    id: str
    name: str
    description: str
    build: Callable[[ProductFacts, Angle, Optional[date]], List[BaseBlock]]
    headlines: Dict[Angle, Callable[[str], str]]

    def title(self, product: ProductFacts, angle: Angle) -> str:
        return self.headlines[angle](product_name(product))


class BlockList:
    """Accumulateur : construction stricte (make_block) + ids frais uniques dans la séquence."""

    def __init__(self):
        self.blocks: List[BaseBlock] = []

    def add(self, kind: str, **fields) -> "BlockList":
        bid = new_block_id(b.id for b in self.blocks)
        self.blocks.append(make_block(kind, block_id=bid, **fields))
        return self


def esc(text: str) -> str:
    return escape(text, quote=True)


def product_name(product: ProductFacts) -> str:
    return product.title.strip() or "Our Product"


def product_href(product: ProductFacts) -> str:
    return f"/products/{product.handle.strip()}" if product.handle.strip() else "#"


def byline_date(today: Optional[date]) -> str:
    """'March 7, 2026' — placeholder conservé sans date fournie (génération pure)."""
    if today is None:
        return "[Publication Date]"
    return f"{today:%B} {today.day}, {today.year}"


def hero_image(product: ProductFacts, label: str, hint: str, height: str = "400px") -> dict:
    """Champs du bloc image héro : src produit si dispo, sinon placeholder label/hint."""
    fields = {"label": label, "hint": hint, "height": height}
    if product.image_url:
        fields["src"] = product.image_url
        fields["caption"] = product_name(product)
    return fields


def lead(product: ProductFacts, intro: str, fallback_tail: str = "") -> str:
    """Paragraphe d'ouverture (HTML) : description produit échappée puis intro d'angle."""
    desc = product.description.strip()
    if desc:
        return f"{esc(desc)}<br><br>{intro}"
    return f"{intro}<br><br>{fallback_tail}" if fallback_tail else intro
