"""
Générateur IA : brief + produit → GeneratedDocument (asynchrone, peut échouer)

validate_brief → prompt → appel Claude → parse JSON → coercion au schéma des blocs → ids frais
Toute réponse inexploitable lève GenerationError : jamais de document vide.
"""
import json, logging, os, re
from typing import Any, Awaitable, Callable, List, Optional

from .blocks import BaseBlock, CTABlock, HeadlineBlock, OfferBoxBlock, PricingTiersBlock
from .blocks.payload import coerce_block
from .catalog import new_block_id
from .errors import GenerationError, ValidationError
from .models import AI_PROVENANCE, AIBrief, GeneratedDocument, ProductFacts, StylePreset

log = logging.getLogger(__name__)

MODEL         = os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-6")
MAX_TOKENS    = 8000
TIMEOUT       = float(os.getenv("AI_TIMEOUT_SECONDS", "120"))
MAX_AI_BLOCKS = 30   # plafond d'une réponse IA, au-delà : tronqué
MAX_IMAGES    = 6

Caller = Callable[[str, str], Awaitable[str]]


# ── Style presets ─────────────────────────────────────────────────────

STYLE_PRESETS = {
    StylePreset.CLINICAL: {
        "name": "Clinical Editorial",
        "authority": "Board-certified specialist writing for a health publication",
        "tone": "medical journal article: authoritative, evidence-based, clean. Cite specific percentages. Keep clinical language accessible.",
        "headline_pattern": '"The [Category] [Specialists] Are Recommending to Their Own Patients"',
    },
    StylePreset.LIFESTYLE: {
        "name": "Lifestyle Magazine",
        "authority": "Staff editor or wellness contributor",
        "tone": "polished, aspirational magazine feature. First-person editorial voice ('our team tested this').",
        "headline_pattern": '"The [Category] Secret [Audience] Are Obsessed With Right Now"',
    },
    StylePreset.NEWS: {
        "name": "News Exposé",
        "authority": "Investigative reporter or industry insider",
        "tone": "viral news investigation: urgent, revealing, slightly confrontational. The reader learns something others don't want them to know.",
        "headline_pattern": '"BREAKING: The [Category] Industry Has Been Hiding This From You"',
    },
    StylePreset.WARM: {
        "name": "Warm & Trustworthy",
        "authority": "Relatable customer narrator (parent, pet owner, athlete)",
        "tone": "recommendation from a trusted friend: personal, conversational, first-person ('I was skeptical at first...').",
        "headline_pattern": '"I\'ve Tried Everything for [Pain Point]. Nothing Worked Until I Found This"',
    },
}

BLOCK_SCHEMA = """
Available block types (field "type") and their fields:

urgency_banner: { type, text, style?: "breaking"|"limited"|"trending" }
author_byline: { type, author, role?, date, category?, publication_name?, view_count?, live_viewers? }
headline: { type, text, size: "large"|"medium"|"small", align?: "left"|"center", subheadline? }
text: { type, content: "HTML string, supports <strong>, <em>, <br>", variant?: "default"|"large-intro"|"pull-quote" }
image: { type, label, hint, src?, height?: "300px", caption? }
social_proof: { type, rating: "4.9", review_count: "2,847", customer_count: "50,000+" }
stats: { type, heading?, stats: [{ value, label }], layout?: "grid"|"horizontal" }
testimonials: { type, heading?, testimonials: [{ quote, name, detail }], layout?: "grid"|"stacked", show_stars?: true }
numbered_section: { type, number: "01", label, headline, body, image_label?, image_hint? }
comparison: { type, heading?, ours_label?, theirs_label?, rows: [{ feature, ours, theirs }] }
pros_cons: { type, pros: [string], cons: [string] }
timeline: { type, heading?, steps: [{ label, headline, body }] }
guarantee: { type, text, badges?: [{ icon, label }] }
faq: { type, heading?, items: [{ question, answer }] }
as_seen_in: { type, publications: [string] }
feature_list: { type, heading?, items: [string], icon? }
pricing_tiers: { type, heading?, product_handle, tiers: [{ name, original_price, sale_price, per_unit?, tag?, features: [string], highlight?: boolean }], cta_text?, guarantee? }
cta: { type, headline, subtext, button_text, style?: "primary"|"inline", variant?: "gradient"|"solid"|"outline" }
offer_box: { type, headline, subtext, button_text, discount?, guarantee?, urgency?, layout?: "stacked"|"horizontal" }
comments: { type, heading?, comments: [{ name, text, likes?, time_ago, is_verified?, is_reply? }] }
disclaimer: { type, text }
divider: { type }
note: { type, text, style: "info"|"warning"|"highlight" }
"""

STRUCTURE = """
PAGE STRUCTURE (one block per step, in this order):
1. urgency_banner: specific, time-sensitive message tied to something real
2. author_byline: author matching the preset's authority, with publication_name
3. headline (large): reads like an article headline, never an ad
4. social_proof: numbers taken from the proof provided
5. text (large-intro): second-person hook, tease the solution without naming it
6. text: pain escalation
7. text: root-cause reframe introducing the mechanism
8. image: product hero image
9. text: product reveal as the answer to the root cause
10. feature_list: 3 to 5 differentiators, each with a specific number
11. stats: 3 data points from the proof
12. testimonials (show_stars: true): 3 stories with name, timeframe and specific result
13. timeline: week-by-week expected results
14. comparison: product vs. alternatives, include a price-per-day row
15. pricing_tiers: 1 / 3 (highlight) / 6 units, real per-unit math, use the product handle
16. guarantee: 60-day money-back guarantee
17. disclaimer: results disclaimer for the product category
"""


# ── Validation ────────────────────────────────────────────────────────

def validate_brief(brief: Optional[AIBrief], product: Optional[ProductFacts]) -> None:
    """Lève ValidationError (champ précis) avant tout appel externe."""
    if product is None:
        raise ValidationError("product", "Aucun produit sélectionné")
    if brief is None or (not brief.target_customer.strip() and not brief.mechanism.strip()):
        raise ValidationError("target_customer", "Renseigner la cible ou le mécanisme")
    if brief.style_preset is None:
        raise ValidationError("style_preset", "Choisir un style (A, B, C ou D)")


# ── Prompt ────────────────────────────────────────────────────────────

def build_system_prompt(preset: StylePreset) -> str:
    p = STYLE_PRESETS[preset]
    return f"""You are an expert direct-response advertorial copywriter. You write presell pages that sit between an ad and a product page: they read like real editorial content but follow proven direct-response structure.
{BLOCK_SCHEMA}
{STRUCTURE}
COPY RULES:
- Write like a journalist, not a marketer. Specific beats generic: "47,382 women" beats "thousands of women".
- One idea per paragraph. Short paragraphs.
- The mechanism is the star: explain it with an analogy.
- Never use placeholder text like [X]% or [Product Name].
- Headline pattern: {p["headline_pattern"]}

Style preset: {p["name"]}
Tone: {p["tone"]}
Authority figure: {p["authority"]}

OUTPUT RULES:
1. Return ONLY a valid JSON array of block objects. No markdown, no explanation.
2. Generate 15 to 18 blocks following the structure above."""


def build_user_message(brief: AIBrief, product: ProductFacts) -> str:
    parts = [f"Product: {product.title}"]
    if product.description.strip():
        parts.append(f"Description: {product.description.strip()}")
    if brief.target_customer.strip():
        parts.append(f"Target customer: {brief.target_customer.strip()}")
    if brief.mechanism.strip():
        parts.append(f"Mechanism / unique angle: {brief.mechanism.strip()}")
    if brief.proof.strip():
        parts.append(f"Proof: {brief.proof.strip()}")
    parts.append(f"Style preset: {brief.style_preset.value} ({STYLE_PRESETS[brief.style_preset]['name']})")
    images = [u.strip() for u in brief.image_urls if u and u.strip()][:MAX_IMAGES]
    if images:
        parts.append("Product image URLs (use them as image src):\n" + "\n".join(images))
    if brief.instructions.strip():
        parts.append(f"Additional instructions: {brief.instructions.strip()}")
    parts.append(f"Product handle (use in pricing_tiers.product_handle): {product.handle}")
    parts.append("\nGenerate the complete advertorial. Return only a JSON array of blocks.")
    return "\n".join(parts)


# ── Appel Claude ──────────────────────────────────────────────────────

async def _anthropic(system: str, user: str) -> str:
    import anthropic
    api_key = os.getenv("ANTHROPIC_API_KEY")
    if not api_key:
        raise GenerationError("ANTHROPIC_API_KEY non configurée")
    client = anthropic.AsyncAnthropic(api_key=api_key, timeout=TIMEOUT)
    try:
        r = await client.messages.create(
            model=MODEL, max_tokens=MAX_TOKENS, system=system,
            messages=[{"role": "user", "content": user}])
    except anthropic.APITimeoutError as e:
        raise GenerationError("Le service IA n'a pas répondu à temps") from e
    except anthropic.APIStatusError as e:
        raise GenerationError(f"Service IA indisponible (HTTP {e.status_code})") from e
    except anthropic.APIError as e:
        raise GenerationError("Échec de l'appel au service IA") from e
    texts = [c.text for c in r.content if getattr(c, "type", "") == "text"]
    if not texts:
        raise GenerationError("Réponse IA sans contenu texte")
    return "".join(texts)


# ── Parse + coercion ──────────────────────────────────────────────────

_FENCE_OPEN  = re.compile(r"^```(?:json)?\s*", re.I)
_FENCE_CLOSE = re.compile(r"\s*```$")


def parse_blocks(text: Any) -> List[Any]:
    """Texte brut → liste JSON. Tout ce qui n'est pas un tableau JSON → GenerationError."""
    if not isinstance(text, str) or not text.strip():
        raise GenerationError("Réponse IA vide")
    cleaned = _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", text.strip())).strip()
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise GenerationError(f"Réponse IA non JSON ({e.msg})") from e
    if not isinstance(data, list):
        raise GenerationError("Réponse IA inattendue : un tableau de blocs était attendu")
    return data


def coerce_blocks(items: List[Any]) -> List[BaseBlock]:
    """Coercion tolérante : entrées inconnues écartées, champs manquants → défauts, ids frais."""
    blocks: List[BaseBlock] = []
    dropped = 0
    for raw in items:
        if len(blocks) >= MAX_AI_BLOCKS:
            log.info("Réponse IA tronquée à %d blocs (%d reçus)", MAX_AI_BLOCKS, len(items))
            break
        block = coerce_block(raw)
        if block is None:
            dropped += 1
            continue
        block.id = new_block_id(b.id for b in blocks)
        blocks.append(block)
    if dropped:
        log.warning("%d entrée(s) IA écartée(s) : type inconnu ou non objet", dropped)
    return blocks


def _link_to_product(blocks: List[BaseBlock], product: ProductFacts) -> None:
    href = f"/products/{product.handle}" if product.handle else "#"
    for b in blocks:
        if isinstance(b, (CTABlock, OfferBoxBlock)) and b.seed.button_href in ("", "#"):
            b.seed.button_href = href
        elif isinstance(b, PricingTiersBlock) and b.seed.product_handle in ("", "product"):
            b.seed.product_handle = product.handle


def title_from_blocks(blocks: List[BaseBlock], product: ProductFacts) -> str:
    for b in blocks:
        if isinstance(b, HeadlineBlock) and b.seed.text.strip():
            return b.seed.text.strip()
    return f"{product.title} Advertorial"


# ── Point d'entrée ────────────────────────────────────────────────────

async def generate_with_ai(brief: AIBrief, product: ProductFacts, call: Optional[Caller] = None) -> GeneratedDocument:
    validate_brief(brief, product)
    caller = call or _anthropic
    try:
        text = await caller(build_system_prompt(brief.style_preset), build_user_message(brief, product))
    except GenerationError:
        raise
    except Exception as e:
        log.error("Appel IA échoué : %s", e)
        raise GenerationError("Échec de la génération IA, réessayer") from e

    blocks = coerce_blocks(parse_blocks(text))
    if not blocks:
        raise GenerationError("Aucun bloc exploitable dans la réponse IA")
    _link_to_product(blocks, product)
    log.info("Génération IA : %d blocs (preset %s)", len(blocks), brief.style_preset.value)
    return GeneratedDocument(
        title=title_from_blocks(blocks, product),
        blocks=blocks,
        provenance=AI_PROVENANCE,
        variant=brief.style_preset.value,
    )
