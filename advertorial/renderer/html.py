"""
Renderer HTML : séquence de blocs → markup de page boutique.

  render_block(block, theme)     → fragment (aperçu éditeur, bloc par bloc)
  render_body(blocks, theme)     → fragments joints par "\\n", dans l'ordre
  wrap_document(body, theme)     → shell <style> + <div class="adv-content">
  render_document(blocks, theme) == wrap_document(render_body(blocks, theme), theme)

Pur : aucune I/O, aucune mutation, aucun accès horloge/aléatoire.
Tous les champs texte sont échappés ; seuls TextSeed.content et DisclaimerSeed.text
(HTML supporté) passent tels quels.
"""
import re
from html import escape
from typing import Callable, Dict, Iterable, Optional, Union

from ..blocks import (
    BLOCK_TYPES, BaseBlock,
    HeadlineBlock, TextBlock, ImageBlock, CTABlock, SocialProofBlock, StatsBlock,
    TestimonialsBlock, NumberedSectionBlock, ComparisonBlock, ProsConsBlock,
    TimelineBlock, GuaranteeBlock, DividerBlock, NoteBlock, FAQBlock, AsSeenInBlock,
    AuthorBylineBlock, FeatureListBlock, OfferBoxBlock, CommentsBlock, DisclaimerBlock,
    UrgencyBannerBlock, PricingTiersBlock,
)
from ..blocks.media import CSS_HEIGHT_PATTERN, DEFAULT_IMAGE_HEIGHT
from ..errors import UnknownBlockType
from .theme import ResolvedTheme, ThemeOptions, css_variables, resolve_theme

ThemeLike = Union[ThemeOptions, ResolvedTheme, None]

_SAFE_SCHEMES = ("http://", "https://", "mailto:", "/", "#")
_HEIGHT_RE = re.compile(CSS_HEIGHT_PATTERN)

STAR_SVG = ('<svg class="adv-star" width="16" height="16" viewBox="0 0 16 16" fill="#f59e0b" aria-hidden="true">'
            '<path d="M8 1l1.85 3.75L14 5.5l-3 2.92.71 4.12L8 10.5l-3.71 1.95L5 8.42 2 5.5l4.15-.75L8 1z"/></svg>')
STARS_HTML = STAR_SVG * 5


def _e(text) -> str:
    return escape(str(text or ""), quote=True)


def _url(url: Optional[str]) -> str:
    """URL échappée ; schémas hors liste blanche (javascript:, data:, ...) → '#'."""
    u = (url or "").strip()
    if not u or not u.lower().startswith(_SAFE_SCHEMES) or u.startswith("//"):
        return "#"
    return _e(u)


def _height(value: Optional[str]) -> str:
    """Hauteur CSS d'une seule dimension, sinon la hauteur par défaut."""
    v = (value or "").strip()
    return v if _HEIGHT_RE.fullmatch(v) else DEFAULT_IMAGE_HEIGHT


def _classes(b: BaseBlock, *classes: str) -> str:
    out = list(classes)
    if b.css_class:
        out.append(_e(b.css_class))
    return " ".join(out)


# ── Texte ───────────────────────────────────────────────────────────────────

def render_headline(b: HeadlineBlock, t: ResolvedTheme) -> str:
    s, d = b.structure, b.seed
    tag = {"large": "h1", "medium": "h2", "small": "h3"}[s.size]
    sub = f'\n  <p class="adv-headline__sub">{_e(d.subheadline)}</p>' if d.subheadline else ""
    return (f'<div class="{_classes(b, "adv-headline", f"adv-headline--{s.size}", f"adv-align-{s.align}")}">\n'
            f'  <{tag} class="adv-headline__text">{_e(d.text)}</{tag}>{sub}\n</div>')


def render_text(b: TextBlock, t: ResolvedTheme) -> str:
    s, d = b.structure, b.seed
    if s.variant == "pull-quote":
        return f'<blockquote class="{_classes(b, "adv-text", "adv-text--pull-quote")}">{d.content}</blockquote>'
    return f'<div class="{_classes(b, "adv-text", f"adv-text--{s.variant}")}"><p>{d.content}</p></div>'


def render_note(b: NoteBlock, t: ResolvedTheme) -> str:
    icon = {"info": "ℹ️", "warning": "⚠️", "highlight": "💡"}[b.structure.style]
    return (f'<div class="{_classes(b, "adv-note", f"adv-note--{b.structure.style}")}">'
            f'<span class="adv-note__icon" aria-hidden="true">{icon}</span>'
            f'<p class="adv-note__text">{_e(b.seed.text)}</p></div>')


def render_disclaimer(b: DisclaimerBlock, t: ResolvedTheme) -> str:
    return f'<div class="{_classes(b, "adv-disclaimer")}"><p>{b.seed.text}</p></div>'


def render_divider(b: DividerBlock, t: ResolvedTheme) -> str:
    return f'<hr class="{_classes(b, "adv-divider")}">'


def render_urgency_banner(b: UrgencyBannerBlock, t: ResolvedTheme) -> str:
    style = b.structure.style
    icon = {"breaking": "🔴", "limited": "⏳", "trending": "🔥"}[style]
    return (f'<div class="{_classes(b, "adv-urgency", f"adv-urgency--{style}")}" role="status">'
            f'<span aria-hidden="true">{icon}</span> {_e(b.seed.text)}</div>')


# ── Média / éditorial ───────────────────────────────────────────────────────

def render_image(b: ImageBlock, t: ResolvedTheme) -> str:
    s, d = b.structure, b.seed
    classes = ["adv-image", f"adv-image--{s.placement}"]
    if s.rounded:
        classes.append("adv-image--rounded")
    caption = f'\n  <figcaption class="adv-image__caption">{_e(d.caption)}</figcaption>' if d.caption else ""
    if d.src and _url(d.src) != "#":
        media = f'<img class="adv-image__img" src="{_url(d.src)}" alt="{_e(d.caption or d.label)}" loading="lazy">'
    else:
        media = (f'<div class="adv-img-placeholder" style="height:{_height(s.height)}">'
                 f'<strong>{_e(d.label)}</strong><span>{_e(d.hint)}</span></div>')
    return f'<figure class="{_classes(b, *classes)}">\n  {media}{caption}\n</figure>'


def render_as_seen_in(b: AsSeenInBlock, t: ResolvedTheme) -> str:
    pubs = "".join(f'<span class="adv-press__logo">{_e(p)}</span>' for p in b.seed.publications)
    return (f'<div class="{_classes(b, "adv-press")}">'
            f'<span class="adv-press__label">As seen in</span>{pubs}</div>')


def render_author_byline(b: AuthorBylineBlock, t: ResolvedTheme) -> str:
    d = b.seed
    top = ""
    if d.publication_name or d.category:
        parts = [f'<span class="adv-byline__pub">{_e(d.publication_name)}</span>' if d.publication_name else "",
                 f'<span class="adv-byline__cat">{_e(d.category)}</span>' if d.category else ""]
        top = f'\n  <div class="adv-byline__top">{"".join(parts)}</div>'
    role = f' <span class="adv-byline__role">· {_e(d.role)}</span>' if d.role else ""
    meta = [f'<span>{_e(d.date)}</span>']
    if d.view_count:
        meta.append(f'<span>👁 {_e(d.view_count)} views</span>')
    if d.live_viewers:
        meta.append(f'<span class="adv-byline__live">● {_e(d.live_viewers)} reading now</span>')
    return (f'<div class="{_classes(b, "adv-byline")}">{top}\n'
            f'  <div class="adv-byline__author">By <strong>{_e(d.author)}</strong>{role}</div>\n'
            f'  <div class="adv-byline__meta">{" ".join(meta)}</div>\n</div>')


# ── Preuve sociale ──────────────────────────────────────────────────────────

def render_social_proof(b: SocialProofBlock, t: ResolvedTheme) -> str:
    d = b.seed
    return (f'<div class="{_classes(b, "adv-social-proof")}">'
            f'<span class="adv-social-proof__stars">{STARS_HTML}</span>'
            f'<strong>{_e(d.rating)}/5</strong>'
            f'<span>{_e(d.review_count)} reviews</span>'
            f'<span>{_e(d.customer_count)} happy customers</span></div>')


def render_stats(b: StatsBlock, t: ResolvedTheme) -> str:
    s, d = b.structure, b.seed
    heading = f'\n  <h3 class="adv-stats__heading">{_e(d.heading)}</h3>' if d.heading else ""
    items = "".join(
        f'<div class="adv-stats__item"><div class="adv-stats__value">{_e(st.value)}</div>'
        f'<div class="adv-stats__label">{_e(st.label)}</div></div>'
        for st in d.stats
    )
    return (f'<div class="{_classes(b, "adv-stats", f"adv-stats--{s.layout}")}">{heading}\n'
            f'  <div class="adv-stats-grid">{items}</div>\n</div>')


def render_testimonials(b: TestimonialsBlock, t: ResolvedTheme) -> str:
    s, d = b.structure, b.seed
    heading = f'\n  <h3 class="adv-testimonials__heading">{_e(d.heading)}</h3>' if d.heading else ""
    stars = f'<div class="adv-testimonial__stars">{STARS_HTML}</div>' if s.show_stars else ""
    cards = "".join(
        f'<div class="adv-testimonial">{stars}'
        f'<p class="adv-testimonial__quote">&ldquo;{_e(item.quote)}&rdquo;</p>'
        f'<div class="adv-testimonial__name">{_e(item.name)}</div>'
        f'<div class="adv-testimonial__detail">✓ {_e(item.detail)}</div></div>'
        for item in d.testimonials
    )
    grid = "adv-testimonials-grid" if s.layout == "grid" else "adv-testimonials-stack"
    return (f'<div class="{_classes(b, "adv-testimonials", f"adv-testimonials--{s.layout}")}">{heading}\n'
            f'  <div class="{grid}">{cards}</div>\n</div>')


def render_comments(b: CommentsBlock, t: ResolvedTheme) -> str:
    d = b.seed
    heading = f'\n  <h3 class="adv-comments__heading">{_e(d.heading)}</h3>' if d.heading else ""
    items = []
    for c in d.comments:
        classes = "adv-comment adv-comment--reply" if c.is_reply else "adv-comment"
        verified = ' <span class="adv-comment__verified">✓ Verified</span>' if c.is_verified else ""
        likes = f'<span class="adv-comment__likes">👍 {_e(c.likes)}</span>' if c.likes else ""
        items.append(
            f'<div class="{classes}"><div class="adv-comment__head">'
            f'<strong>{_e(c.name)}</strong>{verified}</div>'
            f'<p class="adv-comment__text">{_e(c.text)}</p>'
            f'<div class="adv-comment__meta"><span>{_e(c.time_ago)}</span>{likes}</div></div>'
        )
    return f'<div class="{_classes(b, "adv-comments")}">{heading}\n  {"".join(items)}\n</div>'


def render_guarantee(b: GuaranteeBlock, t: ResolvedTheme) -> str:
    d = b.seed
    badges = "".join(
        f'<div class="adv-guarantee__badge"><span aria-hidden="true">{_e(badge.icon)}</span>'
        f'<span>{_e(badge.label)}</span></div>'
        for badge in d.badges
    )
    badges_html = f'\n  <div class="adv-guarantee-badges">{badges}</div>' if badges else ""
    return (f'<div class="{_classes(b, "adv-guarantee")}">{badges_html}\n'
            f'  <p class="adv-guarantee__text">{_e(d.text)}</p>\n</div>')


# ── Sections ────────────────────────────────────────────────────────────────

def render_numbered_section(b: NumberedSectionBlock, t: ResolvedTheme) -> str:
    d = b.seed
    image = ""
    if d.image_label:
        image = (f'\n  <div class="adv-img-placeholder"><strong>{_e(d.image_label)}</strong>'
                 f'<span>{_e(d.image_hint)}</span></div>')
    return (f'<div class="{_classes(b, "adv-numbered-section")}">\n'
            f'  <div class="adv-numbered__top"><span class="adv-numbered__number">{_e(d.number)}</span>'
            f'<span class="adv-numbered__label">{_e(d.label)}</span></div>\n'
            f'  <h2 class="adv-numbered-headline">{_e(d.headline)}</h2>{image}\n'
            f'  <p class="adv-numbered__body">{_e(d.body)}</p>\n</div>')


def render_feature_list(b: FeatureListBlock, t: ResolvedTheme) -> str:
    s, d = b.structure, b.seed
    heading = f'\n  <h3 class="adv-features__heading">{_e(d.heading)}</h3>' if d.heading else ""
    items = "".join(
        f'<li><span class="adv-features__icon" aria-hidden="true">{_e(s.icon)}</span>{_e(item)}</li>'
        for item in d.items
    )
    return f'<div class="{_classes(b, "adv-features")}">{heading}\n  <ul class="adv-features__list">{items}</ul>\n</div>'


def render_comparison(b: ComparisonBlock, t: ResolvedTheme) -> str:
    d = b.seed
    heading = f'\n  <h3 class="adv-comparison__heading">{_e(d.heading)}</h3>' if d.heading else ""
    rows = "".join(
        f'<tr><td>{_e(r.feature)}</td><td class="adv-comparison__ours">{_e(r.ours)}</td>'
        f'<td class="adv-comparison__theirs">{_e(r.theirs)}</td></tr>'
        for r in d.rows
    )
    return (f'<div class="{_classes(b, "adv-comparison")}">{heading}\n'
            f'  <table class="adv-comparison__table"><thead><tr><th></th>'
            f'<th class="adv-comparison__ours">{_e(d.ours_label)}</th><th>{_e(d.theirs_label)}</th></tr></thead>'
            f'<tbody>{rows}</tbody></table>\n</div>')


def render_pros_cons(b: ProsConsBlock, t: ResolvedTheme) -> str:
    d = b.seed
    pros = "".join(f"<li>✓ {_e(p)}</li>" for p in d.pros)
    cons = "".join(f"<li>✗ {_e(c)}</li>" for c in d.cons)
    return (f'<div class="{_classes(b, "adv-proscons", "adv-proscons-grid")}">\n'
            f'  <div class="adv-proscons__col adv-proscons__col--pros"><h4>Pros</h4><ul>{pros}</ul></div>\n'
            f'  <div class="adv-proscons__col adv-proscons__col--cons"><h4>Cons</h4><ul>{cons}</ul></div>\n</div>')


def render_timeline(b: TimelineBlock, t: ResolvedTheme) -> str:
    d = b.seed
    heading = f'\n  <h3 class="adv-timeline__heading">{_e(d.heading)}</h3>' if d.heading else ""
    steps = "".join(
        f'<div class="adv-timeline__step"><div class="adv-timeline__label">{_e(step.label)}</div>'
        f'<div class="adv-timeline__headline">{_e(step.headline)}</div>'
        f'<p class="adv-timeline__body">{_e(step.body)}</p></div>'
        for step in d.steps
    )
    return (f'<div class="{_classes(b, "adv-timeline-wrapper")}">{heading}\n'
            f'  <div class="adv-timeline-grid">{steps}</div>\n</div>')


def render_faq(b: FAQBlock, t: ResolvedTheme) -> str:
    d = b.seed
    heading = f'\n  <h3 class="adv-faq__heading">{_e(d.heading)}</h3>' if d.heading else ""
    items = "".join(
        f'<details class="adv-faq__item"><summary><span>{_e(item.question)}</span>'
        f'<span aria-hidden="true">+</span></summary>'
        f'<div class="adv-faq__answer">{_e(item.answer)}</div></details>'
        for item in d.items
    )
    return f'<div class="{_classes(b, "adv-faq")}">{heading}\n  {items}\n</div>'


# ── Conversion ──────────────────────────────────────────────────────────────

def render_cta(b: CTABlock, t: ResolvedTheme) -> str:
    s, d = b.structure, b.seed
    button = (f'<a class="adv-btn adv-btn--{s.variant} adv-offer-btn" href="{_url(d.button_href)}">'
              f'{_e(d.button_text)} →</a>')
    if s.style == "inline":
        return (f'<div class="{_classes(b, "adv-cta", "adv-cta-inline")}">'
                f'<p><strong>{_e(d.headline)}</strong> {_e(d.subtext)}</p>{button}</div>')
    return (f'<div class="{_classes(b, "adv-cta", "adv-cta-primary", f"adv-cta--{s.variant}")}">\n'
            f'  <h2 class="adv-cta__headline">{_e(d.headline)}</h2>\n'
            f'  <p class="adv-cta__subtext">{_e(d.subtext)}</p>\n  {button}\n</div>')


def render_offer_box(b: OfferBoxBlock, t: ResolvedTheme) -> str:
    s, d = b.structure, b.seed
    discount = f'<div class="adv-offer__discount">{_e(d.discount)}</div>' if d.discount else ""
    guarantee = f'<div class="adv-offer__guarantee">🛡️ {_e(d.guarantee)}</div>' if d.guarantee else ""
    urgency = f'<div class="adv-offer__urgency">⏳ {_e(d.urgency)}</div>' if d.urgency else ""
    return (f'<div class="{_classes(b, "adv-offer-box", f"adv-offer-box--{s.layout}")}">\n'
            f'  <div class="adv-offer__body">{discount}'
            f'<h2 class="adv-offer__headline">{_e(d.headline)}</h2>'
            f'<p class="adv-offer__subtext">{_e(d.subtext)}</p></div>\n'
            f'  <div class="adv-offer__action"><a class="adv-btn adv-btn--gradient adv-offer-btn" '
            f'href="{_url(d.button_href)}">{_e(d.button_text)} →</a>{guarantee}{urgency}</div>\n</div>')


def render_pricing_tiers(b: PricingTiersBlock, t: ResolvedTheme) -> str:
    d = b.seed
    heading = f'\n  <h2 class="adv-pricing__heading">{_e(d.heading)}</h2>' if d.heading else ""
    href = _url(f"/products/{d.product_handle}") if d.product_handle else "#"
    cards = []
    for tier in d.tiers:
        classes = "adv-pricing__tier adv-pricing__tier--highlight" if tier.highlight else "adv-pricing__tier"
        tag = f'<div class="adv-pricing__tag">{_e(tier.tag)}</div>' if tier.tag else ""
        per_unit = f'<div class="adv-pricing__unit">{_e(tier.per_unit)}</div>' if tier.per_unit else ""
        features = "".join(f"<li>✓ {_e(f)}</li>" for f in tier.features)
        cards.append(
            f'<div class="{classes}">{tag}<div class="adv-pricing__name">{_e(tier.name)}</div>'
            f'<div class="adv-pricing__prices"><s>{_e(tier.original_price)}</s> '
            f'<strong>{_e(tier.sale_price)}</strong></div>{per_unit}'
            f'<ul class="adv-pricing__features">{features}</ul>'
            f'<a class="adv-btn adv-btn--gradient adv-offer-btn" href="{href}">{_e(d.cta_text)}</a></div>'
        )
    guarantee = f'\n  <p class="adv-pricing__guarantee">🛡️ {_e(d.guarantee)}</p>' if d.guarantee else ""
    return (f'<div class="{_classes(b, "adv-pricing")}">{heading}\n'
            f'  <div class="adv-pricing-grid">{"".join(cards)}</div>{guarantee}\n</div>')


# ── Dispatch ────────────────────────────────────────────────────────────────

_RENDERERS: Dict[str, Callable[[BaseBlock, ResolvedTheme], str]] = {
    "headline":         render_headline,
    "text":             render_text,
    "image":            render_image,
    "cta":              render_cta,
    "social_proof":     render_social_proof,
    "stats":            render_stats,
    "testimonials":     render_testimonials,
    "numbered_section": render_numbered_section,
    "comparison":       render_comparison,
    "pros_cons":        render_pros_cons,
    "timeline":         render_timeline,
    "guarantee":        render_guarantee,
    "divider":          render_divider,
    "note":             render_note,
    "faq":              render_faq,
    "as_seen_in":       render_as_seen_in,
    "author_byline":    render_author_byline,
    "feature_list":     render_feature_list,
    "offer_box":        render_offer_box,
    "comments":         render_comments,
    "disclaimer":       render_disclaimer,
    "urgency_banner":   render_urgency_banner,
    "pricing_tiers":    render_pricing_tiers,
}

if set(_RENDERERS) != set(BLOCK_TYPES):
    raise RuntimeError(f"Renderer désynchronisé : {sorted(set(_RENDERERS) ^ set(BLOCK_TYPES))}")


def _resolved(theme: ThemeLike) -> ResolvedTheme:
    return theme if isinstance(theme, ResolvedTheme) else resolve_theme(theme)


def render_block(block: BaseBlock, theme: ThemeLike = None) -> str:
    """Fragment HTML d'un seul bloc. Type inconnu → UnknownBlockType."""
    fn = _RENDERERS.get(getattr(block, "block_type", None))
    if fn is None:
        raise UnknownBlockType(getattr(block, "block_type", None))
    return fn(block, _resolved(theme))


def render_body(blocks: Iterable[BaseBlock], theme: ThemeLike = None) -> str:
    t = _resolved(theme)
    return "\n".join(render_block(b, t) for b in blocks)


# ── Shell ───────────────────────────────────────────────────────────────────

_BASE_CSS = """
.page-title,.article-template__title,h1.page-title,.main-page-title{display:none!important;}
.adv-content{box-sizing:border-box;width:100%;max-width:800px;margin:0 auto;padding:32px 24px;
  font-family:var(--adv-font-body);font-size:var(--adv-size-body);line-height:1.75;color:var(--adv-text);
  overflow-wrap:break-word;}
.adv-content *,.adv-content *::before,.adv-content *::after{box-sizing:border-box;}
.adv-content img{max-width:100%;height:auto;}
.adv-content h1,.adv-content h2,.adv-content h3{font-family:var(--adv-font-heading);color:#111827;line-height:1.2;}
.adv-content h1{font-size:var(--adv-size-h1);}
.adv-content h2{font-size:var(--adv-size-h2);}
.adv-content h3{font-size:var(--adv-size-h3);}
.adv-content mark{background:#fef08a;color:inherit;padding:2px 5px;border-radius:3px;}
.adv-align-center{text-align:center;}
.adv-headline__sub{color:var(--adv-text-light);font-size:1.15em;}
.adv-text--large-intro p{font-size:1.2em;}
.adv-text--pull-quote{border-left:4px solid var(--adv-accent);margin:32px 0;padding:8px 24px;font-size:1.3em;font-style:italic;}
.adv-image{margin:28px 0;}
.adv-image--rounded img,.adv-image--rounded .adv-img-placeholder{border-radius:12px;}
.adv-image--sidebar{float:right;width:40%;margin:0 0 16px 24px;}
.adv-img-placeholder{display:flex;flex-direction:column;align-items:center;justify-content:center;min-height:120px;
  background:var(--adv-accent-soft);border:2px dashed var(--adv-accent-line);color:var(--adv-text-light);text-align:center;padding:16px;}
.adv-image__caption{font-size:0.85em;color:var(--adv-text-light);margin-top:8px;}
.adv-btn{display:inline-block;padding:16px 36px;border-radius:10px;font-weight:700;text-decoration:none;}
.adv-btn--gradient{background:linear-gradient(135deg,var(--adv-accent),rgba(var(--adv-accent-rgb),0.8));color:#fff;}
.adv-btn--solid{background:var(--adv-accent);color:#fff;}
.adv-btn--outline{border:2px solid var(--adv-accent);color:var(--adv-accent);}
.adv-offer-btn{transition:transform 0.15s ease;}
.adv-offer-btn:hover{transform:translateY(-1px);}
.adv-cta-primary{text-align:center;margin:48px 0;padding:48px 32px;border-radius:16px;background:var(--adv-accent-soft);}
.adv-cta-inline{display:flex;align-items:center;justify-content:space-between;gap:16px;margin:24px 0;}
.adv-social-proof{display:flex;flex-wrap:wrap;align-items:center;gap:16px;padding:16px;border-radius:12px;background:var(--adv-bg-subtle);}
.adv-stats-grid{display:grid;grid-template-columns:repeat(auto-fit,minmax(150px,1fr));gap:20px;margin:24px 0;}
.adv-stats--horizontal .adv-stats-grid{display:flex;flex-wrap:wrap;}
.adv-stats__value{font-size:3rem;font-weight:800;color:var(--adv-accent);}
.adv-testimonials-grid{display:grid;grid-template-columns:repeat(2,1fr);gap:20px;}
.adv-testimonial{padding:24px;border:1px solid var(--adv-border);border-radius:12px;background:#fff;margin-bottom:16px;}
.adv-testimonial__name{font-weight:700;}
.adv-testimonial__detail{font-size:0.85em;color:#059669;}
.adv-numbered-section{margin-bottom:48px;padding-bottom:40px;border-bottom:1px solid var(--adv-border);}
.adv-numbered__number{font-size:2.5em;font-weight:800;color:var(--adv-accent);margin-right:12px;}
.adv-numbered__label{letter-spacing:0.12em;font-size:0.8em;color:var(--adv-text-light);}
.adv-comparison__table{width:100%;border-collapse:collapse;}
.adv-comparison__table th,.adv-comparison__table td{padding:14px;border-bottom:1px solid var(--adv-border);}
.adv-comparison__ours{background:var(--adv-accent-soft);font-weight:600;}
.adv-proscons-grid{display:grid;grid-template-columns:1fr 1fr;gap:20px;margin:24px 0;}
.adv-proscons__col ul{list-style:none;padding:0;}
.adv-proscons__col--pros{background:#f0fdf4;padding:20px;border-radius:12px;}
.adv-proscons__col--cons{background:#fef2f2;padding:20px;border-radius:12px;}
.adv-timeline-wrapper{margin:40px 0;padding:32px;border-radius:16px;background:var(--adv-bg-subtle);}
.adv-timeline-grid{display:grid;grid-template-columns:repeat(auto-fit,minmax(160px,1fr));gap:20px;}
.adv-timeline__label{font-size:0.8em;font-weight:700;color:var(--adv-accent);text-transform:uppercase;}
.adv-guarantee-badges{display:flex;flex-wrap:wrap;justify-content:center;gap:32px;padding:24px;}
.adv-guarantee__badge{display:flex;flex-direction:column;align-items:center;gap:6px;font-weight:600;}
.adv-guarantee__text{text-align:center;color:var(--adv-text-light);}
.adv-divider{border:none;border-top:1px solid var(--adv-border);margin:40px 0;}
.adv-note{display:flex;gap:12px;padding:18px 22px;border-radius:10px;margin:24px 0;}
.adv-note--info{background:#eff6ff;border-left:4px solid #3b82f6;}
.adv-note--warning{background:#fffbeb;border-left:4px solid #f59e0b;}
.adv-note--highlight{background:var(--adv-accent-soft);border-left:4px solid var(--adv-accent);}
.adv-faq__item{border:1px solid var(--adv-border);border-radius:10px;margin-bottom:12px;}
.adv-faq__item summary{display:flex;justify-content:space-between;padding:18px 22px;cursor:pointer;font-weight:600;}
.adv-faq__answer{padding:0 22px 18px;}
.adv-press{display:flex;flex-wrap:wrap;align-items:center;justify-content:center;gap:28px;padding:20px 0;opacity:0.75;}
.adv-press__label{font-size:0.75em;letter-spacing:0.12em;text-transform:uppercase;}
.adv-press__logo{font-family:Georgia,serif;font-size:1.3em;font-weight:700;}
.adv-byline{margin:16px 0 28px;font-size:0.9em;color:var(--adv-text-light);}
.adv-byline__top{display:flex;gap:12px;text-transform:uppercase;font-weight:700;color:var(--adv-accent);}
.adv-byline__live{color:#dc2626;}
.adv-features__list{list-style:none;padding:0;}
.adv-features__icon{color:var(--adv-accent);font-weight:700;margin-right:10px;}
.adv-offer-box{display:flex;gap:24px;padding:36px 32px;margin:48px 0;border:2px solid var(--adv-accent);border-radius:16px;}
.adv-offer-box--stacked{flex-direction:column;text-align:center;}
.adv-offer__discount{display:inline-block;padding:4px 12px;border-radius:999px;background:#dc2626;color:#fff;font-weight:800;}
.adv-offer__guarantee,.adv-offer__urgency{font-size:0.85em;margin-top:10px;}
.adv-comment{padding:16px 0;border-bottom:1px solid var(--adv-border);}
.adv-comment--reply{margin-left:40px;}
.adv-comment__verified{color:#059669;font-size:0.8em;}
.adv-comment__meta{display:flex;gap:16px;font-size:0.8em;color:var(--adv-text-light);}
.adv-disclaimer{margin-top:48px;padding-top:20px;border-top:1px solid var(--adv-border);font-size:0.75em;color:#9ca3af;}
.adv-urgency{padding:12px 16px;border-radius:8px;text-align:center;font-weight:700;margin-bottom:20px;}
.adv-urgency--breaking{background:#dc2626;color:#fff;}
.adv-urgency--limited{background:#fffbeb;color:#92400e;}
.adv-urgency--trending{background:var(--adv-accent);color:#fff;}
.adv-pricing-grid{display:grid;grid-template-columns:repeat(3,1fr);gap:16px;}
.adv-pricing__tier{position:relative;padding:28px 20px;border:1px solid var(--adv-border);border-radius:14px;text-align:center;}
.adv-pricing__tier--highlight{border:2px solid var(--adv-accent);box-shadow:0 12px 28px rgba(var(--adv-accent-rgb),0.18);}
.adv-pricing__tag{font-size:0.7em;font-weight:800;letter-spacing:0.08em;color:var(--adv-accent);}
.adv-pricing__features{list-style:none;padding:0;font-size:0.9em;}
@media(max-width:640px){
  .adv-content{padding:20px 16px;}
  .adv-testimonials-grid,.adv-proscons-grid,.adv-pricing-grid{grid-template-columns:1fr;}
  .adv-stats-grid{grid-template-columns:repeat(2,1fr);}
  .adv-cta-primary{padding:32px 18px;margin:32px 0;}
  .adv-offer-box{padding:24px 18px;flex-direction:column;text-align:center;}
  .adv-offer-btn{width:100%;}
  .adv-image--sidebar{float:none;width:100%;margin:16px 0;}
}
"""


def document_css(theme: ThemeLike = None) -> str:
    return css_variables(_resolved(theme)) + "\n" + _BASE_CSS.strip()


def wrap_document(body: str, theme: ThemeLike = None) -> str:
    """Shell de page boutique autour d'un body déjà rendu."""
    return f"""<style>
{document_css(theme)}
</style>
<div class="adv-content">
{body}
</div>"""


def render_document(blocks: Iterable[BaseBlock], theme: ThemeLike = None) -> str:
    t = _resolved(theme)
    return wrap_document(render_body(blocks, t), t)
