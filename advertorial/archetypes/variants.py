"""
Variantes de mise en page courtes : récit classique, récit avec encart UVP en colonne,
récit problème/solution, comparatif en liste. Titres à remplir ([Heading N]) pour la rédaction.
"""
from datetime import date
from typing import List, Optional

from ..blocks import BaseBlock
from ..models import Angle, ProductFacts
from .common import Archetype, BlockList, byline_date, esc, hero_image, lead, product_href, product_name
from .reasons import HEADLINES as REASONS_HEADLINES
from .story import HEADLINES as STORY_HEADLINES

SHORT_NOTICE = (
    "THIS IS AN ADVERTISEMENT AND NOT AN ACTUAL NEWS ARTICLE, BLOG, OR CONSUMER PROTECTION UPDATE. "
    "<strong>MARKETING DISCLOSURE:</strong> This website is a marketplace. The owner has a monetary "
    "connection to the products and services advertised on this site."
)

INTROS = {
    Angle.PAIN: lambda p: (
        "Many shoppers dealing with the same issue say they felt stuck: they tried popular options, spent "
        f"money, and still didn't get consistent results. Here is how <strong>{p}</strong> solves that gap."),
    Angle.DESIRE: lambda p: (
        f"People looking to upgrade their daily routine are increasingly choosing <strong>{p}</strong>: "
        "practical performance with an experience that feels premium."),
    Angle.COMPARISON: lambda p: (
        "With so many lookalike options on the market, it is hard to see which one is actually better. "
        f"We compared common alternatives with <strong>{p}</strong> in a straightforward way."),
}

SUBHEADINGS = {
    Angle.PAIN: ("[Heading 2] Why most alternatives fail to solve the real problem",
                 "[Heading 3] What to expect after consistent use"),
    Angle.DESIRE: ("[Heading 2] What makes this option feel like a real upgrade",
                   "[Heading 3] Results customers report after making the switch"),
    Angle.COMPARISON: ("[Heading 2] Side-by-side: where the differences actually matter",
                       "[Heading 3] Is it worth it for long-term value?"),
}


def _sidebar(doc: BlockList, product: ProductFacts, items: List[str]):
    """Encart UVP : liste d'arguments, offre officielle, visuel produit en colonne."""
    doc.add("feature_list", heading="Unique Value Proposition", items=items)
    doc.add("offer_box", headline="Official Offer",
            subtext="Check current pricing, availability, and guarantee terms.",
            button_text="CHECK AVAILABILITY", button_href=product_href(product),
            discount=None, urgency=None, guarantee="30-Day Money-Back Guarantee")
    sidebar = hero_image(product, "Insert product image", "Product shot for sidebar, clean product photography",
                         height="180px")
    doc.add("image", placement="sidebar", **sidebar)


def _story(product: ProductFacts, angle: Angle, today: Optional[date], sidebar: bool, problem_note: bool) -> List[BaseBlock]:
    p, hp = product_name(product), esc(product_name(product))
    h2, h3 = SUBHEADINGS[angle]
    doc = BlockList()
    doc.add("headline", text="[Heading 1] Describe the needs of users who are interested in the product.",
            size="large")
    doc.add("author_byline", author="Dr. Marcus", role="Contributor", date=byline_date(today),
            category=None, publication_name="[Publication Name]")
    if sidebar:
        _sidebar(doc, product, ["Product benefit 1", "Product benefit 2", "Product benefit 3", "Product benefit 4"])
    doc.add("image", label="Insert primary lifestyle image",
            hint="Use a contextual image that reflects the reader's problem or desired outcome", height="380px")
    if problem_note:
        doc.add("note", style="highlight",
                text=f"Problem: readers need a dependable solution they can stick with. Solution: {p} focuses "
                     "on practical daily use and measurable benefits rather than hype.")
    doc.add("text", content=lead(product, INTROS[angle](hp)))
    doc.add("headline", text=h2, size="medium")
    doc.add("text", content=(
        f"Use this section to explain the key mechanism behind <strong>{hp}</strong>. Keep the copy simple, "
        "specific, and benefit-led."))
    doc.add("headline", text=h3, size="medium")
    doc.add("text", content=(
        "Close with realistic expectations and a direct next step. Remind readers to purchase only from "
        "the official source to secure the latest pricing and support."))
    doc.add("cta", style="inline", headline="", subtext="", button_text=f"Check {p} Availability",
            button_href=product_href(product))
    doc.add("faq", heading="Frequently Asked Questions", items=[
        {"question": f"How does {p} work?",
         "answer": f"{p} is designed to address the core problem in this category through a repeatable daily use approach."},
        {"question": "How long until users typically notice results?",
         "answer": "Many users report early changes in the first 1-2 weeks, with stronger outcomes over consistent use."},
        {"question": "Is there a money-back guarantee?",
         "answer": "Yes. Orders are covered by a 30-day money-back guarantee when purchased from official channels."},
    ])
    doc.add("disclaimer", text=SHORT_NOTICE)
    return doc.blocks


def build_story_classic(product: ProductFacts, angle: Angle, today: Optional[date] = None) -> List[BaseBlock]:
    return _story(product, angle, today, sidebar=False, problem_note=False)


def build_story_uvp_sidebar(product: ProductFacts, angle: Angle, today: Optional[date] = None) -> List[BaseBlock]:
    return _story(product, angle, today, sidebar=True, problem_note=False)


def build_story_problem_solution(product: ProductFacts, angle: Angle, today: Optional[date] = None) -> List[BaseBlock]:
    return _story(product, angle, today, sidebar=True, problem_note=True)


def build_listicle_comparison(product: ProductFacts, angle: Angle, today: Optional[date] = None) -> List[BaseBlock]:
    # Même contenu pour les trois angles, seul le titre du document varie
    p, href = product_name(product), product_href(product)
    doc = BlockList()
    doc.add("headline", text=f"5 Reasons People Choose {p} Over Alternatives", size="large")
    doc.add("author_byline", author="Editorial Team", role="Product Research", date=byline_date(today),
            category=None, publication_name="[Publication Name]")
    _sidebar(doc, product, ["Reason 1 summary", "Reason 2 summary", "Reason 3 summary", "Reason 4 summary"])
    doc.add("image", **hero_image(product, "Insert hero image",
                                  "Primary lifestyle or product hero, sets the tone for the page", height="340px"))
    doc.add("text", content=lead(product, "This breakdown focuses on practical factors: quality, performance, "
                                          "long-term value, and customer trust signals."))
    for i, (label, title, body, img_label, img_hint) in enumerate([
        ("QUALITY", "Higher build quality and consistency",
         f"{p} is designed for repeatable results with fewer compromises in materials and finish.",
         "Insert quality comparison visual", "Side-by-side close-up or materials comparison"),
        ("EFFECTIVENESS", "Performance users can feel quickly",
         "Most buyers prioritize practical outcomes. Show realistic timelines and outcomes.",
         "Insert results-focused visual", "Lifestyle result photo or progress graphic"),
        ("VALUE", "Stronger long-term value per dollar",
         "Compare total cost and longevity, not just the first checkout price.",
         "Insert value chart", "Cost-per-use or long-term savings chart"),
    ]):
        doc.add("numbered_section", number=f"{i + 1:02d}", label=label, headline=title, body=body,
                image_label=img_label, image_hint=img_hint)
    doc.add("comparison", heading=f"{p} vs. Typical Alternatives", ours_label=p, theirs_label="Alternatives", rows=[
        {"feature": "Quality", "ours": "✓ Higher", "theirs": "✗ Mixed"},
        {"feature": "Consistency", "ours": "✓ Reliable", "theirs": "✗ Inconsistent"},
        {"feature": "Guarantee", "ours": "✓ 30 days", "theirs": "✗ Limited"},
        {"feature": "Overall Value", "ours": "✓ Better long-term", "theirs": "✗ Short-term only"},
    ])
    doc.add("cta", style="inline", headline="", subtext="", button_text=f"Shop {p}", button_href=href)
    doc.add("faq", heading="Common Questions", items=[
        {"question": f"Is {p} suitable for first-time buyers?",
         "answer": "Yes. The setup and use are straightforward, and support is available through official channels."},
        {"question": "Where should I buy it?",
         "answer": "Use the official product page to ensure authenticity, warranty coverage, and current promotions."},
    ])
    doc.add("disclaimer", text=SHORT_NOTICE)
    return doc.blocks


STORY_CLASSIC = Archetype(
    id="story_classic",
    name="Story (classic)",
    description="Short story layout with editable headings and a single call to action.",
    build=build_story_classic,
    headlines=STORY_HEADLINES,
)

STORY_UVP_SIDEBAR = Archetype(
    id="story_uvp_sidebar",
    name="Story (UVP sidebar)",
    description="Short story layout with a value proposition, official offer and product image in a sidebar.",
    build=build_story_uvp_sidebar,
    headlines=STORY_HEADLINES,
)

STORY_PROBLEM_SOLUTION = Archetype(
    id="story_problem_solution",
    name="Story (problem / solution)",
    description="UVP sidebar story opening with a highlighted problem and solution note.",
    build=build_story_problem_solution,
    headlines=STORY_HEADLINES,
)

LISTICLE_COMPARISON = Archetype(
    id="listicle_comparison",
    name="Listicle (comparison)",
    description="Three numbered comparison reasons, a comparison table and a sidebar offer.",
    build=build_listicle_comparison,
    headlines=REASONS_HEADLINES,
)
