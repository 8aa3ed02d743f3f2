"""Archétype "listicle" : 5 raisons numérotées."""
from datetime import date
from typing import List, Optional

from ..blocks import BaseBlock
from ..models import Angle, ProductFacts
from .common import DISCLAIMER, Archetype, BlockList, byline_date, esc, hero_image, lead, product_href, product_name

HEADLINES = {
    Angle.PAIN:       lambda p: f"5 Reasons {p} Is Finally Solving the Problem Others Ignore",
    Angle.DESIRE:     lambda p: f"5 Reasons Everyone Is Switching to {p} Right Now",
    Angle.COMPARISON: lambda p: f"5 Reasons {p} Beats Every Alternative on the Market",
}

INTROS = {
    Angle.PAIN: lambda p: (
        "If you've been searching for something that actually works, you know how frustrating it is. "
        f"After thousands of customer experiences, here's why <strong>{p}</strong> consistently rises to the top."),
    Angle.DESIRE: lambda p: (
        "The best products don't just solve problems, they improve your life in ways you didn't expect. "
        f"<strong>{p}</strong> has earned a loyal following by doing exactly that."),
    Angle.COMPARISON: lambda p: (
        f"We put <strong>{p}</strong> head-to-head against the market's leading alternatives. "
        "Here's exactly how it stacks up."),
}

REASONS = {
    Angle.PAIN: [
        ("It Targets the Root Cause", "Instead of masking symptoms, it addresses why the problem keeps coming back."),
        ("Results You Can Feel Fast", "Most customers notice a difference within the first week."),
        ("No Complicated Routine", "It fits into your day in minutes. No learning curve."),
        ("Built to Last", "Premium materials mean you stop re-buying replacements."),
        ("Zero Risk to Try", "A full money-back guarantee stands behind every order."),
    ],
    Angle.DESIRE: [
        ("It Just Feels Premium", "From unboxing to daily use, the quality is obvious."),
        ("People Notice the Difference", "Friends and family ask what changed."),
        ("It Simplifies Your Routine", "One product replaces several mediocre ones."),
        ("Thousands of Five-Star Reviews", "Real customers, real results, consistently."),
        ("It's a Gift to Yourself", "An everyday upgrade you'll look forward to."),
    ],
    Angle.COMPARISON: [
        ("Better Results", "Outperformed leading alternatives in side-by-side use."),
        ("Higher Quality", "Materials and construction in a different league."),
        ("Lower Cost Per Use", "Lasts longer, so it costs less over time."),
        ("Easier to Use", "Simple, intuitive, works as described."),
        ("Happier Customers", "Satisfaction scores no competitor came close to."),
    ],
}

_ORDINALS = ("One", "Two", "Three", "Four", "Five")


def build(product: ProductFacts, angle: Angle, today: Optional[date] = None) -> List[BaseBlock]:
    p, hp, href = product_name(product), esc(product_name(product)), product_href(product)
    doc = BlockList()
    doc.add("author_byline", author="Editorial Team", role="Product Review Desk", date=byline_date(today),
            category="REVIEWS", publication_name="The Daily Review")
    doc.add("headline", text=HEADLINES[angle](p), size="large")
    doc.add("social_proof", rating="4.9", review_count="3,847", customer_count="75,000+")
    doc.add("text", content=lead(product, INTROS[angle](hp)), variant="large-intro")
    doc.add("cta", style="inline", variant="solid", headline="Already convinced?",
            subtext=f"Get {p} at today's price.", button_text="Shop Now", button_href=href)
    doc.add("image", **hero_image(product, "Insert product image", "Clean product shot on a neutral background"))
    for i, (title, body) in enumerate(REASONS[angle]):
        doc.add("numbered_section", number=f"{i + 1:02d}", label=f"Reason {_ORDINALS[i]}",
                headline=title, body=body)
    doc.add("testimonials", heading="What Customers Are Saying", testimonials=[
        {"quote": "I was skeptical at first, but the results speak for themselves.", "name": "Sarah M.",
         "detail": "Verified Buyer · 3 weeks ago"},
        {"quote": "Tried everything else first. Wish I'd found this sooner.", "name": "James T.",
         "detail": "Verified Buyer · 1 month ago"},
        {"quote": "Five stars without hesitation. My whole family uses it now.", "name": "Priya K.",
         "detail": "Verified Buyer · 2 weeks ago"},
    ])
    doc.add("offer_box", headline=f"Get {p} Today", subtext="Exclusive reader pricing while stock lasts.",
            button_text="CHECK AVAILABILITY", button_href=href, layout="horizontal")
    doc.add("feature_list", heading=f"What's Included with {p}",
            items=["Free shipping on every order", "30-day money-back guarantee", "Friendly customer support"])
    doc.add("disclaimer", text=DISCLAIMER)
    return doc.blocks


LISTICLE = Archetype(
    id="listicle",
    name="Listicle",
    description="Five numbered reasons with social proof and a compact offer.",
    build=build,
    headlines=HEADLINES,
)
