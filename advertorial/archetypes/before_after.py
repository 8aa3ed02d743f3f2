"""Archétype "before-after" : témoignage de transformation avec timeline."""
from datetime import date
from typing import List, Optional

from ..blocks import BaseBlock
from ..models import Angle, ProductFacts
from .common import DISCLAIMER, Archetype, BlockList, byline_date, esc, hero_image, product_href, product_name

HEADLINES = {
    Angle.PAIN:       lambda p: f"\"I Was Ready to Give Up. Then I Found {p}, and Everything Changed.\"",
    Angle.DESIRE:     lambda p: f"How I Finally Achieved What I Always Wanted, With a Little Help From {p}",
    Angle.COMPARISON: lambda p: f"I Tried Everything First. Here's Why I Stopped Looking After Finding {p}",
}

HOOKS = {
    Angle.PAIN: (
        "Eighteen months. That's how long I spent trying to solve a problem that seemed unsolvable. "
        "Every time, I ended up right back where I started: frustrated and exhausted."),
    Angle.DESIRE: (
        "I'd always imagined what it would feel like to actually achieve the result I was after. "
        "Not just \"improvement\", the real thing."),
    Angle.COMPARISON: (
        "I'm not impulsive. Before I spend money on anything, I research it thoroughly. "
        "So when I say I tried every major option first, I mean it."),
}

DISCOVERIES = {
    Angle.PAIN: lambda p: (
        f"I almost didn't try <strong>{p}</strong>. I'd been burned too many times. But a friend who had "
        "struggled with the same thing wouldn't stop recommending it. Within the first week, something was different."),
    Angle.DESIRE: lambda p: (
        f"A close friend had been quietly using <strong>{p}</strong> for a few months. I noticed the change "
        "before she told me what she was doing. I ordered the same day."),
    Angle.COMPARISON: lambda p: (
        f"I kept coming back to <strong>{p}</strong> in my research. The reviews were specific, the claims "
        "honest. After eliminating everything that didn't hold up, it was the clear choice."),
}


def build(product: ProductFacts, angle: Angle, today: Optional[date] = None) -> List[BaseBlock]:
    p, hp, href = product_name(product), esc(product_name(product)), product_href(product)
    doc = BlockList()
    doc.add("author_byline", author="Jamie L.", role="Contributing Writer", date=byline_date(today),
            category="TRANSFORMATIONS", publication_name=None)
    doc.add("headline", text=HEADLINES[angle](p), size="large")
    doc.add("text", content=HOOKS[angle], variant="large-intro")
    doc.add("note", text="Results vary from person to person. This is one customer's experience.", style="info")
    doc.add("text", content=DISCOVERIES[angle](hp))
    doc.add("image", **hero_image(product, "Insert before/after photo", "Side-by-side comparison, same lighting"))
    doc.add("timeline", heading=f"My Journey with {p}", steps=[
        {"label": "Week 1", "headline": "First Signs", "body": "A subtle but real difference."},
        {"label": "Week 2", "headline": "Building Momentum", "body": "Others started to notice."},
        {"label": "Week 4", "headline": "The Turning Point", "body": "I couldn't imagine going back."},
        {"label": "Week 8", "headline": "The New Normal", "body": "Results I'd only hoped for."},
    ])
    doc.add("social_proof", rating="4.9", review_count="4,128", customer_count="80,000+")
    doc.add("testimonials", heading="Others Who Made the Same Journey", layout="stacked", testimonials=[
        {"quote": "My story is almost identical. I'm so glad I gave it a chance.", "name": "Rachel D."},
        {"quote": f"Eight weeks in with {p} and I'm a believer.", "name": "Tom W."},
    ])
    doc.add("pros_cons",
            pros=["Noticeable results within weeks", "Easy daily routine", "Money-back guarantee"],
            cons=["Sells out frequently", "Only available online"])
    doc.add("cta", headline="Start Your Own Transformation", subtext="Backed by a 30-day money-back guarantee.",
            button_text="Check Availability", button_href=href)
    doc.add("guarantee")
    doc.add("disclaimer", text=DISCLAIMER)
    return doc.blocks


BEFORE_AFTER = Archetype(
    id="before-after",
    name="Before & After",
    description="Transformation story with a week-by-week timeline.",
    build=build,
    headlines=HEADLINES,
)
