"""Archétype "personal-story" : récit à la première personne, offres répétées, fil de commentaires."""
from datetime import date
from typing import List, Optional

from ..blocks import BaseBlock
from ..models import Angle, ProductFacts
from .common import DISCLAIMER, Archetype, BlockList, byline_date, esc, hero_image, product_href, product_name

HEADLINES = {
    Angle.PAIN:       lambda p: f"It's Time to Stop Settling for Less: How My Frustrating Experience Led Me to {p}",
    Angle.DESIRE:     lambda p: f"I Finally Found the Secret to Real Results. Why {p} Is Changing Everything",
    Angle.COMPARISON: lambda p: f"I Tested Every Option on the Market. {p} Is the One That Actually Works",
}

HOOKS = {
    Angle.PAIN: lambda p: (
        "I never thought I'd be writing this story…<br><br>When you've spent <strong>years dealing with the "
        "same frustrating problem</strong>, you'll do anything to find a real solution. I tried "
        "<strong>EVERYTHING</strong> money could buy.<br><br>Until one discovery changed everything."),
    Angle.DESIRE: lambda p: (
        "I still remember the exact moment everything changed…<br><br>After years of searching, a friend told "
        f"me about <strong>{p}</strong>. I was skeptical. Within the first week, I noticed a difference."),
    Angle.COMPARISON: lambda p: (
        "Let me save you months of research and hundreds of dollars…<br><br>I spent a year <strong>testing "
        "every major option</strong>, side by side. One stood so far above the rest that I had to write about "
        f"it: <strong>{p}</strong>."),
}

CHAPTERS = {
    Angle.PAIN: (
        ("The Hidden Problem Nobody Talks About", lambda p: (
            "The reason your current solution isn't working has nothing to do with <strong>how much you're "
            "spending</strong>. Most products are designed for the average case and never address the root cause.")),
        (lambda p: f"How {p} Was Born, and Why It Actually Works", lambda p: (
            f"The founders built <strong>{p}</strong> from the ground up to solve the problems other products "
            "ignore. Today, <strong>thousands of customers</strong> have made the switch.")),
    ),
    Angle.DESIRE: (
        ("Why Most Solutions Fall Short", lambda p: (
            "The industry is built on <strong>repeat purchases</strong>: temporary relief that keeps you coming "
            f"back. <strong>{p}</strong> addresses the <strong>root cause</strong> instead.")),
        (lambda p: f"Meet {p}: The Product Thousands Call a Game Changer", lambda p: (
            f"Where other brands focus on marketing, the team behind {p} focused on <strong>engineering</strong>. "
            "The result exceeds expectations dramatically.")),
    ),
    Angle.COMPARISON: (
        ("What I Found When I Tested the Top Competitors", lambda p: (
            "I scored every product on <strong>effectiveness, quality, value, ease of use and satisfaction</strong>. "
            f"<strong>{p}</strong> won all five categories, and it wasn't close.")),
        (lambda p: f"Why {p} Beats Everything Else", lambda p: (
            f"<strong>{p}</strong> delivered results in days, felt premium in hand and costs less per use "
            "than most budget alternatives.")),
    ),
}


def _text(value, p: str) -> str:
    return value(p) if callable(value) else value


def build(product: ProductFacts, angle: Angle, today: Optional[date] = None) -> List[BaseBlock]:
    p, hp, href = product_name(product), esc(product_name(product)), product_href(product)
    (c1_title, c1_body), (c2_title, c2_body) = CHAPTERS[angle]
    doc = BlockList()
    doc.add("urgency_banner", text="TRENDING: Thousands of readers shared this story this week", style="trending")
    doc.add("headline", text=HEADLINES[angle](p), size="large")
    doc.add("author_byline", author="Sarah Mitchell", role="Guest Contributor", date=byline_date(today),
            category="REAL STORIES", view_count="48,291")
    doc.add("image", **hero_image(product, "Insert personal photo or product-in-hand shot",
                                  "Authentic, unpolished photos convert best"))
    doc.add("text", content=HOOKS[angle](hp), variant="large-intro")
    doc.add("headline", text=_text(c1_title, p), size="medium")
    doc.add("text", content=c1_body(hp))
    doc.add("headline", text=_text(c2_title, p), size="medium")
    doc.add("text", content=c2_body(hp))
    doc.add("offer_box", headline=f"Try {p} Risk-Free", subtext="Readers of this story get an exclusive discount.",
            button_text="CLAIM MY DISCOUNT", button_href=href, discount="[X]% OFF")
    doc.add("guarantee")
    doc.add("testimonials", heading="Others Who Made the Switch", testimonials=[
        {"quote": f"I read this story and ordered {p} the same night. Best decision I've made all year.",
         "name": "[Customer Name], [Age], [Location]"},
        {"quote": "I didn't expect much. Two weeks later I'm a completely different person.",
         "name": "[Customer Name], [Age], [Location]"},
    ])
    doc.add("note", text="Stock has been running low since this story went viral. Check availability before ordering.",
            style="warning")
    doc.add("cta", headline="Don't Wait Like I Did", subtext="Order today and feel the difference this week.",
            button_text="Check Availability", button_href=href)
    doc.add("comments", heading="Comments", comments=[
        {"name": "[Customer Name]", "text": "Ordered last month, can confirm it works!", "likes": "128", "time_ago": "2 hours ago"},
        {"name": "[Customer Name]", "text": "Does it ship internationally?", "likes": "12", "time_ago": "5 hours ago",
         "is_verified": False},
        {"name": "[Brand] Team", "text": "Yes! We ship worldwide with free tracking.", "likes": "31",
         "time_ago": "4 hours ago", "is_reply": True},
    ])
    doc.add("disclaimer", text=DISCLAIMER)
    return doc.blocks


PERSONAL_STORY = Archetype(
    id="personal-story",
    name="Personal Story",
    description="First-person discovery story with repeated offers and a comment thread.",
    build=build,
    headlines=HEADLINES,
)
