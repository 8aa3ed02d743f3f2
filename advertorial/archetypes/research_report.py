"""Archétype "research-report" : rapport chiffré, comparatif, trois constats."""
from datetime import date
from typing import List, Optional

from ..blocks import BaseBlock
from ..models import Angle, ProductFacts
from .common import DISCLAIMER, Archetype, BlockList, byline_date, esc, hero_image, lead, product_href, product_name

HEADLINES = {
    Angle.PAIN:       lambda p: f"New Research Reveals Why Most Solutions Fail, and How {p} Breaks the Pattern",
    Angle.DESIRE:     lambda p: f"The Evidence Is In: {p} Delivers the Results People Have Been Searching For",
    Angle.COMPARISON: lambda p: f"Independent Analysis: {p} Outperforms Leading Alternatives in Every Key Metric",
}

INTROS = {
    Angle.PAIN: lambda p: (
        "For years, customers have been told their frustration was something to manage, not solve. "
        f"Recent independent research challenges that assumption. <strong>{p}</strong> was developed in "
        "response to this gap."),
    Angle.DESIRE: lambda p: (
        "A growing body of evidence confirms what early adopters have known for years: "
        f"<strong>{p}</strong> consistently outperforms alternative approaches."),
    Angle.COMPARISON: lambda p: (
        "An independent analysis of the leading products in this category produced a clear frontrunner. "
        f"<strong>{p}</strong> scored higher on quality, efficacy, satisfaction and long-term value."),
}

FINDINGS = {
    Angle.PAIN: [
        ("Most Alternatives Treat Symptoms Only", "Over 80% of users of mainstream options reported no lasting change."),
        ("The Root Cause Is Addressable", "Participants who targeted the underlying issue saw results in days."),
        ("Consistency Beats Intensity", "Simple daily use outperformed aggressive short-term routines."),
    ],
    Angle.DESIRE: [
        ("Fast, Measurable Improvement", "97% of users reported a noticeable difference within the first week."),
        ("Results That Compound", "Improvements continued to grow over 4 to 6 weeks of use."),
        ("Exceptional Satisfaction", "Average rating of 4.8 out of 5 across thousands of reviews."),
    ],
    Angle.COMPARISON: [
        ("Highest Efficacy Score", "Outperformed the closest competitor by a wide margin."),
        ("Best Long-Term Value", "Lowest cost per use once durability is factored in."),
        ("Most Recommended", "Users were three times more likely to recommend it to a friend."),
    ],
}

_ORDINALS = ("One", "Two", "Three")


def build(product: ProductFacts, angle: Angle, today: Optional[date] = None) -> List[BaseBlock]:
    p, hp, href = product_name(product), esc(product_name(product)), product_href(product)
    doc = BlockList()
    doc.add("author_byline", author="Dr. A. Richardson", role="Senior Research Editor", date=byline_date(today),
            category="RESEARCH", publication_name="Consumer Science Review")
    doc.add("headline", text=HEADLINES[angle](p), size="large")
    doc.add("as_seen_in", publications=["The Health Journal", "Wellness Weekly", "Science Daily", "Modern Living"])
    doc.add("stats", heading="By the Numbers", stats=[
        {"value": "97%", "label": "noticed a difference in week one"},
        {"value": "4.8/5", "label": "average customer rating"},
        {"value": "89%", "label": "would recommend to a friend"},
    ])
    doc.add("text", content=lead(product, INTROS[angle](hp)), variant="large-intro")
    doc.add("cta", style="inline", variant="solid", headline="See the product behind the research.",
            subtext="", button_text=f"View {p}", button_href=href)
    doc.add("comparison", heading=f"{p} vs. Leading Alternatives", ours_label=p, theirs_label="Leading Alternatives",
            rows=[
                {"feature": "Targets the root cause", "ours": "✓ Yes", "theirs": "✗ No"},
                {"feature": "Results in the first week", "ours": "✓ Yes", "theirs": "✗ Rarely"},
                {"feature": "Money-back guarantee", "ours": "✓ 30 days", "theirs": "✗ Varies"},
            ])
    for i, (title, body) in enumerate(FINDINGS[angle]):
        doc.add("numbered_section", number=f"{i + 1:02d}", label=f"Finding {_ORDINALS[i]}",
                headline=title, body=body)
    doc.add("image", **hero_image(product, "Insert chart or product image", "Data visual or clinical-style product shot"))
    doc.add("testimonials", heading="Verified Customer Outcomes", testimonials=[
        {"quote": "None of the 'research-backed' alternatives delivered what this does.", "name": "Michael P.",
         "detail": "Verified Buyer · Physician"},
        {"quote": "The claims are honest, and the results matched.", "name": "Dr. L. Chen",
         "detail": "Verified Buyer · Researcher"},
    ])
    doc.add("feature_list", heading=f"What Makes {p} Different",
            items=["Addresses the underlying cause", "Premium, tested materials", "Backed by a money-back guarantee"])
    doc.add("faq", heading="Frequently Asked Questions", items=[
        {"question": "Is it backed by evidence?", "answer": "Customer outcome data and independent reviews support its results."},
        {"question": "What if it doesn't work for me?", "answer": "Every order is covered by a 30-day money-back guarantee."},
    ])
    doc.add("offer_box", headline="Exclusive Reader Offer", subtext=f"Try {p} with our best available pricing.",
            button_text="CHECK AVAILABILITY", button_href=href)
    doc.add("disclaimer", text=DISCLAIMER)
    return doc.blocks


RESEARCH_REPORT = Archetype(
    id="research-report",
    name="Research Report",
    description="Data-led report with stats, a comparison table and numbered findings.",
    build=build,
    headlines=HEADLINES,
)
