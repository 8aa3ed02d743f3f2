"""
Archétype "reasons" : liste longue de raisons avec offre au milieu, avantages/limites,
FAQ et commentaires. Cinq raisons pour chaque angle.
"""
from datetime import date
from typing import List, Optional

from ..blocks import BaseBlock
from ..models import Angle, ProductFacts
from .common import (
    ADVERTISEMENT_NOTICE, Archetype, BlockList, byline_date, esc, hero_image, lead, product_href, product_name,
)

HEADLINES = {
    Angle.PAIN:       lambda p: f"5 Reasons {p} Is the Fix You've Been Looking For",
    Angle.DESIRE:     lambda p: f"5 Reasons Everyone's Obsessed with {p}",
    Angle.COMPARISON: lambda p: f"{p} vs. The Competition: An Honest Breakdown",
}

INTROS = {
    Angle.PAIN: lambda p: (
        "If you've been let down by one too many products that didn't deliver, you're not alone. "
        f"Here's why <strong>{p}</strong> is different."),
    Angle.DESIRE: lambda p: (
        f"There's a reason <strong>{p}</strong> keeps showing up in your feed. "
        "Here's why people can't stop talking about it."),
    Angle.COMPARISON: lambda p: (
        "Every brand claims to be \"#1\", so we did the work for you. Here's an <strong>honest, "
        f"side-by-side comparison</strong> of {p} vs. the most popular alternatives."),
}

# (titre, corps, légende image, indication image)
REASONS = {
    Angle.PAIN: lambda p: [
        ("It Was Built for the Problem You Actually Have",
         f"{p} was designed for people who've already tried the obvious solutions.",
         "Insert problem illustration", "Visual showing the common frustration"),
        ("The Results Speak for Themselves",
         "Customer after customer reports the same thing: \"Why didn't I try this sooner?\"",
         "Insert results graphic", "Before/after or customer result photos"),
        ("No More Wasting Money on Half-Solutions",
         f"{p} replaces multiple inferior solutions with one that actually delivers.",
         "Insert value comparison graphic", "Cost comparison vs. alternatives"),
        ("Backed by a Community, Not Just a Company",
         "Join [X]K+ customers who've made the switch and share real results.",
         "Insert social proof collage", "Review screenshots or customer photos"),
        ("Risk-Free: Because We're That Confident",
         f"{p} comes with a full [X]-day money-back guarantee. No fine print.",
         "Insert guarantee graphic", "Money-back seal or trust badges"),
    ],
    Angle.DESIRE: lambda p: [
        ("It Makes Your Daily Routine Actually Enjoyable",
         f"{p} was designed to feel like an upgrade every single time.",
         "Insert lifestyle image", "Aspirational daily routine photo"),
        ("The Quality Is Immediately Obvious",
         "From the moment you unbox it, you can feel the difference.",
         "Insert product detail shot", "Close-up showing craftsmanship"),
        ("People Can't Stop Recommending It",
         "When [X]% of customers recommend something to friends, that says more than any ad.",
         "Insert review screenshots", "Grid of real customer reviews"),
        ("It Replaces Multiple Products You're Already Buying",
         f"Why use three mediocre solutions when {p} does the job?",
         "Insert comparison graphic", "One product replacing many"),
        ("It's an Investment That Pays for Itself",
         "Customers report spending less overall after making the switch.",
         "Insert savings visualization", "Value breakdown chart"),
    ],
    Angle.COMPARISON: lambda p: [
        ("Premium Materials (Where Others Cut Corners)",
         f"We publish exactly what goes into {p}. No proprietary blends, no hidden fillers.",
         "Insert material comparison", "Side-by-side breakdown vs. competitor"),
        ("Honest Pricing",
         f"{p} delivers premium quality at a price that makes sense. No fake discounts.",
         "Insert price comparison chart", "Price per use vs. alternatives"),
        ("Real Customer Reviews (Not Cherry-Picked)",
         "Our average rating is [X] stars across [X]K+ reviews, earned, not manufactured.",
         "Insert review distribution graphic", "Review histogram"),
        ("Better Customer Experience",
         "Fast shipping, responsive support and a no-questions-asked return policy.",
         "Insert service comparison", "Shipping times, support and returns"),
        ("Results That Hold Up Over Time",
         f"{p} is built for sustained results, and customers stay loyal.",
         "Insert retention data graphic", "Long-term results chart"),
    ],
}

STATS = {
    Angle.PAIN: [("[X]%", "report noticeable improvement"),
                 ("[X]%", "replaced a more expensive solution"),
                 ("[X]%", "would recommend to a friend")],
    Angle.DESIRE: [("[X]K+", "happy customers worldwide"),
                   ("[X]%", "repurchase rate"),
                   ("[X]%", "say it exceeded expectations")],
    Angle.COMPARISON: [("[X]%", "of switchers never go back"),
                       ("[X]x", "better value per dollar"),
                       ("[X]★", "average rating across all reviews")],
}

TESTIMONIALS = {
    Angle.PAIN: lambda p: [
        f"After years of trying everything, {p} was genuinely the first thing that worked.",
        "It's rare that something lives up to the hype. This exceeded it.",
    ],
    Angle.DESIRE: lambda p: [
        f"I don't get obsessed with products easily. But {p}? Obsessed.",
        "If you're reading reviews trying to decide, just get it.",
    ],
    Angle.COMPARISON: lambda p: [
        f"I compared everything on the market. {p} won in every category.",
        "The transparency alone won me over. Honest pricing, real reviews.",
    ],
}

FINAL_OFFERS = {
    Angle.PAIN:       ("Stop Wasting Money on Things That Don't Work",
                       "Try {p} risk-free today and finally experience the difference.", "Get {p} Now"),
    Angle.DESIRE:     ("Ready to See What the Hype Is About?",
                       "Join [X]K+ customers who upgraded to {p}.", "Shop {p} Now"),
    Angle.COMPARISON: ("The Comparison Is Clear",
                       "Try {p} risk-free and see why customers switch, and stay.", "Try {p} Now"),
}


def build(product: ProductFacts, angle: Angle, today: Optional[date] = None) -> List[BaseBlock]:
    p, hp, href = product_name(product), esc(product_name(product)), product_href(product)
    reasons = REASONS[angle](p)
    middle = len(reasons) // 2 - 1
    doc = BlockList()
    doc.add("author_byline", author="[Author Name]",
            role="Product Reviewer" if angle is Angle.COMPARISON else "Contributing Writer",
            date=byline_date(today),
            category={Angle.PAIN: "HEALTH TIP", Angle.DESIRE: "TRENDING NOW", Angle.COMPARISON: "HONEST REVIEW"}[angle],
            publication_name="[Publication Name]")
    doc.add("image", **hero_image(product, "Insert hero image",
                                  "Product hero shot or lifestyle banner, thumb-stopping for ads", height="340px"))
    doc.add("as_seen_in", publications=["Forbes", "Health Magazine", "Glamour", "The New York Times"])
    doc.add("text", content=lead(product, INTROS[angle](hp)))
    doc.add("social_proof", rating="4.8", review_count="[X]K+", customer_count="[X]K+")
    doc.add("cta", style="inline", headline="", subtext="", button_text=f"Discover {p}", button_href=href)
    for i, (title, body, img_label, img_hint) in enumerate(reasons):
        doc.add("numbered_section", number=f"{i + 1:02d}", label=f"REASON {i + 1}", headline=title, body=body,
                image_label=img_label, image_hint=img_hint)
        if i == middle:
            doc.add("offer_box", headline=f"Special Offer for {p}",
                    subtext="Get started with [X]% OFF today! This discount ends soon.",
                    button_text="Claim Your Discount", button_href=href, discount="[X]% OFF",
                    guarantee="[X]-Day Money-Back Guarantee",
                    urgency="Limited time offer, only available while supplies last")
    doc.add("stats", heading="The Numbers Don't Lie", stats=[{"value": v, "label": lbl} for v, lbl in STATS[angle]])
    doc.add("testimonials", heading="Hear It from Real Customers",
            testimonials=[{"quote": q, "name": "[Customer Name]", "detail": "Verified Buyer"}
                          for q in TESTIMONIALS[angle](p)])
    doc.add("pros_cons", pros=[
        "Delivers real, noticeable results",
        "Premium quality at a fair price",
        "Backed by [X]K+ genuine customer reviews",
        "[X]-day money-back guarantee",
    ], cons=[f"Best pricing only available on the official {p} website"])
    doc.add("cta", style="inline", headline="", subtext="", button_text=f"Shop {p} Now", button_href=href)
    doc.add("faq", heading="Frequently Asked Questions", items=[
        {"question": f"How does {p} work?",
         "answer": f"{p} is designed to [describe mechanism]. Simply [describe usage]."},
        {"question": "Is there a money-back guarantee?",
         "answer": "Yes! We offer a full [X]-day money-back guarantee, no questions asked."},
        {"question": f"How is {p} different from alternatives?",
         "answer": f"Unlike other options that [describe shortcoming], {p} [describe advantage]."},
    ])
    doc.add("comments", heading="Comments", comments=[
        {"name": "[Customer Name]", "likes": "143", "time_ago": "2 days ago",
         "text": f"Ok so I was super skeptical about {p} but WOW. The results are actually insane."},
        {"name": "[Customer Name]", "likes": "156", "time_ago": "1 week ago",
         "text": f"Just got my second order delivered! {p} has everything I need."},
    ])
    headline, subtext, button = FINAL_OFFERS[angle]
    doc.add("offer_box", headline=headline, subtext=subtext.format(p=p), button_text=button.format(p=p),
            button_href=href, discount="[X]% OFF", guarantee="[X]-Day Money-Back Guarantee",
            urgency="Special offer, this discount ends soon")
    doc.add("disclaimer", text=ADVERTISEMENT_NOTICE)
    return doc.blocks


REASONS_LISTICLE = Archetype(
    id="reasons",
    name="Reasons Listicle",
    description="Five detailed reasons with a mid-page offer, pros and cons, FAQ and reader comments.",
    build=build,
    headlines=HEADLINES,
)
