"""
Archétype "story" : récit long format (accroche, 3 sections numérotées, tableau comparatif,
chiffres, avis, timeline, FAQ, commentaires, double offre).
"""
from datetime import date
from typing import List, Optional

from ..blocks import BaseBlock
from ..models import Angle, ProductFacts
from .common import (
    ADVERTISEMENT_NOTICE, Archetype, BlockList, byline_date, esc, hero_image, lead, product_href, product_name,
)

HEADLINES = {
    Angle.PAIN:       lambda p: f"{p}: The Solution Thousands Were Waiting For",
    Angle.DESIRE:     lambda p: f"How {p} Is Changing the Game",
    Angle.COMPARISON: lambda p: f"{p} vs. The Rest: Why Customers Are Switching",
}

HOOKS = {
    Angle.PAIN: lambda p: [
        "You've tried everything. Spent the money, read the reviews, ordered the \"top-rated\" options, "
        "and <strong>still ended up disappointed</strong>.",
        "It's not your fault. Most products in this space are built on hype, not substance.",
        f"That's why when <strong>{p}</strong> started gaining real traction, people were skeptical.",
        "But the results kept coming in. And they were <strong>undeniable</strong>.",
    ],
    Angle.DESIRE: lambda p: [
        "Something is happening. Quietly, <strong>thousands of people are transforming their daily "
        "experience</strong>, and they all point to the same thing.",
        f"It's not a hack. It's not a trend. It's <strong>{p}</strong>.",
        "What started as a word-of-mouth recommendation has turned into a movement.",
        "Here's the story behind the product that's redefining what \"quality\" actually means.",
    ],
    Angle.COMPARISON: lambda p: [
        "Let's be honest: you have options. Lots of them. And most of them claim to be \"the best.\"",
        "So how do you actually tell? <strong>You look at what customers say after trying both sides.</strong>",
        f"We talked to people who switched to <strong>{p}</strong> from the leading alternatives.",
        "Here's what the data (and the customers) reveal.",
    ],
}

# (label, titre, corps, légende image, indication image)
BENEFITS = {
    Angle.PAIN: lambda p: [
        ("THE PROBLEM", "You Were Never the Problem",
         f"Most products fail because they're designed for the masses. {p} was built to address the "
         "specific frustrations other solutions ignore.",
         "Insert lifestyle image", "Someone experiencing the frustration the product solves"),
        ("THE SOLUTION", f"Why {p} Actually Works",
         "Quality materials, thoughtful design and a relentless focus on real-world results rather than "
         "marketing claims.",
         "Insert product in use", "Close-up of the product being used"),
        ("THE RESULTS", "Real Results from Real People",
         f"Customers are genuinely surprised by the difference. When you use {p}, you feel it.",
         "Insert before/after or results graphic", "Transformation or satisfaction visual"),
    ],
    Angle.DESIRE: lambda p: [
        ("ELEVATE", "A New Standard for Your Daily Routine",
         f"{p} was designed for people who refuse to compromise on genuine quality.",
         "Insert aspirational lifestyle image", "Premium routine photo"),
        ("TRANSFORM", f"What Makes {p} Different",
         "Every detail has been considered. The experience gets better the more you use it.",
         "Insert product detail shot", "Craftsmanship close-up"),
        ("THRIVE", "Join a Community That Gets It",
         f"Choosing {p} means joining people who share results, tips and genuine enthusiasm.",
         "Insert community / social proof collage", "Customer photos or review screenshots"),
    ],
    Angle.COMPARISON: lambda p: [
        ("QUALITY", "Superior Quality, No Compromises",
         f"While competitors cut corners to maximize margins, {p} invests where it matters.",
         "Insert side-by-side comparison", "Product next to a generic alternative"),
        ("VALUE", "Better Results at a Better Price",
         f"Factor in performance and longevity: {p} delivers significantly more value over time.",
         "Insert value comparison graphic", "Cost-per-use chart"),
        ("TRUST", "Backed by Customers, Not Just Marketing",
         f"Anyone can run ads. {p} built its reputation on real results from real people.",
         "Insert review highlights", "Ratings distribution or verified reviews"),
    ],
}

COMPARISON_HEADINGS = {
    Angle.PAIN:       lambda p: f"Why {p} Works Where Others Didn't",
    Angle.DESIRE:     lambda p: f"{p} vs. The Usual Options",
    Angle.COMPARISON: lambda p: f"{p} vs. The Competition",
}

STATS = {
    Angle.PAIN: [("[X]%", "of customers report noticeable improvement"),
                 ("[X]%", "say it outperforms their previous solution"),
                 ("[X]%", "would recommend to a friend"),
                 ("[X]x", "better value vs. leading competitors")],
    Angle.DESIRE: [("[X]K+", "happy customers and counting"),
                   ("[X]%", "say it exceeded expectations"),
                   ("[X]%", "repurchase within 60 days"),
                   ("#1", "rated in its category")],
    Angle.COMPARISON: [("[X]%", "of switchers say they'll never go back"),
                       ("[X]x", "better value vs. leading competitor"),
                       ("[X]%", "higher satisfaction rating"),
                       ("[X]%", "recommend over alternatives")],
}

TESTIMONIALS = {
    Angle.PAIN: lambda p: [
        f"I was SO skeptical. I've been burned before. But {p} actually delivered.",
        "This replaced [X] products I was using before. Simpler, better, and I'm saving money.",
        f"I never write reviews. But this deserved one. {p} is the real deal.",
    ],
    Angle.DESIRE: lambda p: [
        f"I didn't think a product could live up to the hype. {p} proved me wrong.",
        "The quality is unreal. You can feel the difference the first time you use it.",
        f"I was paying more for worse results before. {p} is better AND more affordable.",
    ],
    Angle.COMPARISON: lambda p: [
        f"I used [Competitor] for a year before switching. {p} is simply better.",
        f"{p} outperforms my old solution at half the hassle.",
        f"After comparing everything on the market, {p} won in every category that mattered to me.",
    ],
}

FINAL_OFFERS = {
    Angle.PAIN:       ("Ready to Stop Settling?",
                       "Join thousands who finally found a solution that works. Try it risk-free today.", "Try {p} Now"),
    Angle.DESIRE:     ("Your Upgrade Is Waiting",
                       "Experience what thousands already have. Start your transformation today.", "Get {p} Now"),
    Angle.COMPARISON: ("See the Difference Yourself",
                       "Join the thousands who compared and chose us. Try it risk-free today.", "Try {p} Now"),
}


def build(product: ProductFacts, angle: Angle, today: Optional[date] = None) -> List[BaseBlock]:
    p, hp, href = product_name(product), esc(product_name(product)), product_href(product)
    doc = BlockList()
    doc.add("author_byline", author="[Author Name]", role="Contributing Writer", date=byline_date(today),
            category="REVIEW" if angle is Angle.COMPARISON else "FEATURE", publication_name="[Publication Name]")
    doc.add("image", **hero_image(product, "Insert hero image",
                                  "Product hero shot or lifestyle image that sets the tone", height="340px"))
    doc.add("as_seen_in", publications=["VOGUE", "ELLE", "Forbes", "Health Magazine"])
    doc.add("text", content=lead(product, "<br><br>".join(HOOKS[angle](hp))), variant="large-intro")
    doc.add("social_proof", rating="4.8", review_count="[X]K+", customer_count="[X]K+")
    doc.add("cta", style="inline", headline="", subtext="", button_text=f"Discover {p}", button_href=href)
    for i, (label, title, body, img_label, img_hint) in enumerate(BENEFITS[angle](p)):
        doc.add("numbered_section", number=f"{i + 1:02d}", label=label, headline=title, body=body,
                image_label=img_label, image_hint=img_hint)
    doc.add("offer_box", headline=f"Try {p} Today", subtext="See why thousands are making the switch.",
            button_text="Check Availability", button_href=href, discount="[X]% OFF, Limited Time",
            guarantee="[X]-Day Money-Back Guarantee",
            urgency="Limited time offer, only available while supplies last")
    doc.add("feature_list", heading=f"Why {p} Stands Out", items=[
        "Delivers visible, measurable results",
        "Replaces multiple products you're already buying",
        "Comfortable enough to forget you're using it",
        "Backed by [X]K+ verified customer reviews",
    ])
    doc.add("comparison", heading=COMPARISON_HEADINGS[angle](p), ours_label=p, theirs_label="Others", rows=[
        {"feature": "Quality", "ours": "✓ Premium", "theirs": "✗ Standard"},
        {"feature": "Effectiveness", "ours": "✓ Proven results", "theirs": "✗ Unverified"},
        {"feature": "Value for Money", "ours": "✓ Better long-term", "theirs": "✗ Hidden costs"},
        {"feature": "Customer Satisfaction", "ours": "✓ [X]% positive", "theirs": "✗ Mixed reviews"},
    ])
    doc.add("stats", heading="Real Customers, Real Results",
            stats=[{"value": v, "label": lbl} for v, lbl in STATS[angle]])
    doc.add("testimonials", heading="What Customers Are Saying",
            testimonials=[{"quote": q, "name": "[Customer Name]", "detail": "Verified Buyer"}
                          for q in TESTIMONIALS[angle](p)])
    doc.add("cta", style="inline", headline="", subtext="", button_text=f"Shop {p} Now", button_href=href)
    doc.add("timeline", heading="What to Expect", steps=[
        {"label": "Day 1", "headline": "Immediate Impression", "body": "Notice the quality difference right away."},
        {"label": "Week 1", "headline": "Building the Habit", "body": "It becomes part of your routine."},
        {"label": "Month 1", "headline": "Real Results", "body": "You'll wonder how you ever went without it."},
    ])
    doc.add("faq", heading="Frequently Asked Questions", items=[
        {"question": f"How does {p} work?",
         "answer": f"{p} is designed to [describe mechanism]. Simply [describe usage] and you'll begin "
                   "to see results within [timeframe]."},
        {"question": "How long does it take to see results?",
         "answer": "Most customers report noticeable improvements within [X] days of consistent use."},
        {"question": "Is there a money-back guarantee?",
         "answer": "Yes! We offer a full [X]-day money-back guarantee, no questions asked."},
    ])
    doc.add("comments", heading="Comments", comments=[
        {"name": "[Customer Name]", "likes": "143", "time_ago": "2 days ago",
         "text": f"OK so I was super skeptical about {p} but WOW. Three weeks in and the results are incredible."},
        {"name": "[Customer Name]", "likes": "28", "time_ago": "1 day ago", "is_reply": True,
         "text": "Same!! The quality is what sold me honestly."},
        {"name": "[Customer Name]", "likes": "167", "time_ago": "1 day ago",
         "text": f"Switched from [Competitor] to {p} and honestly don't miss it at all."},
    ])
    headline, subtext, button = FINAL_OFFERS[angle]
    doc.add("offer_box", headline=headline, subtext=subtext, button_text=button.format(p=p), button_href=href,
            discount="[X]% OFF", guarantee="[X]-Day Money-Back Guarantee",
            urgency="Special offer, this discount ends soon")
    doc.add("disclaimer", text=ADVERTISEMENT_NOTICE)
    return doc.blocks


STORY = Archetype(
    id="story",
    name="Story",
    description="Long-form story: hook, three benefit sections, comparison, proof, timeline and two offers.",
    build=build,
    headlines=HEADLINES,
)
