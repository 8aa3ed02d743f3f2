"""Archétype "editorial" : article magazine neutre, archétype par défaut."""
from datetime import date
from typing import List, Optional

from ..blocks import BaseBlock
from ..models import Angle, ProductFacts
from .common import (
    DISCLAIMER, Archetype, BlockList, byline_date, esc, hero_image, lead, product_href, product_name,
)

HEADLINES = {
    Angle.PAIN:       lambda p: f"Tired of Products That Don't Deliver? Here's Why {p} Is Different",
    Angle.DESIRE:     lambda p: f"Why {p} Is Becoming the Go-To Choice for Smart Shoppers",
    Angle.COMPARISON: lambda p: f"{p} vs. The Competition: An Honest Side-by-Side Look",
}

INTROS = {
    Angle.PAIN: lambda p: (
        "You've tried the popular options. Spent the money. Read the reviews. And still ended up "
        f"disappointed. If that sounds familiar, you're not alone, and <strong>{p}</strong> was built "
        "specifically for people like you."),
    Angle.DESIRE: lambda p: (
        "In a market flooded with options that overpromise and underdeliver, "
        f"<strong>{p}</strong> has quietly built a loyal following through real results that customers "
        "can feel from day one."),
    Angle.COMPARISON: lambda p: (
        "With so many options on the market, it's hard to know which one is actually worth your money. "
        f"We compared <strong>{p}</strong> against the most popular alternatives. Here's what we found."),
}

SECTIONS = {
    Angle.PAIN:       ("Why Most Alternatives Fall Short", "How It Actually Solves the Problem", "Is It Worth Trying?"),
    Angle.DESIRE:     ("What Makes It Different", "Real Results, Not Just Marketing Claims", "Is It Worth It?"),
    Angle.COMPARISON: ("Where It Outperforms the Competition", "What Real Customers Say After Switching", "The Verdict"),
}

FIRST_BODIES = {
    Angle.PAIN: lambda p: (
        "Most products in this space are designed for the average person with the average problem. "
        f"They look great in ads but fall apart in real life. <strong>{p}</strong> was engineered to "
        "address the specific frustrations other solutions ignore.<br><br>No more settling for \"good enough.\""),
    Angle.DESIRE: lambda p: (
        f"The first thing customers notice about <strong>{p}</strong> is the quality. While competitors "
        "cut corners to keep costs down, every detail here has been carefully considered.<br><br>"
        "It fits naturally into your daily routine. It's something you genuinely look forward to using."),
    Angle.COMPARISON: lambda p: (
        f"We compared <strong>{p}</strong> against the top alternatives on quality, effectiveness, value "
        "and customer satisfaction.<br><br>The differences weren't subtle. Where competitors maximize "
        "margins, it invests in better materials and real-world results."),
}

RESULTS_BODY = lambda p: (
    f"Here's what customers consistently report after using <strong>{p}</strong>:<br><br>"
    "• <strong>Noticeable improvement within the first week</strong><br>"
    "• <strong>Replaces multiple products</strong> with one solution that handles it all<br>"
    "• <strong>Better value over time</strong>, even at a comparable price<br>"
    "• <strong>Genuinely enjoyable to use</strong>, every single day")

VERDICT_BODY = lambda p: (
    f"If you're tired of products that disappoint in real life, <strong>{p}</strong> is worth a serious "
    "look. Quality, thoughtful design and genuine customer satisfaction are hard to find, and even "
    "harder to fake.<br><br>Plus, with a money-back guarantee, there's no risk in trying it yourself.")

CTA_HEADLINES = {
    Angle.PAIN:       "Stop Settling. Try It Risk-Free.",
    Angle.DESIRE:     "See the Difference for Yourself",
    Angle.COMPARISON: "Make the Switch Today",
}


def build(product: ProductFacts, angle: Angle, today: Optional[date] = None) -> List[BaseBlock]:
    p, hp = product_name(product), esc(product_name(product))
    h1, h2, h3 = SECTIONS[angle]
    doc = BlockList()
    doc.add("headline", text=HEADLINES[angle](p), size="large")
    doc.add("author_byline", author="Dr. Marcus", role="Contributing Writer", date=byline_date(today),
            publication_name="Health & Wellness Today", category=None)
    doc.add("image", **hero_image(product, "Insert hero image: lifestyle or product shot that sets the tone",
                                  "High-quality product or lifestyle photo"))
    doc.add("text", content=lead(product, INTROS[angle](hp),
                                 "We took a closer look at what makes this product different."))
    doc.add("headline", text=h1, size="medium")
    doc.add("text", content=FIRST_BODIES[angle](hp))
    doc.add("image", label="Insert product detail or lifestyle image",
            hint="Show the product in use or highlight a key feature", height="320px")
    doc.add("headline", text=h2, size="medium")
    doc.add("text", content=RESULTS_BODY(hp))
    doc.add("testimonials", heading="What Customers Are Saying", testimonials=[
        {"quote": f"I was skeptical at first, but {p} genuinely delivered. I've already recommended it to three friends."},
        {"quote": "This replaced two products I was already buying. Better results, simpler routine."},
        {"quote": "The quality is immediately obvious. You can tell this was made by people who care."},
    ])
    doc.add("headline", text=h3, size="medium")
    doc.add("text", content=VERDICT_BODY(hp))
    doc.add("cta", headline=CTA_HEADLINES[angle], subtext=f"Order {p} today, backed by our 30-day guarantee.",
            button_text="Shop Now", button_href=product_href(product))
    doc.add("offer_box", headline="Special Offer",
            subtext=f"Try {p} today and see why thousands of customers are making the switch.",
            button_text="CHECK AVAILABILITY", button_href=product_href(product),
            guarantee="30-Day Money-Back Guarantee")
    doc.add("faq", heading="Frequently Asked Questions", items=[
        {"question": f"How does {p} work?",
         "answer": "Follow the included instructions consistently and most people notice improvements within the first week."},
        {"question": "How long until I see results?",
         "answer": "Most customers report noticeable improvements within 7 to 14 days of regular use."},
        {"question": "Is there a money-back guarantee?",
         "answer": "Yes. Every purchase is backed by a 30-day money-back guarantee."},
    ])
    doc.add("disclaimer", text=DISCLAIMER)
    return doc.blocks


EDITORIAL = Archetype(
    id="editorial",
    name="Editorial Article",
    description="Magazine-style article with byline, three sections, testimonials and an offer.",
    build=build,
    headlines=HEADLINES,
)
