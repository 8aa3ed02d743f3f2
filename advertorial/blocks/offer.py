"""Blocs de conversion : CTA, offre, grille de prix."""
from typing import List, Literal, Optional
from pydantic import BaseModel, Field
from .base import BaseBlock, BlockStructure, BlockSeed


class CTAStructure(BlockStructure):
    style: Literal["primary", "inline"] = "primary"
    variant: Literal["gradient", "solid", "outline"] = "gradient"


class CTASeed(BlockSeed):
    headline: str = "Ready to Get Started?"
    subtext: str = "Try it risk-free today."
    button_text: str = "Shop Now"
    button_href: str = "#"


class CTABlock(BaseBlock):
    block_type: Literal["cta"] = "cta"
    structure: CTAStructure = CTAStructure()
    seed: CTASeed = CTASeed()


class OfferBoxStructure(BlockStructure):
    layout: Literal["stacked", "horizontal"] = "stacked"


class OfferBoxSeed(BlockSeed):
    headline: str = "Special Offer"
    subtext: str = "Try it risk-free today."
    button_text: str = "Check Availability"
    button_href: str = "#"
    discount: Optional[str] = "[X]% OFF"
    guarantee: Optional[str] = "30-Day Money-Back Guarantee"
    urgency: Optional[str] = "Limited time offer, while supplies last"


class OfferBoxBlock(BaseBlock):
    block_type: Literal["offer_box"] = "offer_box"
    structure: OfferBoxStructure = OfferBoxStructure()
    seed: OfferBoxSeed = OfferBoxSeed()


class PricingTier(BaseModel):
    name: str = "Starter"
    original_price: str = "$79"
    sale_price: str = "$49"
    per_unit: Optional[str] = None
    tag: Optional[str] = None
    features: List[str] = Field(default_factory=list)
    highlight: bool = False


def _default_tiers() -> List[PricingTier]:
    return [
        PricingTier(name="Starter", original_price="$79", sale_price="$49", per_unit="$49 per unit",
                    features=["Free shipping", "30-day guarantee"]),
        PricingTier(name="Most Popular", original_price="$177", sale_price="$99", per_unit="$33/unit, save $78",
                    tag="MOST POPULAR", features=["Free shipping", "60-day guarantee", "Best seller"], highlight=True),
        PricingTier(name="Best Value", original_price="$294", sale_price="$147", per_unit="$24.50/unit, save $147",
                    tag="BEST VALUE", features=["Free shipping", "90-day guarantee", "Lowest price per unit"]),
    ]


class PricingTiersStructure(BlockStructure):
    pass


class PricingTiersSeed(BlockSeed):
    heading: Optional[str] = "Choose Your Package"
    product_handle: str = "product"
    tiers: List[PricingTier] = Field(default_factory=_default_tiers)
    cta_text: str = "Get My Order"
    guarantee: Optional[str] = "60-Day Money-Back Guarantee, No Questions Asked"


class PricingTiersBlock(BaseBlock):
    block_type: Literal["pricing_tiers"] = "pricing_tiers"
    structure: PricingTiersStructure = PricingTiersStructure()
    seed: PricingTiersSeed = PricingTiersSeed()
