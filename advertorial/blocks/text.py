"""Blocs texte — titre, paragraphe (HTML autorisé), note, disclaimer, séparateur, bandeau urgence."""
from typing import Literal, Optional
from .base import BaseBlock, BlockStructure, BlockSeed


# ── Headline ──

class HeadlineStructure(BlockStructure):
    size: Literal["large", "medium", "small"] = "large"
    align: Literal["left", "center"] = "left"


class HeadlineSeed(BlockSeed):
    text: str = "Your Headline Here"
    subheadline: Optional[str] = None


class HeadlineBlock(BaseBlock):
    block_type: Literal["headline"] = "headline"
    structure: HeadlineStructure = HeadlineStructure()
    seed: HeadlineSeed = HeadlineSeed()


# ── Text (HTML supporté : <strong>, <em>, <br>, <mark>) ──

class TextStructure(BlockStructure):
    variant: Literal["default", "large-intro", "pull-quote"] = "default"


class TextSeed(BlockSeed):
    content: str = "Write your content here..."


class TextBlock(BaseBlock):
    block_type: Literal["text"] = "text"
    structure: TextStructure = TextStructure()
    seed: TextSeed = TextSeed()


# ── Note ──

class NoteStructure(BlockStructure):
    style: Literal["info", "warning", "highlight"] = "highlight"


class NoteSeed(BlockSeed):
    text: str = "Important note here..."


class NoteBlock(BaseBlock):
    block_type: Literal["note"] = "note"
    structure: NoteStructure = NoteStructure()
    seed: NoteSeed = NoteSeed()


# ── Disclaimer (HTML supporté) ──

class DisclaimerStructure(BlockStructure):
    pass


class DisclaimerSeed(BlockSeed):
    text: str = (
        "THIS IS AN ADVERTISEMENT AND NOT AN ACTUAL NEWS ARTICLE, BLOG, OR CONSUMER PROTECTION UPDATE. "
        "MARKETING DISCLOSURE: This website is a marketplace. The owner has a monetary connection "
        "to the products and services advertised on the site."
    )


class DisclaimerBlock(BaseBlock):
    block_type: Literal["disclaimer"] = "disclaimer"
    structure: DisclaimerStructure = DisclaimerStructure()
    seed: DisclaimerSeed = DisclaimerSeed()


# ── Divider ──

class DividerStructure(BlockStructure):
    pass


class DividerSeed(BlockSeed):
    pass


class DividerBlock(BaseBlock):
    block_type: Literal["divider"] = "divider"
    structure: DividerStructure = DividerStructure()
    seed: DividerSeed = DividerSeed()


# ── Urgency banner ──

class UrgencyBannerStructure(BlockStructure):
    style: Literal["breaking", "limited", "trending"] = "trending"


class UrgencyBannerSeed(BlockSeed):
    text: str = "TRENDING: Thousands of customers discovered this week — stock is running low"


class UrgencyBannerBlock(BaseBlock):
    block_type: Literal["urgency_banner"] = "urgency_banner"
    structure: UrgencyBannerStructure = UrgencyBannerStructure()
    seed: UrgencyBannerSeed = UrgencyBannerSeed()
