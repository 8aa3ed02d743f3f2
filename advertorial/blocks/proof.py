"""Blocs preuve sociale : note étoilée, chiffres, témoignages, commentaires, garantie."""
from typing import List, Literal, Optional
from pydantic import BaseModel, Field
from .base import BaseBlock, BlockStructure, BlockSeed


# ── Social proof ──

class SocialProofStructure(BlockStructure):
    pass


class SocialProofSeed(BlockSeed):
    rating: str = "4.8"
    review_count: str = "[X]K+"
    customer_count: str = "[X]K+"


class SocialProofBlock(BaseBlock):
    block_type: Literal["social_proof"] = "social_proof"
    structure: SocialProofStructure = SocialProofStructure()
    seed: SocialProofSeed = SocialProofSeed()


# ── Stats ──

class StatItem(BaseModel):
    value: str = "[X]%"
    label: str = "Describe this stat"


class StatsStructure(BlockStructure):
    layout: Literal["grid", "horizontal"] = "grid"


class StatsSeed(BlockSeed):
    heading: Optional[str] = None
    stats: List[StatItem] = Field(default_factory=lambda: [StatItem(), StatItem()])


class StatsBlock(BaseBlock):
    block_type: Literal["stats"] = "stats"
    structure: StatsStructure = StatsStructure()
    seed: StatsSeed = StatsSeed()


# ── Testimonials ──

class TestimonialItem(BaseModel):
    quote: str = "Customer quote here..."
    name: str = "[Customer Name]"
    detail: str = "Verified Buyer"


class TestimonialsStructure(BlockStructure):
    layout: Literal["grid", "stacked"] = "grid"
    show_stars: bool = True


class TestimonialsSeed(BlockSeed):
    heading: Optional[str] = None
    testimonials: List[TestimonialItem] = Field(default_factory=lambda: [TestimonialItem()])


class TestimonialsBlock(BaseBlock):
    block_type: Literal["testimonials"] = "testimonials"
    structure: TestimonialsStructure = TestimonialsStructure()
    seed: TestimonialsSeed = TestimonialsSeed()


# ── Comments ──

class CommentItem(BaseModel):
    name: str = "Customer Name"
    text: str = "Great product! Really made a difference."
    likes: Optional[str] = "43"
    time_ago: str = "2 days ago"
    is_verified: bool = True
    is_reply: bool = False


class CommentsStructure(BlockStructure):
    pass


class CommentsSeed(BlockSeed):
    heading: Optional[str] = None
    comments: List[CommentItem] = Field(default_factory=lambda: [CommentItem()])


class CommentsBlock(BaseBlock):
    block_type: Literal["comments"] = "comments"
    structure: CommentsStructure = CommentsStructure()
    seed: CommentsSeed = CommentsSeed()


# ── Guarantee ──

class GuaranteeBadge(BaseModel):
    icon: str = "🛡️"
    label: str = "Money-Back Guarantee"


def _default_badges() -> List[GuaranteeBadge]:
    return [
        GuaranteeBadge(icon="🛡️", label="Money-Back Guarantee"),
        GuaranteeBadge(icon="🚚", label="Free Shipping"),
        GuaranteeBadge(icon="🔒", label="Secure Checkout"),
    ]


class GuaranteeStructure(BlockStructure):
    pass


class GuaranteeSeed(BlockSeed):
    text: str = "30-Day Money Back Guarantee · Free Shipping · Secure Checkout"
    badges: List[GuaranteeBadge] = Field(default_factory=_default_badges)


class GuaranteeBlock(BaseBlock):
    block_type: Literal["guarantee"] = "guarantee"
    structure: GuaranteeStructure = GuaranteeStructure()
    seed: GuaranteeSeed = GuaranteeSeed()
