"""
Blocs de l'advertorial : exports publics + BlockUnion discriminé.
L'ordre de BLOCK_CLASSES est l'ordre de la palette "Ajouter un bloc".
"""
from typing import Annotated, Dict, Tuple, Union, get_args
from pydantic import Field

from .base import BaseBlock, BlockStructure, BlockSeed
from .text import (
    HeadlineBlock, HeadlineStructure, HeadlineSeed,
    TextBlock, TextStructure, TextSeed,
    NoteBlock, NoteStructure, NoteSeed,
    DisclaimerBlock, DisclaimerStructure, DisclaimerSeed,
    DividerBlock, DividerStructure, DividerSeed,
    UrgencyBannerBlock, UrgencyBannerStructure, UrgencyBannerSeed,
)
from .media import (
    ImageBlock, ImageStructure, ImageSeed,
    AsSeenInBlock, AsSeenInStructure, AsSeenInSeed,
    AuthorBylineBlock, AuthorBylineStructure, AuthorBylineSeed,
)
from .proof import (
    SocialProofBlock, SocialProofStructure, SocialProofSeed,
    StatsBlock, StatsStructure, StatsSeed, StatItem,
    TestimonialsBlock, TestimonialsStructure, TestimonialsSeed, TestimonialItem,
    CommentsBlock, CommentsStructure, CommentsSeed, CommentItem,
    GuaranteeBlock, GuaranteeStructure, GuaranteeSeed, GuaranteeBadge,
)
from .sections import (
    NumberedSectionBlock, NumberedSectionStructure, NumberedSectionSeed,
    FeatureListBlock, FeatureListStructure, FeatureListSeed,
    ComparisonBlock, ComparisonStructure, ComparisonSeed, ComparisonRow,
    ProsConsBlock, ProsConsStructure, ProsConsSeed,
    TimelineBlock, TimelineStructure, TimelineSeed, TimelineStep,
    FAQBlock, FAQStructure, FAQSeed, FAQItem,
)
from .offer import (
    CTABlock, CTAStructure, CTASeed,
    OfferBoxBlock, OfferBoxStructure, OfferBoxSeed,
    PricingTiersBlock, PricingTiersStructure, PricingTiersSeed, PricingTier,
)

# Union discriminée par block_type : documents, requêtes API, rendu
BlockUnion = Annotated[
    Union[
        HeadlineBlock,
        TextBlock,
        ImageBlock,
        CTABlock,
        SocialProofBlock,
        StatsBlock,
        TestimonialsBlock,
        NumberedSectionBlock,
        ComparisonBlock,
        ProsConsBlock,
        TimelineBlock,
        GuaranteeBlock,
        DividerBlock,
        NoteBlock,
        FAQBlock,
        AsSeenInBlock,
        AuthorBylineBlock,
        FeatureListBlock,
        OfferBoxBlock,
        CommentsBlock,
        DisclaimerBlock,
        UrgencyBannerBlock,
        PricingTiersBlock,
    ],
    Field(discriminator="block_type"),
]

# Registre unique des kinds : block_type → classe
BLOCK_CLASSES: Dict[str, type] = {
    cls.model_fields["block_type"].default: cls
    for cls in get_args(get_args(BlockUnion)[0])
}
BLOCK_TYPES: Tuple[str, ...] = tuple(BLOCK_CLASSES)

__all__ = [
    "BaseBlock", "BlockStructure", "BlockSeed",
    "HeadlineBlock", "HeadlineStructure", "HeadlineSeed",
    "TextBlock", "TextStructure", "TextSeed",
    "NoteBlock", "NoteStructure", "NoteSeed",
    "DisclaimerBlock", "DisclaimerStructure", "DisclaimerSeed",
    "DividerBlock", "DividerStructure", "DividerSeed",
    "UrgencyBannerBlock", "UrgencyBannerStructure", "UrgencyBannerSeed",
    "ImageBlock", "ImageStructure", "ImageSeed",
    "AsSeenInBlock", "AsSeenInStructure", "AsSeenInSeed",
    "AuthorBylineBlock", "AuthorBylineStructure", "AuthorBylineSeed",
    "SocialProofBlock", "SocialProofStructure", "SocialProofSeed",
    "StatsBlock", "StatsStructure", "StatsSeed", "StatItem",
    "TestimonialsBlock", "TestimonialsStructure", "TestimonialsSeed", "TestimonialItem",
    "CommentsBlock", "CommentsStructure", "CommentsSeed", "CommentItem",
    "GuaranteeBlock", "GuaranteeStructure", "GuaranteeSeed", "GuaranteeBadge",
    "NumberedSectionBlock", "NumberedSectionStructure", "NumberedSectionSeed",
    "FeatureListBlock", "FeatureListStructure", "FeatureListSeed",
    "ComparisonBlock", "ComparisonStructure", "ComparisonSeed", "ComparisonRow",
    "ProsConsBlock", "ProsConsStructure", "ProsConsSeed",
    "TimelineBlock", "TimelineStructure", "TimelineSeed", "TimelineStep",
    "FAQBlock", "FAQStructure", "FAQSeed", "FAQItem",
    "CTABlock", "CTAStructure", "CTASeed",
    "OfferBoxBlock", "OfferBoxStructure", "OfferBoxSeed",
    "PricingTiersBlock", "PricingTiersStructure", "PricingTiersSeed", "PricingTier",
    "BlockUnion", "BLOCK_CLASSES", "BLOCK_TYPES",
]
