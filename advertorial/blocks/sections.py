"""Blocs de section : section numérotée, liste à puces, comparatif, pour/contre, timeline, FAQ."""
from typing import List, Literal, Optional
from pydantic import BaseModel, Field
from .base import BaseBlock, BlockStructure, BlockSeed


class NumberedSectionStructure(BlockStructure):
    pass


class NumberedSectionSeed(BlockSeed):
    number: str = "01"
    label: str = "SECTION"
    headline: str = "Section Headline"
    body: str = "Section content here..."
    image_label: Optional[str] = None
    image_hint: Optional[str] = None


class NumberedSectionBlock(BaseBlock):
    block_type: Literal["numbered_section"] = "numbered_section"
    structure: NumberedSectionStructure = NumberedSectionStructure()
    seed: NumberedSectionSeed = NumberedSectionSeed()


class FeatureListStructure(BlockStructure):
    icon: str = "✓"


class FeatureListSeed(BlockSeed):
    heading: Optional[str] = None
    items: List[str] = Field(default_factory=lambda: ["Feature one", "Feature two", "Feature three"])


class FeatureListBlock(BaseBlock):
    block_type: Literal["feature_list"] = "feature_list"
    structure: FeatureListStructure = FeatureListStructure()
    seed: FeatureListSeed = FeatureListSeed()


class ComparisonRow(BaseModel):
    feature: str = "Feature"
    ours: str = "✓ Yes"
    theirs: str = "✗ No"


class ComparisonStructure(BlockStructure):
    pass


class ComparisonSeed(BlockSeed):
    heading: Optional[str] = None
    ours_label: str = "Our Product"
    theirs_label: str = "Others"
    rows: List[ComparisonRow] = Field(default_factory=lambda: [ComparisonRow()])


class ComparisonBlock(BaseBlock):
    block_type: Literal["comparison"] = "comparison"
    structure: ComparisonStructure = ComparisonStructure()
    seed: ComparisonSeed = ComparisonSeed()


class ProsConsStructure(BlockStructure):
    pass


class ProsConsSeed(BlockSeed):
    pros: List[str] = Field(default_factory=lambda: ["Pro item here"])
    cons: List[str] = Field(default_factory=lambda: ["Con item here"])


class ProsConsBlock(BaseBlock):
    block_type: Literal["pros_cons"] = "pros_cons"
    structure: ProsConsStructure = ProsConsStructure()
    seed: ProsConsSeed = ProsConsSeed()


class TimelineStep(BaseModel):
    label: str = "Step 1"
    headline: str = "Headline"
    body: str = "Description"


class TimelineStructure(BlockStructure):
    pass


class TimelineSeed(BlockSeed):
    heading: Optional[str] = None
    steps: List[TimelineStep] = Field(default_factory=lambda: [TimelineStep()])


class TimelineBlock(BaseBlock):
    block_type: Literal["timeline"] = "timeline"
    structure: TimelineStructure = TimelineStructure()
    seed: TimelineSeed = TimelineSeed()


class FAQItem(BaseModel):
    question: str = "Your question here?"
    answer: str = "Your answer here."


class FAQStructure(BlockStructure):
    pass


class FAQSeed(BlockSeed):
    heading: Optional[str] = None
    items: List[FAQItem] = Field(default_factory=lambda: [FAQItem()])


class FAQBlock(BaseBlock):
    block_type: Literal["faq"] = "faq"
    structure: FAQStructure = FAQStructure()
    seed: FAQSeed = FAQSeed()
