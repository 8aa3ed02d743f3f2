"""
Data models — Advertorial (ORM) + schémas Pydantic v2 des requêtes de génération
SQLAlchemy (SQLite) + Pydantic v2 + Enums
"""
import uuid
from datetime import datetime
from enum import Enum
from typing import List, Optional

import sqlalchemy as sa
from pydantic import BaseModel, Field
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from .blocks import BlockUnion
from .renderer.theme import ThemeOptions


# ── ENUMS ──────────────────────────────────────────────────────────────

class Angle(str, Enum):
    PAIN       = "Pain"
    DESIRE     = "Desire"
    COMPARISON = "Comparison"


class StylePreset(str, Enum):
    CLINICAL  = "A"   # Clinical Editorial
    LIFESTYLE = "B"   # Lifestyle Magazine
    NEWS      = "C"   # News Exposé
    WARM      = "D"   # Warm & Trustworthy


AI_PROVENANCE = "AI"


# ── ORM ────────────────────────────────────────────────────────────────

class Base(DeclarativeBase):
    pass


class AdvertorialDB(Base):
    __tablename__ = "advertorials"
    id:               Mapped[str]           = mapped_column(sa.String, primary_key=True, default=lambda: str(uuid.uuid4()))
    shop:             Mapped[str]           = mapped_column(sa.String, nullable=False, index=True)
    product_id:       Mapped[str]           = mapped_column(sa.String, nullable=False)
    product_title:    Mapped[str]           = mapped_column(sa.String, nullable=False)
    product_handle:   Mapped[str]           = mapped_column(sa.String, nullable=False)
    template:         Mapped[str]           = mapped_column(sa.String, nullable=False)   # archetype id ou "AI"
    angle:            Mapped[str]           = mapped_column(sa.String, nullable=False)   # angle ou style preset
    title:            Mapped[str]           = mapped_column(sa.String, nullable=False)
    content:          Mapped[str]           = mapped_column(sa.Text, nullable=False)     # markup final
    blocks:           Mapped[str]           = mapped_column(sa.Text, default="[]")       # JSON payloads
    shopify_page_id:  Mapped[Optional[str]] = mapped_column(sa.String, nullable=True)
    shopify_page_url: Mapped[Optional[str]] = mapped_column(sa.String, nullable=True)
    created_at:       Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow)
    updated_at:       Mapped[datetime]      = mapped_column(sa.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


# ── PYDANTIC SCHEMAS ────────────────────────────────────────────────────

class ProductFacts(BaseModel):
    id:          str           = ""
    title:       str
    handle:      str
    description: str           = ""
    image_url:   Optional[str] = None


class BrandDefaults(BaseModel):
    accent_color: Optional[str] = None
    heading_font: Optional[str] = None
    body_font:    Optional[str] = None

    def to_theme(self) -> ThemeOptions:
        return ThemeOptions(accent_color=self.accent_color, heading_font=self.heading_font, body_font=self.body_font)


class TemplateRequest(BaseModel):
    archetype_id: str           = "editorial"
    product:      ProductFacts
    angle:        Angle         = Angle.DESIRE
    theme:        Optional[ThemeOptions] = None


class AIBrief(BaseModel):
    target_customer: str                   = ""
    mechanism:       str                   = ""
    proof:           str                   = ""
    style_preset:    Optional[StylePreset] = None
    image_urls:      List[str]             = Field(default_factory=list)
    instructions:    str                   = ""


class GeneratedDocument(BaseModel):
    title:      str
    blocks:     List[BlockUnion]        = Field(default_factory=list)
    theme:      Optional[ThemeOptions]  = None
    provenance: str                              # archetype id ou "AI"
    variant:    str                     = ""     # angle ou style preset
