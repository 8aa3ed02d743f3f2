"""Blocs média / éditoriaux — image, logos presse, signature auteur."""
from typing import List, Literal, Optional
from pydantic import Field
from .base import BaseBlock, BlockStructure, BlockSeed


# Hauteur CSS d'une seule dimension : "280px", "50%", "20rem"... rien d'autre n'atteint l'attribut style
CSS_HEIGHT_PATTERN = r"^\d{1,4}(px|%|rem|em|vh)$"
DEFAULT_IMAGE_HEIGHT = "280px"


class ImageStructure(BlockStructure):
    height: str = Field(DEFAULT_IMAGE_HEIGHT, pattern=CSS_HEIGHT_PATTERN)
    placement: Literal["main", "sidebar"] = "main"
    rounded: bool = True


class ImageSeed(BlockSeed):
    label: str = "Insert image here"
    hint: str = "Describe what image should go here"
    src: Optional[str] = None
    caption: Optional[str] = None


class ImageBlock(BaseBlock):
    block_type: Literal["image"] = "image"
    structure: ImageStructure = ImageStructure()
    seed: ImageSeed = ImageSeed()


class AsSeenInStructure(BlockStructure):
    pass


class AsSeenInSeed(BlockSeed):
    publications: List[str] = Field(default_factory=lambda: ["VOGUE", "ELLE", "Forbes", "Glamour"])


class AsSeenInBlock(BaseBlock):
    block_type: Literal["as_seen_in"] = "as_seen_in"
    structure: AsSeenInStructure = AsSeenInStructure()
    seed: AsSeenInSeed = AsSeenInSeed()


class AuthorBylineStructure(BlockStructure):
    pass


class AuthorBylineSeed(BlockSeed):
    author: str = "Author Name"
    role: Optional[str] = "Health Editor"
    date: str = "[Publication Date]"
    category: Optional[str] = "HEALTH"
    publication_name: Optional[str] = "Wellness Daily"
    view_count: Optional[str] = None
    live_viewers: Optional[str] = None


class AuthorBylineBlock(BaseBlock):
    block_type: Literal["author_byline"] = "author_byline"
    structure: AuthorBylineStructure = AuthorBylineStructure()
    seed: AuthorBylineSeed = AuthorBylineSeed()
