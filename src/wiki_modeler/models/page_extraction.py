"""Per-page extraction result produced by the markup scanner."""

from pydantic import BaseModel, Field


class PageExtraction(BaseModel):
    """Title, categories, anchors and paragraphs of one wiki page, in document order."""

    title: str = ""
    categories: list[str] = Field(default_factory=list)
    anchors: list[str] = Field(default_factory=list)
    paragraphs: list[str] = Field(default_factory=list)
