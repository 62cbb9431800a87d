"""Data models for the wiki export modeler."""

from .page_extraction import PageExtraction
from .term_model import (
    TermEntry,
    ModelSnapshot,
    TermFrequencyModel,
    UNCOMPUTED,
)

__all__ = [
    "PageExtraction",
    "TermEntry",
    "ModelSnapshot",
    "TermFrequencyModel",
    "UNCOMPUTED",
]
