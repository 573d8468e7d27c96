"""The patterns article and its structural checks."""

from .kata import KATA_STEPS
from .outline import (
    ArticleOutline,
    ArticleSection,
    CodeBlock,
    ImageReference,
    load_article,
    parse_article,
)
from .validator import ArticleValidator, EXPECTED_SECTIONS

__all__ = [
    "KATA_STEPS",
    "ArticleOutline",
    "ArticleSection",
    "CodeBlock",
    "ImageReference",
    "load_article",
    "parse_article",
    "ArticleValidator",
    "EXPECTED_SECTIONS",
]
