"""Markdown outline of the article.

Only the parts of markdown the article uses are understood: ATX headings,
fenced code blocks, inline image references and numbered list items.
"""
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from src.domain.core.exceptions import ValidationError

_HEADING = re.compile(r"^(#{1,6})\s+(.+?)\s*#*\s*$")
_FENCE = re.compile(r"^\s*(```|~~~)\s*([\w+-]*)")
_IMAGE = re.compile(r"!\[(?P<alt>[^\]]*)\]\((?P<path>[^)\s]+)(?:\s+\"[^\"]*\")?\)")
_NUMBERED = re.compile(r"^(\d+)[.)]\s+(.+)$")


@dataclass(frozen=True)
class CodeBlock:
    language: str
    code: str


@dataclass(frozen=True)
class ImageReference:
    alt_text: str
    path: str


@dataclass
class ArticleSection:
    """A heading and everything up to the next heading of any level."""

    title: str
    level: int
    body: List[str] = field(default_factory=list)
    code_blocks: List[CodeBlock] = field(default_factory=list)
    images: List[ImageReference] = field(default_factory=list)
    numbered_steps: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "title": self.title,
            "level": self.level,
            "code_blocks": [b.language or "text" for b in self.code_blocks],
            "images": [i.path for i in self.images],
            "numbered_steps": list(self.numbered_steps),
        }


@dataclass
class ArticleOutline:
    title: Optional[str]
    sections: List[ArticleSection] = field(default_factory=list)

    def section(self, title: str) -> Optional[ArticleSection]:
        for section in self.sections:
            if section.title == title:
                return section
        return None

    def sections_at_level(self, level: int) -> List[ArticleSection]:
        return [s for s in self.sections if s.level == level]

    def subtree(self, title: str) -> List[ArticleSection]:
        """Return the named section followed by all of its deeper subsections."""
        for index, section in enumerate(self.sections):
            if section.title != title:
                continue
            tree = [section]
            for child in self.sections[index + 1:]:
                if child.level <= section.level:
                    break
                tree.append(child)
            return tree
        return []

    def to_dict(self) -> Dict[str, object]:
        return {
            "title": self.title,
            "sections": [s.to_dict() for s in self.sections],
        }


def parse_article(text: str) -> ArticleOutline:
    """Build an outline from markdown text.

    The first level-1 heading becomes the article title. Content before any
    heading is ignored. Headings, images and numbered items inside fenced
    code are not markdown structure and are kept as code.
    """
    outline = ArticleOutline(title=None)
    current: Optional[ArticleSection] = None
    fence: Optional[str] = None
    fence_language = ""
    code_lines: List[str] = []

    for line in text.splitlines():
        if fence is not None:
            if line.strip().startswith(fence):
                if current is not None:
                    current.code_blocks.append(CodeBlock(fence_language, "\n".join(code_lines)))
                fence = None
                code_lines = []
            else:
                code_lines.append(line)
            continue

        fence_match = _FENCE.match(line)
        if fence_match:
            fence, fence_language = fence_match.group(1), fence_match.group(2)
            continue

        heading = _HEADING.match(line)
        if heading:
            level, title = len(heading.group(1)), heading.group(2)
            if level == 1 and outline.title is None:
                outline.title = title
                current = None
                continue
            current = ArticleSection(title=title, level=level)
            outline.sections.append(current)
            continue

        if current is None:
            continue
        current.body.append(line)
        for image in _IMAGE.finditer(line):
            current.images.append(ImageReference(image.group("alt"), image.group("path")))
        numbered = _NUMBERED.match(line)
        if numbered:
            current.numbered_steps.append(numbered.group(2))

    if fence is not None:
        raise ValidationError("Unterminated code fence in article")
    return outline


def load_article(path: str) -> ArticleOutline:
    """Read and parse an article file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise ValidationError(f"Failed to read article {path}: {e}")
    return parse_article(text)
