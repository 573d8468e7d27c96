"""Structural checks for the patterns article."""
import os
from typing import List

from src.article.outline import ArticleOutline
from src.domain.core.exceptions import ArticleStructureError
from src.infrastructure.logging.logger import get_logger

EXPECTED_SECTIONS = ["Humble Object", "Factory", "Object Parent", "Composite", "Kata"]
KATA_SECTION = "Kata"
COMPOSITE_SECTION = "Composite"
KATA_STEP_COUNT = 2
# A 1x1 PNG is about 70 bytes; an exported diagram is far larger
MIN_IMAGE_BYTES = 1024

logger = get_logger(__name__)


class ArticleValidator:
    """
    Checks the article keeps its shape:

    1. level-2 headings are exactly the expected sections, in order
    2. every pattern section shows at least one fenced code example
    3. the Composite section references exactly one image
    4. the Kata section has exactly two numbered steps

    Content of subsections (``### Example``) counts towards its section.
    """

    def __init__(self, section_level: int = 2):
        self._section_level = section_level

    def validate(self, outline: ArticleOutline) -> List[str]:
        violations: List[str] = []
        titles = [s.title for s in outline.sections_at_level(self._section_level)]
        if titles != EXPECTED_SECTIONS:
            violations.append(
                f"Expected sections {EXPECTED_SECTIONS}, found {titles}"
            )

        for title in EXPECTED_SECTIONS:
            tree = outline.subtree(title)
            if not tree:
                continue
            code_blocks = [block for s in tree for block in s.code_blocks]
            images = [image for s in tree for image in s.images]
            steps = [step for s in tree for step in s.numbered_steps]

            if title != KATA_SECTION and not code_blocks:
                violations.append(f"Section '{title}' has no code example")
            if title == COMPOSITE_SECTION and len(images) != 1:
                violations.append(
                    f"Section '{title}' must reference exactly one image, found {len(images)}"
                )
            if title == KATA_SECTION and len(steps) != KATA_STEP_COUNT:
                violations.append(
                    f"Section '{title}' must have {KATA_STEP_COUNT} numbered steps, "
                    f"found {len(steps)}"
                )
        return violations

    def check(self, outline: ArticleOutline) -> None:
        violations = self.validate(outline)
        if violations:
            logger.warning("Article structure check failed", violations=violations)
            raise ArticleStructureError(violations)

    def check_assets(self, outline: ArticleOutline, root: str) -> None:
        """Raise if an image the article references is missing or practically empty."""
        problems: List[str] = []
        for section in outline.sections:
            for image in section.images:
                full_path = os.path.join(root, image.path)
                if not os.path.exists(full_path):
                    problems.append(f"Missing image asset: {image.path}")
                elif os.path.getsize(full_path) < MIN_IMAGE_BYTES:
                    problems.append(f"Image asset is a placeholder: {image.path}")
        if problems:
            raise ArticleStructureError(problems)
