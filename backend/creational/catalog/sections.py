"""
The pattern catalog: four self-contained Markdown sections and the
table of contents that links them together.

Sections live in ``content/<slug>.md``. Each opens with a level 2 heading
(the section title) and uses level 3 headings for its variants. Anchors are
generated the way GitHub renders them, so the rendered document works as a
README.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Tuple
import logging
import re

from pydantic import BaseModel, Field


CONTENT_DIR = Path(__file__).parent / "content"

# Reading order of the document
SECTION_SLUGS: Tuple[str, ...] = ("singleton", "builder", "prototype", "factory")

logger = logging.getLogger(__name__)

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.+?)\s*#*\s*$")


class SectionNotFoundError(LookupError):
    """Raised when no catalog section matches a slug."""

    def __init__(self, slug: str):
        super().__init__(f"No catalog section named '{slug}'")
        self.slug = slug


class Heading(BaseModel):
    level: int
    title: str
    anchor: str


class TocEntry(BaseModel):
    title: str
    anchor: str
    slug: Optional[str] = None
    children: List["TocEntry"] = Field(default_factory=list)


class PatternSection(BaseModel):
    slug: str
    title: str
    anchor: str
    markdown: str
    headings: List[Heading] = Field(default_factory=list)

    @property
    def variants(self) -> List[Heading]:
        return [heading for heading in self.headings if heading.level == 3]


def slugify_heading(text: str) -> str:
    """
    Convert a heading into its GitHub anchor.

    Lowercases, drops everything but letters, digits, spaces, hyphens and
    underscores, then turns spaces into hyphens.
    """
    anchor = text.strip().lower()
    anchor = re.sub(r"[^\w\- ]", "", anchor)
    return anchor.replace(" ", "-")


def parse_headings(markdown: str) -> List[Heading]:
    """Collect the ATX headings of a Markdown text, skipping fenced code."""
    headings = []
    in_fence = False
    for line in markdown.splitlines():
        if line.lstrip().startswith("```"):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        match = _HEADING_RE.match(line)
        if match:
            title = match.group(2)
            headings.append(Heading(level=len(match.group(1)), title=title, anchor=slugify_heading(title)))
    return headings


def load_section(slug: str, content_dir: Path = CONTENT_DIR) -> PatternSection:
    path = content_dir / f"{slug}.md"
    if not path.is_file():
        raise SectionNotFoundError(slug)

    markdown = path.read_text(encoding="utf-8").strip() + "\n"
    headings = parse_headings(markdown)
    if not headings or headings[0].level != 2:
        raise ValueError(f"Catalog section '{slug}' must open with a level 2 heading")

    return PatternSection(
        slug=slug,
        title=headings[0].title,
        anchor=headings[0].anchor,
        markdown=markdown,
        headings=headings,
    )


@lru_cache(maxsize=1)
def load_catalog() -> Tuple[PatternSection, ...]:
    """Load every section, in reading order. Cached for the process lifetime."""
    sections = tuple(load_section(slug) for slug in SECTION_SLUGS)
    logger.info(f"Pattern catalog loaded with {len(sections)} sections")
    return sections


def get_section(slug: str) -> PatternSection:
    for section in load_catalog():
        if section.slug == slug:
            return section
    raise SectionNotFoundError(slug)


def table_of_contents() -> List[TocEntry]:
    toc = []
    for section in load_catalog():
        entry = TocEntry(title=section.title, anchor=section.anchor, slug=section.slug)
        entry.children = [TocEntry(title=h.title, anchor=h.anchor) for h in section.variants]
        toc.append(entry)
    return toc


def render_toc(entries: List[TocEntry]) -> str:
    lines = []
    for entry in entries:
        lines.append(f"- [{entry.title}](#{entry.anchor})")
        for child in entry.children:
            lines.append(f"  - [{child.title}](#{child.anchor})")
    return "\n".join(lines)


def render_document(title: str = "Creational Design Patterns") -> str:
    """
    Render the whole catalog as one Markdown document.

    Args:
        title: The level 1 title of the document

    Returns:
        The title, the table of contents and the four sections
    """
    parts = [f"# {title}", "## Table of Contents", render_toc(table_of_contents())]
    parts.extend(section.markdown.strip() for section in load_catalog())
    return "\n\n".join(parts) + "\n"
