"""Tests for the documentation catalog: sections, anchors and the table of contents."""

import re
from pathlib import Path

import pytest

from creational.catalog.sections import (
    SECTION_SLUGS,
    SectionNotFoundError,
    get_section,
    load_catalog,
    load_section,
    parse_headings,
    render_document,
    slugify_heading,
    table_of_contents,
)


README = Path(__file__).resolve().parent.parent / "README.md"

_LINK_RE = re.compile(r"\]\(#([^)]+)\)")


def _anchors_of(markdown):
    return {heading.anchor for heading in parse_headings(markdown)}


@pytest.mark.parametrize(
    "heading, anchor",
    [
        ("Singleton", "singleton"),
        ("Factory Method", "factory-method"),
        ("Double-checked locking", "double-checked-locking"),
        ("The clone operation", "the-clone-operation"),
        ("What's new?", "whats-new"),
    ],
)
def test_slugify_heading(heading, anchor):
    assert slugify_heading(heading) == anchor


def test_parse_headings_skips_code_blocks():
    markdown = "## Title\n\n```python\n# not a heading\n```\n\n### Variant\n"
    headings = parse_headings(markdown)

    assert [(h.level, h.title) for h in headings] == [(2, "Title"), (3, "Variant")]


def test_catalog_has_four_sections_in_order():
    sections = load_catalog()

    assert [section.slug for section in sections] == list(SECTION_SLUGS)
    assert [section.title for section in sections] == ["Singleton", "Builder", "Prototype", "Factory"]


@pytest.mark.parametrize(
    "slug, variants",
    [
        ("singleton", ["Eager initialization", "Synchronized accessor", "Double-checked locking"]),
        ("builder", ["The builder", "Validation"]),
        ("prototype", ["The clone operation", "Prototype registry"]),
        ("factory", ["Simple Factory", "Factory Method", "Abstract Factory"]),
    ],
)
def test_section_variants(slug, variants):
    assert [heading.title for heading in get_section(slug).variants] == variants


def test_builder_section_lists_naive_alternatives():
    markdown = get_section("builder").markdown

    assert "One constructor taking every argument" in markdown
    assert "A dictionary of parameters" in markdown
    assert "A parameter-holder object" in markdown


def test_unknown_section_raises():
    with pytest.raises(SectionNotFoundError):
        get_section("observer")


def test_load_section_requires_level_two_heading(tmp_path):
    (tmp_path / "broken.md").write_text("# Too high\n\nText\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_section("broken", content_dir=tmp_path)


def test_sections_stand_alone():
    for section in load_catalog():
        links = set(_LINK_RE.findall(section.markdown))
        assert links <= _anchors_of(section.markdown), f"{section.slug} links outside itself"


def test_table_of_contents_matches_sections():
    toc = table_of_contents()

    assert [entry.slug for entry in toc] == list(SECTION_SLUGS)
    assert [child.title for child in toc[3].children] == ["Simple Factory", "Factory Method", "Abstract Factory"]


def test_rendered_toc_links_resolve():
    document = render_document()
    links = _LINK_RE.findall(document)

    assert len(links) == len(SECTION_SLUGS) + sum(len(s.variants) for s in load_catalog())
    assert set(links) <= _anchors_of(document)


def test_rendered_document_title():
    assert render_document("Patterns Handbook").startswith("# Patterns Handbook\n")


def test_readme_toc_links_resolve():
    readme = README.read_text(encoding="utf-8")
    links = _LINK_RE.findall(readme)

    assert {"singleton", "builder", "prototype", "factory"} <= set(links)
    assert set(links) <= _anchors_of(readme)


def test_readme_starts_with_rendered_document():
    readme = README.read_text(encoding="utf-8")

    assert readme.startswith(render_document()), "README.md is out of date with catalog/content"
