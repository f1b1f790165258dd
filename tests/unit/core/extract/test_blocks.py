"""Unit tests for core/extract/blocks.py and core/utils/tokens.py"""

import pytest

from mdfeed.core.extract.blocks import first_heading, first_paragraph, heading_text, paragraph_text
from mdfeed.core.parse import compile_document
from mdfeed.core.utils.tokens import heading_level


def _tree(md: str):
    return compile_document(md).tree


def test_first_heading_is_top_level_h1(plain_doc):
    """An earlier h2 is skipped; the first h1 wins."""
    node = first_heading(plain_doc.tree)
    assert heading_level(node) == 1
    assert heading_text(plain_doc.tree) == "Real Title"


def test_first_paragraph_precedes_headings(plain_doc):
    """The first paragraph is found regardless of heading position."""
    assert paragraph_text(plain_doc.tree) == "Intro paragraph before any heading."


def test_first_child_only(sample_doc):
    """Only the first inline child contributes, as in 'text **bold** text'."""
    assert paragraph_text(sample_doc.tree) == "First paragraph with "


def test_heading_missing_returns_empty():
    tree = _tree("## Only h2\n\nBody.\n")
    assert first_heading(tree) is None
    assert heading_text(tree) == ""


def test_paragraph_missing_returns_empty():
    tree = _tree("# Title\n\n- list item\n")
    assert first_paragraph(tree) is None
    assert paragraph_text(tree) == ""


def test_nested_paragraphs_are_not_top_level():
    """Paragraphs inside blockquotes do not count."""
    tree = _tree("> quoted\n\nTop level.\n")
    assert paragraph_text(tree) == "Top level."


@pytest.mark.parametrize("md,expected", [
    ("# `code` title\n", "code"),
    ("# *Emphasis* first\n", "Emphasis"),
    ("# Plain\n", "Plain"),
])
def test_heading_first_child_text(md, expected):
    """Plain text of the first child covers code spans and nested emphasis."""
    assert heading_text(_tree(md)) == expected


def test_image_alt_text():
    """An image-only paragraph yields its alt text."""
    assert paragraph_text(_tree("![A photo](p.png)\n")) == "A photo"


@pytest.mark.parametrize("md,level", [("# a\n", 1), ("### c\n", 3), ("###### f\n", 6)])
def test_heading_level(md, level):
    assert heading_level(_tree(md).children[0]) == level


def test_heading_level_non_heading():
    assert heading_level(_tree("para\n").children[0]) is None
