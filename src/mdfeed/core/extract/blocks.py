"""Top-level block lookup in a compiled document tree"""

from typing import Optional

from markdown_it.tree import SyntaxTreeNode

from mdfeed.core.utils.tokens import first_child_text, heading_level


def first_heading(tree: SyntaxTreeNode, level: int = 1) -> Optional[SyntaxTreeNode]:
    """Return the first top-level heading of the given level, else None."""
    return next((n for n in tree.children if heading_level(n) == level), None)


def first_paragraph(tree: SyntaxTreeNode) -> Optional[SyntaxTreeNode]:
    """Return the first top-level paragraph, else None."""
    return next((n for n in tree.children if n.type == 'paragraph'), None)


def heading_text(tree: SyntaxTreeNode) -> str:
    """Text of the first h1's first child, '' if there is none."""
    node = first_heading(tree)
    return first_child_text(node) if node is not None else ''


def paragraph_text(tree: SyntaxTreeNode) -> str:
    """Text of the first paragraph's first child, '' if there is none."""
    node = first_paragraph(tree)
    return first_child_text(node) if node is not None else ''
