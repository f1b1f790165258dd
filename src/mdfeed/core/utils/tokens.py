"""Shared markdown-it syntax tree utilities"""

from markdown_it.tree import SyntaxTreeNode


TEXT_TYPES = {'text', 'code_inline', 'html_inline'}


def heading_level(node: SyntaxTreeNode) -> int | None:
    """Return the heading level (1-6) for a heading node, else None."""
    if node.type == 'heading' and node.tag and node.tag[0] == 'h' and node.tag[1:].isdigit():
        return int(node.tag[1:])
    return None


def plain_text(node: SyntaxTreeNode) -> str:
    """Concatenate the text content under node (image alt text included)."""
    if node.type in TEXT_TYPES:
        return node.content
    if node.type in ('softbreak', 'hardbreak'):
        return '\n'
    return ''.join(plain_text(child) for child in node.children)


def first_child_text(block: SyntaxTreeNode) -> str:
    """Plain text of a block's first inline child ('' if the block has none)."""
    inline = block.children[0] if block.children else None
    if inline is None or not inline.children:
        return ''
    return plain_text(inline.children[0])
