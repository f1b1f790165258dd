"""Document compilation: frontmatter, MDX meta export, and markdown-it tree building"""

import re
from typing import Any, Optional

import yaml
from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mdfeed.core.models import CompiledDoc


FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*(?:\n|$)', re.DOTALL)
META_EXPORT_RE = re.compile(r'^export\s+const\s+meta\s*=\s*')
ESM_RE = re.compile(r'''^(?:import|export)(?=[\s{*"'])''')
FENCE_RE = re.compile(r'^ {0,3}(`{3,}|~{3,})')


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _load_mapping(text: str, what: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {what}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {what}: expected a mapping, got {type(data).__name__}")
    return data


def _strip_frontmatter(text: str) -> tuple[Optional[dict[str, Any]], str]:
    """Return (frontmatter_dict or None, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        return _load_mapping(m.group(1), "YAML frontmatter"), text[m.end():]
    return None, text


def _object_end(text: str, start: int) -> int:
    """Index just past the '}' balancing the '{' at text[start], skipping quoted strings.

    Backtick template literals are not supported and raise ValueError.
    """
    depth = 0
    quote = None
    i = start
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == '\\':
                i += 1
            elif ch == quote:
                quote = None
        elif ch == '`':
            raise ValueError("Invalid meta export: template literals are not supported")
        elif ch in '"\'':
            quote = ch
        elif ch == '{':
            depth += 1
        elif ch == '}':
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    raise ValueError("Invalid meta export: unbalanced braces")


def _read_meta_export(text: str) -> tuple[dict[str, Any], int]:
    """Parse the object literal of a leading `export const meta = {...}`; return (meta, end)."""
    m = META_EXPORT_RE.match(text)
    if not text.startswith('{', m.end()):
        raise ValueError("Invalid meta export: expected an object literal")
    end = _object_end(text, m.end())
    return _load_mapping(text[m.end():end], "meta export"), end


def _is_fence_close(line: str, fence: str) -> bool:
    marker = line.strip()
    return marker.startswith(fence) and not marker.strip(fence[0])


def _strip_esm(text: str) -> tuple[Optional[dict[str, Any]], str]:
    """Return (meta_dict or None, body) with top-level import/export blocks removed.

    An ESM block is a markdown block, outside fenced code, whose first line
    starts with `import` or `export`; it runs to the next blank line. The
    object literal of `export const meta = {...}` may span blank lines and is
    read as a YAML flow mapping, which covers the usual JS literal forms (bare
    keys, single/double quotes, trailing commas).
    """
    lines = text.splitlines(keepends=True)
    kept = []
    meta = None
    fence = None
    block_start = True
    i = 0
    while i < len(lines):
        line = lines[i]
        if fence:
            kept.append(line)
            if _is_fence_close(line, fence):
                fence = None
            i += 1
            continue
        if block_start and ESM_RE.match(line):
            if META_EXPORT_RE.match(line):
                rest = ''.join(lines[i:])
                exported, end = _read_meta_export(rest)
                meta = {**(meta or {}), **exported}
                i += rest.count('\n', 0, end)
            while i < len(lines) and lines[i].strip():
                i += 1
            continue
        m = FENCE_RE.match(line)
        if m:
            fence = m.group(1)
        kept.append(line)
        block_start = not line.strip()
        i += 1
    return meta, ''.join(kept)


def compile_document(source: str, parser_config: str = 'gfm-like') -> CompiledDoc:
    """Compile document source into declared metadata and a syntax tree.

    Pure function of its input: nothing is executed and nothing is cached.
    Export meta keys override frontmatter keys when both are present.
    """
    frontmatter, body = _strip_frontmatter(source)
    exported, body = _strip_esm(body)

    meta = None
    if frontmatter is not None or exported is not None:
        meta = {**(frontmatter or {}), **(exported or {})}

    tokens = _make_parser(parser_config).parse(body)
    return CompiledDoc(meta=meta, tree=SyntaxTreeNode(tokens), body=body)
