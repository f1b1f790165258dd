"""URL path derivation for published posts"""

import re


EXTENSION_RE = re.compile(r'\.mdx?$')


def url_path(file_path: str, pages_root: str = 'pages') -> str:
    """Map a source path to its page URL, e.g. 'pages/posts/a/b.mdx' -> '/posts/a/b'.

    Only the first backslash is converted to '/'.
    """
    path = file_path.replace('\\', '/', 1)
    if pages_root and path.startswith(pages_root):
        path = path[len(pages_root):]
    return EXTENSION_RE.sub('', path)


def join_url(base: str, path: str) -> str:
    """Join a site base URL and an absolute URL path without doubling slashes."""
    return f"{base.rstrip('/')}/{path.lstrip('/')}"
