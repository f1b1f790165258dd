"""Derive a PostRecord from a compiled document"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from mdfeed.core.extract.blocks import heading_text, paragraph_text
from mdfeed.core.models import CompiledDoc, PostRecord
from mdfeed.core.utils.dates import parse_date, truncate_ms
from mdfeed.core.utils.urls import url_path
from mdfeed.errors import InvalidDateError, MetadataMissingError


logger = logging.getLogger(__name__)


def _declared(meta: Optional[dict[str, Any]], key: str) -> Optional[str]:
    """Return meta[key] as a string when present and truthy."""
    value = (meta or {}).get(key)
    return str(value) if value else None


def _resolve_date(
    path: str,
    meta: Optional[dict[str, Any]],
    strict: bool,
    now: Optional[datetime],
    ) -> Optional[datetime]:
    """meta.date when meta exists (None if unparseable), else now."""
    if meta is None:
        return truncate_ms(now or datetime.now(timezone.utc))
    raw = meta.get('date')
    parsed = parse_date(raw)
    if parsed is None:
        if strict:
            raise InvalidDateError(path, raw)
        logger.warning("Invalid date %r in %s; post will not be published", raw, path)
    return parsed


def extract_post(
    path: str,
    compiled: CompiledDoc,
    *,
    pages_root: str = 'pages',
    strict_dates: bool = False,
    now: Optional[datetime] = None,
    ) -> PostRecord:
    """Build a PostRecord from declared meta, falling back to document structure.

    title: meta.title, else the first h1. description: meta.description, else
    the first paragraph. Raises MetadataMissingError when neither exists.
    """
    meta = compiled.meta
    title = _declared(meta, 'title') or heading_text(compiled.tree)
    if not title:
        raise MetadataMissingError(path, 'title', "no meta.title and no top-level '# heading'")
    description = _declared(meta, 'description') or paragraph_text(compiled.tree)
    if not description:
        raise MetadataMissingError(path, 'description', "no meta.description and no paragraph")

    return PostRecord(
        file_path=path,
        url_path=url_path(path, pages_root),
        title=title,
        date=_resolve_date(path, meta, strict_dates, now),
        description=description,
    )
