"""Data models for the compile, extract and assemble pipeline"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from markdown_it.tree import SyntaxTreeNode
from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from mdfeed.core.utils.dates import to_js_iso


class PostRecord(BaseModel):
    """Normalized metadata for one post; serialized with camelCase keys."""
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    file_path:   str
    url_path:    str
    title:       str
    date:        Optional[datetime]     # None marks an unparseable meta.date
    description: str

    @field_serializer("date")
    def _serialize_date(self, value: Optional[datetime]) -> Optional[str]:
        return to_js_iso(value) if value is not None else None


class SiteInfo(BaseModel):
    """Fixed channel-level metadata for the RSS feed."""
    title:       str
    url:         str
    description: str
    language:    str = "en"
    feed_url:    Optional[str] = None


@dataclass
class CompiledDoc:
    """Result of compiling one document source; not persisted."""
    meta: Optional[dict[str, Any]]  # declared metadata, None when the source declares none
    tree: SyntaxTreeNode            # markdown-it syntax tree of the body
    body: str                       # source with front matter and ESM lines removed


@dataclass
class BuildResult:
    scanned:      int
    published:    list[PostRecord] = field(default_factory=list)
    listing_path: Optional[Path] = None
    feed_path:    Optional[Path] = None
