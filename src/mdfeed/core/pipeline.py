"""Pipeline step functions: collect posts, assemble artifacts, publish"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from mdfeed.config import Settings
from mdfeed.core.export import assemble, select_published
from mdfeed.core.extract.extract import extract_post
from mdfeed.core.models import BuildResult, PostRecord
from mdfeed.core.parse import compile_document
from mdfeed.core.scan import read_source, scan_dir
from mdfeed.core.utils.dates import truncate_ms
from mdfeed.core.utils.fs import commit_files
from mdfeed.errors import CompileError


logger = logging.getLogger(__name__)


def collect_posts(
    posts_dir: str,
    extension: str = '.mdx',
    pages_root: str = 'pages',
    parser_config: str = 'gfm-like',
    strict_dates: bool = False,
    now: Optional[datetime] = None,
    ) -> list[PostRecord]:
    """Scan posts_dir and extract one PostRecord per source, in scan order."""
    paths = scan_dir(posts_dir, extension)
    logger.debug("Post paths: %s", paths)
    records = []
    for p in paths:
        source = read_source(p)
        try:
            compiled = compile_document(source, parser_config)
        except (ValueError, KeyError) as e:
            raise CompileError(p, e) from e
        record = extract_post(
            p, compiled, pages_root=pages_root, strict_dates=strict_dates, now=now,
        )
        logger.debug("Post: %s", record.model_dump(by_alias=True))
        records.append(record)
    return records


def run_build(settings: Settings, now: Optional[datetime] = None) -> BuildResult:
    """Collect posts, assemble listing + feed, and publish both or neither."""
    now = truncate_ms(now or datetime.now(timezone.utc))
    records = collect_posts(
        settings.posts_dir, settings.extension, settings.pages_root,
        settings.parser_config, settings.strict_dates, now,
    )
    listing, feed = assemble(records, now, settings.site())

    listing_path = Path(settings.listing_path)
    feed_path = Path(settings.feed_path)
    commit_files({listing_path: listing, feed_path: feed})

    published = select_published(records, now)
    logger.info("Published %d of %d post(s)", len(published), len(records))
    return BuildResult(
        scanned=len(records),
        published=published,
        listing_path=listing_path,
        feed_path=feed_path,
    )
