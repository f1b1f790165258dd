"""Feed assembly: publish filter, listing module, and RSS 2.0 feed"""

import json
import re
from datetime import datetime

from feedgen.feed import FeedGenerator
from pydantic import ValidationError

from mdfeed.core.models import PostRecord, SiteInfo
from mdfeed.core.utils.urls import join_url
from mdfeed.errors import SerializationError


LISTING_HEADER = "// automatically generated by mdfeed, do not edit\n"
LISTING_RE = re.compile(r'^\s*export\s+default\s+(.*?);?\s*$', re.DOTALL)


def select_published(records: list[PostRecord], now: datetime) -> list[PostRecord]:
    """Drop drafts (date > now) and invalid dates; newest first, ties in input order."""
    published = [r for r in records if r.date is not None and r.date <= now]
    return sorted(published, key=lambda r: r.date, reverse=True)


def build_listing(records: list[PostRecord]) -> str:
    """Render records as a default-exported JS array module."""
    try:
        data = [r.model_dump(mode='json', by_alias=True) for r in records]
        body = json.dumps(data, indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError("listing", e) from e
    return f"{LISTING_HEADER}export default {body};\n"


def load_listing(text: str) -> list[PostRecord]:
    """Parse a listing module produced by build_listing back into records."""
    lines = [line for line in text.splitlines(keepends=True) if not line.startswith('//')]
    m = LISTING_RE.match(''.join(lines))
    if not m:
        raise ValueError("Not a listing module: missing 'export default'")
    try:
        return [PostRecord.model_validate(item) for item in json.loads(m.group(1))]
    except (json.JSONDecodeError, ValidationError) as e:
        raise ValueError(f"Invalid listing data: {e}") from e


def build_feed(records: list[PostRecord], site: SiteInfo, now: datetime) -> str:
    """Render records as an RSS 2.0 document, one <item> per record in order."""
    fg = FeedGenerator()
    fg.title(site.title)
    # feedgen renders the last link() call as the channel <link>
    if site.feed_url:
        fg.link(href=site.feed_url, rel='self')
    fg.link(href=site.url, rel='alternate')
    fg.description(site.description)
    fg.language(site.language)
    fg.generator('mdfeed')
    try:
        fg.lastBuildDate(now)
        for r in records:
            link = join_url(site.url, r.url_path)
            fe = fg.add_entry(order='append')
            fe.title(r.title)
            fe.link(href=link)
            fe.guid(link, permalink=True)
            fe.description(r.description)
            fe.pubDate(r.date)
        return fg.rss_str(pretty=True).decode('utf-8')
    except (TypeError, ValueError) as e:
        raise SerializationError("feed", e) from e


def assemble(records: list[PostRecord], now: datetime, site: SiteInfo) -> tuple[str, str]:
    """Return (listing, feed) for the records published as of now."""
    published = select_published(records, now)
    return build_listing(published), build_feed(published, site, now)
