"""CLI command implementations"""

from datetime import datetime, timezone
from typing import Annotated, Optional

import typer

from mdfeed.config import Settings, configure_logging, load_config
from mdfeed.core.pipeline import collect_posts, run_build
from mdfeed.errors import MdfeedError


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None, verbose: bool = False) -> Settings:
    """Load config and set up logging with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
        configure_logging("DEBUG" if verbose else settings.log_level)
    except ValueError as e:
        _fail(str(e))
    return settings


def _status(date: Optional[datetime], now: datetime) -> str:
    if date is None:
        return "invalid-date"
    return "draft" if date > now else "published"


def build_cmd(
    posts: Annotated[Optional[str], typer.Option("--posts-dir", help="Directory scanned for posts")] = None,
    listing: Annotated[Optional[str], typer.Option("--listing-path", help="Generated listing module")] = None,
    feed: Annotated[Optional[str], typer.Option("--feed-path", help="Generated RSS feed")] = None,
    site_url: Annotated[Optional[str], typer.Option("--site-url", help="Base URL for feed links")] = None,
    strict_dates: Annotated[bool, typer.Option("--strict-dates", help="Fail on unparseable dates")] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log scanned paths and records")] = False,
    ):
    """Scan posts, then write the listing module and RSS feed."""
    settings = _settings(overrides={
        "posts_dir": posts, "listing_path": listing, "feed_path": feed,
        "site_url": site_url, "strict_dates": strict_dates or None,
    }, verbose=verbose)
    try:
        result = run_build(settings)
    except MdfeedError as e:
        _fail(str(e))
    typer.echo(f"Saved {len(result.published)} posts in {result.listing_path}")
    typer.echo(f"Saved RSS feed to {result.feed_path}")


def list_cmd(
    posts: Annotated[Optional[str], typer.Option("--posts-dir", help="Directory scanned for posts")] = None,
    show_all: Annotated[bool, typer.Option("--all", help="Include drafts and invalid dates")] = False,
    ):
    """Print posts newest first without writing any files."""
    settings = _settings(overrides={"posts_dir": posts})
    now = datetime.now(timezone.utc)
    try:
        records = collect_posts(
            settings.posts_dir, settings.extension, settings.pages_root,
            settings.parser_config, settings.strict_dates, now,
        )
    except MdfeedError as e:
        _fail(str(e))

    floor = datetime.min.replace(tzinfo=timezone.utc)
    shown = 0
    for r in sorted(records, key=lambda r: r.date or floor, reverse=True):
        status = _status(r.date, now)
        if status != "published" and not show_all:
            continue
        stamp = r.date.date().isoformat() if r.date else "----------"
        suffix = f"  [{status}]" if status != "published" else ""
        typer.echo(f"{stamp}  {r.url_path}  {r.title}{suffix}")
        shown += 1
    if not shown:
        typer.echo("No posts found.")
