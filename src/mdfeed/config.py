"""Application configuration: settings schema and config.yaml loader"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from mdfeed.core.models import SiteInfo
from mdfeed.core.utils.urls import join_url


CONFIG_FILE = "config.yaml"
PUBLIC_DIR = "public"


class Settings(BaseModel):
    app_name:      str = "mdfeed"
    posts_dir:     str = Field(default="pages/posts", description="Root directory scanned for posts")
    extension:     str = Field(default=".mdx", min_length=1, description="Case-sensitive post file suffix")
    pages_root:    str = Field(default="pages", description="Prefix stripped from file paths to form URL paths")
    listing_path:  str = Field(default="pages/posts/index.gen.js", description="Generated listing module")
    feed_path:     str = Field(default="public/static/blog-rss.xml", description="Generated RSS 2.0 feed")
    parser_config: str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    strict_dates:  bool = Field(default=False, description="Fail on missing/unparseable meta.date")
    log_level:     str = Field(default="INFO", description="DEBUG, INFO, WARNING or ERROR")
    site_title:       str = "Blog"
    site_url:         str = "http://localhost:3000"
    site_description: str = "Latest posts"
    site_language:    str = "en"

    def site(self) -> SiteInfo:
        """Channel-level feed metadata; files under public/ are served from the site root."""
        parts = Path(self.feed_path).parts
        served = Path(*parts[1:]) if len(parts) > 1 and parts[0] == PUBLIC_DIR else Path(self.feed_path)
        return SiteInfo(
            title=self.site_title,
            url=self.site_url,
            description=self.site_description,
            language=self.site_language,
            feed_url=join_url(self.site_url, served.as_posix()),
        )


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)


def configure_logging(level_name: str) -> None:
    """Install the root handler at the named level."""
    level = getattr(logging, (level_name or "INFO").upper().strip(), None)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log_level: {level_name!r} (expected DEBUG/INFO/WARNING/ERROR)")
    logging.basicConfig(format="%(levelname)s: %(message)s")
    logging.getLogger().setLevel(level)
