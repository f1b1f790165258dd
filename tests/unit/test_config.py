"""Unit tests for config.py"""

import logging

import pytest

from mdfeed.config import configure_logging, load_config


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from an empty directory so no stray config.yaml is read."""
    monkeypatch.chdir(tmp_path)


def test_load_config_defaults():
    """Settings defaults are used when no config.yaml or CLI override exists."""
    settings = load_config()
    assert settings.posts_dir == "pages/posts"
    assert settings.extension == ".mdx"
    assert settings.listing_path == "pages/posts/index.gen.js"
    assert settings.feed_path == "public/static/blog-rss.xml"
    assert settings.strict_dates is False


def test_load_config_reads_config_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("site_url: 'https://blog.example.com'\nstrict_dates: true\n")
    settings = load_config()
    assert settings.site_url == "https://blog.example.com"
    assert settings.strict_dates is True


def test_load_config_cli_overrides_config_yaml(tmp_path):
    """A non-None CLI override beats config.yaml."""
    (tmp_path / "config.yaml").write_text("posts_dir: content/posts\n")
    settings = load_config(overrides={"posts_dir": "other", "feed_path": None})
    assert settings.posts_dir == "other"
    assert settings.feed_path == "public/static/blog-rss.xml"


def test_load_config_ignores_environment(monkeypatch):
    """Environment variables are not a configuration source."""
    monkeypatch.setenv("MDFEED_POSTS_DIR", "from-env")
    assert load_config().posts_dir == "pages/posts"


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_non_mapping(tmp_path):
    (tmp_path / "config.yaml").write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


def test_load_config_rejects_empty_extension():
    """Field constraints are enforced (pydantic errors are ValueErrors)."""
    with pytest.raises(ValueError):
        load_config(overrides={"extension": ""})


def test_site_info():
    """site() builds feed channel metadata and the self link."""
    site = load_config(overrides={"site_url": "https://example.com/", "site_title": "Mine"}).site()
    assert site.title == "Mine"
    assert site.url == "https://example.com/"
    assert site.feed_url == "https://example.com/static/blog-rss.xml"


def test_configure_logging_sets_level():
    configure_logging("debug")
    assert logging.getLogger().level == logging.DEBUG
    configure_logging("WARNING")
    assert logging.getLogger().level == logging.WARNING


def test_configure_logging_invalid_level():
    with pytest.raises(ValueError, match="Invalid log_level"):
        configure_logging("LOUD")
