import logging

import pytest

from lascorbe.config import (
    DEFAULT_CONFIG,
    ConfigError,
    load_config,
    load_site_config,
    site_from_config,
)
from lascorbe.site import LASCORBE, Language, SocialMedia


def test_missing_file_yields_default_site(tmp_path):
    assert load_site_config(tmp_path) == LASCORBE
    assert load_config(tmp_path / "nope.yaml") == DEFAULT_CONFIG


def test_yaml_overrides_defaults(tmp_path):
    (tmp_path / "site.yaml").write_text(
        "name: Test Blog\n"
        "url: https://test.example/\n"
        "language: es\n"
        "share_on_twitter: false\n"
        "social_media:\n"
        "  - {name: GitHub, url: 'https://github.com/t', icon: fab fa-github}\n",
        encoding="utf-8",
    )
    site = load_site_config(tmp_path)
    assert site.name == "Test Blog"
    assert site.url == "https://test.example"
    assert site.language is Language.SPANISH
    assert site.share_on_twitter is False
    assert site.description == LASCORBE.description
    assert site.social_media == (SocialMedia.github("t"),)


def test_non_mapping_is_ignored(tmp_path, caplog):
    path = tmp_path / "custom.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="lascorbe.config"):
        site = load_site_config(path)
    assert site == LASCORBE
    assert "expected a mapping" in caplog.text


@pytest.mark.parametrize("url", ["", "lascorbe.com", "/relative", "ftp://x.com"])
def test_invalid_url_is_fatal(url):
    config = dict(DEFAULT_CONFIG, url=url)
    with pytest.raises(ConfigError) as excinfo:
        site_from_config(config)
    assert excinfo.value.key == "url"


def test_invalid_language_and_social_media():
    with pytest.raises(ConfigError, match="language"):
        site_from_config(dict(DEFAULT_CONFIG, language="xx"))
    with pytest.raises(ConfigError, match="social_media"):
        site_from_config(dict(DEFAULT_CONFIG, social_media=[{"name": "x"}]))
