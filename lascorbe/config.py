"""Site configuration loading.

The built-in LASCORBE site is the default; a YAML file can override any of
its fields. The resulting Site is immutable and created once at startup.

Key functions:
- load_config: Read and merge the YAML file over DEFAULT_CONFIG.
- load_site_config: Build a validated Site from the merged configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any
from urllib.parse import urlsplit

import yaml

from .site import LASCORBE, Language, Site, SocialMedia

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "site.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "name": LASCORBE.name,
    "url": LASCORBE.url,
    "description": LASCORBE.description,
    "language": LASCORBE.language.value,
    "image_path": LASCORBE.image_path,
    "twitter_handle": LASCORBE.twitter_handle,
    "rss_feed_path": LASCORBE.rss_feed_path,
    "share_on_twitter": LASCORBE.share_on_twitter,
    "social_media": [
        {"name": s.name, "url": s.url, "icon": s.icon} for s in LASCORBE.social_media
    ],
}


class ConfigError(Exception):
    """Invalid site configuration.

    Attributes:
        key: Configuration key holding the invalid value.
        message: Human-readable error message.
    """

    def __init__(self, key: str, message: str):
        self.key = key
        self.message = message
        super().__init__(f"{key}: {message}")


def load_config(path: Path) -> dict[str, Any]:
    """Load site configuration from a YAML file.

    Args:
        path: YAML file, or a directory containing site.yaml.

    Returns:
        Dictionary containing configuration values, with defaults applied.
    """
    config_path = path / CONFIG_FILENAME if path.is_dir() else path
    config = DEFAULT_CONFIG.copy()
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
        if isinstance(loaded, dict):
            config.update(loaded)
            logger.info("Loaded site configuration from %s", config_path)
        else:
            logger.warning("Ignoring %s: expected a mapping", config_path)
    return config


def site_from_config(config: dict[str, Any]) -> Site:
    """Build a Site from a configuration mapping.

    Args:
        config: Merged configuration values.

    Returns:
        Immutable Site.

    Raises:
        ConfigError: If the URL is not absolute or a value is malformed.
    """
    url = str(config.get("url") or "").rstrip("/")
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ConfigError("url", f"expected an absolute http(s) URL, got {url!r}")

    try:
        language = Language.from_code(str(config.get("language", "en")))
    except ValueError as exc:
        raise ConfigError("language", str(exc)) from exc

    social_media = []
    for entry in config.get("social_media") or []:
        try:
            social_media.append(
                SocialMedia(name=entry["name"], url=entry["url"], icon=entry["icon"])
            )
        except (KeyError, TypeError) as exc:
            raise ConfigError(
                "social_media", f"entries need name, url and icon: {entry!r}"
            ) from exc

    return Site(
        name=str(config.get("name", "")),
        url=url,
        description=str(config.get("description", "")),
        language=language,
        image_path=config.get("image_path"),
        social_media=tuple(social_media),
        twitter_handle=str(config.get("twitter_handle") or ""),
        rss_feed_path=config.get("rss_feed_path"),
        share_on_twitter=bool(config.get("share_on_twitter", True)),
    )


def load_site_config(path: Path) -> Site:
    """Load a Site from a YAML file, falling back to the built-in defaults.

    Args:
        path: YAML file, or a directory containing site.yaml.

    Returns:
        Immutable Site.

    Raises:
        ConfigError: If the merged configuration is invalid.
    """
    return site_from_config(load_config(path))
