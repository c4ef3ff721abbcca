"""Finder configuration and environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://www.themealdb.com/api/json/v1/1"
ENV_PREFIX = "RECIPE_FINDER_"
SUPPORTED_LOCALES = ("ar", "en")


@dataclass
class FinderConfig:
    """Tunables for the search pipeline."""

    api_base_url: str = DEFAULT_API_BASE_URL
    http_timeout: float | None = None  # None keeps the transport default
    debounce_seconds: float = 0.5
    min_query_length: int = 2
    random_count: int = 12
    ingredient_lookup_limit: int = 20
    category_lookup_limit: int = 15
    local_fallback_count: int = 8
    local_data_path: Path | None = None
    locale: str = "ar"

    @classmethod
    def from_dict(cls, data: dict) -> FinderConfig:
        timeout = data.get("http_timeout")
        data_path = data.get("local_data_path")
        locale = str(data.get("locale", "ar") or "ar")
        if locale not in SUPPORTED_LOCALES:
            logger.warning("Unsupported locale %r, falling back to 'ar'", locale)
            locale = "ar"
        return cls(
            api_base_url=str(data.get("api_base_url") or DEFAULT_API_BASE_URL).rstrip("/"),
            http_timeout=float(timeout) if timeout not in (None, "") else None,
            debounce_seconds=float(data.get("debounce_seconds", 0.5) or 0.5),
            min_query_length=int(data.get("min_query_length", 2) or 2),
            random_count=int(data.get("random_count", 12) or 12),
            ingredient_lookup_limit=int(data.get("ingredient_lookup_limit", 20) or 20),
            category_lookup_limit=int(data.get("category_lookup_limit", 15) or 15),
            local_fallback_count=int(data.get("local_fallback_count", 8) or 8),
            local_data_path=Path(data_path).expanduser() if data_path else None,
            locale=locale,
        )

    @classmethod
    def from_env(cls, environ: dict | None = None) -> FinderConfig:
        """Build a config from ``RECIPE_FINDER_*`` variables."""
        env = os.environ if environ is None else environ
        data: dict = {}
        for name in cls.__dataclass_fields__:
            value = env.get(ENV_PREFIX + name.upper())
            if value is not None:
                data[name] = value
        try:
            return cls.from_dict(data)
        except ValueError as exc:
            logger.warning("Invalid %s* setting (%s); using defaults", ENV_PREFIX, exc)
            return cls()

    def to_dict(self) -> dict:
        return {
            "api_base_url": self.api_base_url,
            "http_timeout": self.http_timeout,
            "debounce_seconds": self.debounce_seconds,
            "min_query_length": self.min_query_length,
            "random_count": self.random_count,
            "ingredient_lookup_limit": self.ingredient_lookup_limit,
            "category_lookup_limit": self.category_lookup_limit,
            "local_fallback_count": self.local_fallback_count,
            "local_data_path": str(self.local_data_path) if self.local_data_path else None,
            "locale": self.locale,
        }
