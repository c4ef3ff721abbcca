"""Tests for finder configuration."""

from pathlib import Path

from recipe_finder.core.config import DEFAULT_API_BASE_URL, FinderConfig


class TestFinderConfig:
    def test_config_defaults(self):
        config = FinderConfig()

        assert config.api_base_url == DEFAULT_API_BASE_URL
        assert config.http_timeout is None
        assert config.debounce_seconds == 0.5
        assert config.min_query_length == 2
        assert config.random_count == 12
        assert config.ingredient_lookup_limit == 20
        assert config.category_lookup_limit == 15
        assert config.local_fallback_count == 8
        assert config.locale == "ar"

    def test_config_from_dict(self):
        config = FinderConfig.from_dict({
            "http_timeout": "2.5",
            "random_count": 4,
            "local_data_path": "/tmp/recipes.json",
            "locale": "en",
        })

        assert config.http_timeout == 2.5
        assert config.random_count == 4
        assert config.local_data_path == Path("/tmp/recipes.json")
        assert config.locale == "en"

    def test_unknown_locale_falls_back(self):
        assert FinderConfig.from_dict({"locale": "xx"}).locale == "ar"

    def test_from_env(self):
        env = {
            "RECIPE_FINDER_API_BASE_URL": "https://mirror.test/api/",
            "RECIPE_FINDER_DEBOUNCE_SECONDS": "0.25",
            "UNRELATED": "1",
        }
        config = FinderConfig.from_env(env)

        assert config.api_base_url == "https://mirror.test/api"
        assert config.debounce_seconds == 0.25

    def test_invalid_env_uses_defaults(self):
        config = FinderConfig.from_env({"RECIPE_FINDER_RANDOM_COUNT": "many"})
        assert config == FinderConfig()

    def test_round_trip(self):
        config = FinderConfig(random_count=6, locale="en")
        assert FinderConfig.from_dict(config.to_dict()) == config
