"""Tests for configuration loading and factory functions."""

from __future__ import annotations

from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest
from pydantic import ValidationError

from search_coach.config import (
    BingSearchConfig,
    FilterConfig,
    GraphConfig,
    LoggingConfig,
    SearchCoachConfig,
    get_default_config_path,
    load_config,
)
from search_coach.config.factory import (
    create_leaderboard_service,
    create_query_builder,
    create_resolver,
    create_search_service,
    create_searcher,
    create_uri_composer,
    create_validator,
)
from search_coach.filters import FilterValidator
from search_coach.leaderboard import (
    GraphDisplayNameResolver,
    InMemoryUserResponseStore,
    LeaderboardService,
    StaticDisplayNameResolver,
)
from search_coach.query import QueryBuilder, RequestUriComposer
from search_coach.search import BingSearcher, SearchService


class TestConfigModels:
    """Tests for Pydantic config models."""

    def test_bing_search_config_defaults(self) -> None:
        config = BingSearchConfig()
        assert config.type == "bing"
        assert config.api_url == "https://api.bing.microsoft.com/v7.0/search"
        assert config.api_key is None
        assert config.safe_search == "Strict"
        assert config.default_market == "en-US"
        assert config.page_size == 20
        assert config.offset == 0
        assert config.retries == 2

    def test_filter_config_defaults(self) -> None:
        config = FilterConfig()
        assert len(config.markets) == 7
        assert config.domains == (".com", ".org", ".mil", ".gov", ".edu", ".net")
        assert config.no_filter_market == "nf"
        assert config.domain_delimiter == ";"

    def test_graph_config_defaults(self) -> None:
        assert GraphConfig().base_url == "https://graph.microsoft.com/v1.0"

    def test_logging_config_defaults(self) -> None:
        assert LoggingConfig().level == "INFO"

    def test_root_config_defaults(self) -> None:
        config = SearchCoachConfig()
        assert isinstance(config.search, BingSearchConfig)
        assert isinstance(config.filters, FilterConfig)

    def test_configs_are_frozen(self) -> None:
        config = FilterConfig()
        with pytest.raises(ValidationError):
            config.markets = ("en-GB",)  # type: ignore[misc]

    def test_page_size_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            BingSearchConfig(page_size=0)

    def test_delimiter_must_not_be_empty(self) -> None:
        with pytest.raises(ValidationError):
            FilterConfig(domain_delimiter="")


class TestConfigLoader:
    """Tests for YAML config loading."""

    def test_load_config(self) -> None:
        yaml_content = """
search:
  type: bing
  safe_search: Moderate
  default_market: de-DE
  page_size: 10
filters:
  markets: [en-GB, de-DE]
  domains: [.edu]
logging:
  level: DEBUG
"""
        with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write(yaml_content)
            f.flush()
            config = load_config(Path(f.name))

        assert config.search.safe_search == "Moderate"
        assert config.search.default_market == "de-DE"
        assert config.search.page_size == 10
        assert config.filters.markets == ("en-GB", "de-DE")
        assert config.filters.domains == (".edu",)
        assert config.logging.level == "DEBUG"

    def test_load_empty_config_uses_defaults(self) -> None:
        with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
            f.flush()
            config = load_config(f.name)

        assert config == SearchCoachConfig()

    def test_load_invalid_config(self) -> None:
        with NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("search:\n  page_size: -1\n")
            f.flush()
            with pytest.raises(ValidationError):
                load_config(f.name)

    def test_get_default_config_path(self) -> None:
        path = get_default_config_path()
        assert path.name == "default.yaml"
        assert "configs" in str(path)

    def test_load_default_config(self) -> None:
        path = get_default_config_path()
        if path.exists():
            config = load_config(path)
            assert config == SearchCoachConfig()


class TestFactoryFunctions:
    """Tests for component factory functions."""

    def test_create_validator(self) -> None:
        assert isinstance(create_validator(FilterConfig()), FilterValidator)

    def test_create_query_builder(self) -> None:
        config = SearchCoachConfig(search=BingSearchConfig(api_key="config-key"))
        builder = create_query_builder(config)
        assert isinstance(builder, QueryBuilder)

    def test_create_uri_composer(self) -> None:
        assert isinstance(create_uri_composer(BingSearchConfig()), RequestUriComposer)

    def test_create_searcher(self) -> None:
        assert isinstance(create_searcher(BingSearchConfig()), BingSearcher)

    def test_create_resolver(self) -> None:
        resolver = create_resolver(GraphConfig(), access_token="token")
        assert isinstance(resolver, GraphDisplayNameResolver)

    def test_create_search_service(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BING_SEARCH_API_KEY", "test-key")
        service = create_search_service(SearchCoachConfig())
        assert isinstance(service, SearchService)

    def test_create_search_service_without_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("BING_SEARCH_API_KEY", raising=False)
        with pytest.raises(ValueError, match="API key required"):
            create_search_service(SearchCoachConfig())

    def test_create_leaderboard_service(self) -> None:
        service = create_leaderboard_service(
            SearchCoachConfig(),
            InMemoryUserResponseStore(),
            resolver=StaticDisplayNameResolver({}),
        )
        assert isinstance(service, LeaderboardService)

    def test_create_leaderboard_service_defaults_to_graph(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GRAPH_ACCESS_TOKEN", "token")
        service = create_leaderboard_service(SearchCoachConfig(), InMemoryUserResponseStore())
        assert isinstance(service._resolver, GraphDisplayNameResolver)
