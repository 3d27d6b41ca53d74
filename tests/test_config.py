"""Tests for routeplan.config."""

from __future__ import annotations

import pytest

from routeplan._errors import ConfigError, TemplateError
from routeplan.config import RoutePlanConfig, Templates
from routeplan.planning.collections import Collection, TagSelector


class TestRoutePlanConfig:
    """RoutePlanConfig — frozen dataclass with sensible defaults."""

    def test_defaults(self) -> None:
        config = RoutePlanConfig()
        assert config.base_path == "/"
        assert config.collections == ()
        assert config.infinite_scroll is False
        assert config.posts_per_page == 12
        assert config.verbose is False
        assert config.amp is False
        assert config.base_url == ""
        assert config.templates == Templates()

    def test_frozen(self) -> None:
        config = RoutePlanConfig()
        with pytest.raises(AttributeError):
            config.posts_per_page = 3  # type: ignore[misc]

    @pytest.mark.parametrize("base", ["blog", "/blog", "/blog/", ""])
    def test_base_path_normalized(self, base: str) -> None:
        expected = "/blog/" if base else "/"
        assert RoutePlanConfig(base_path=base).base_path == expected

    def test_collections_list_becomes_tuple(self) -> None:
        config = RoutePlanConfig(collections=[Collection("/x/", TagSelector("x"))])  # type: ignore[arg-type]
        assert isinstance(config.collections, tuple)

    def test_posts_per_page_must_be_positive(self) -> None:
        with pytest.raises(ConfigError, match="posts_per_page"):
            RoutePlanConfig(posts_per_page=0)

    def test_root_collection_reserved(self) -> None:
        with pytest.raises(ConfigError, match="reserved"):
            RoutePlanConfig(collections=(Collection("/"),))

    def test_duplicate_collection_paths(self) -> None:
        with pytest.raises(ConfigError, match="Duplicate"):
            RoutePlanConfig(collections=(Collection("/x/"), Collection("x")))


class TestTemplates:
    """Templates — component per route kind."""

    def test_require(self) -> None:
        assert Templates().require("post") == "post.html"

    def test_require_missing(self) -> None:
        with pytest.raises(TemplateError, match="'tag'"):
            Templates(tag="").require("tag")

    def test_validate_skips_amp_unless_enabled(self) -> None:
        Templates(amp="").validate()
        with pytest.raises(TemplateError):
            Templates(amp="").validate(amp=True)

    def test_template_error_is_config_error(self) -> None:
        assert issubclass(TemplateError, ConfigError)
