"""Tests for the page, config and route models."""

import pytest
from pydantic import ValidationError

from conftest import SITE_CONFIG
from sitegen.models.page import PageDefinition, SiteConfig
from sitegen.models.route import AlternateLink, RouteContext, RouteDescriptor


class TestSiteConfig:
    def test_parses_config_aliases(self):
        config = SiteConfig.model_validate(SITE_CONFIG)
        assert config.languages == ["en", "de"]
        assert config.generate_hosting_rules is True
        assert config.pages[2].meta_robots == "noindex, nofollow"
        assert config.pages[1].children[0].children[0].name == "jobs"

    def test_hosting_rules_default_off(self):
        config = SiteConfig.model_validate({"languages": ["en"], "pages": []})
        assert config.generate_hosting_rules is False

    def test_requires_a_language(self):
        with pytest.raises(ValidationError):
            SiteConfig.model_validate({"languages": [], "pages": []})

    def test_rejects_duplicate_languages(self):
        with pytest.raises(ValidationError):
            SiteConfig.model_validate({"languages": ["en", "en"], "pages": []})

    def test_rejects_duplicate_root_pages(self):
        page = {"name": "about", "component": "about.js"}
        with pytest.raises(ValidationError):
            SiteConfig.model_validate({"languages": ["en"], "pages": [page, page]})

    def test_rejects_duplicate_siblings(self):
        child = {"name": "team", "component": "team.js"}
        with pytest.raises(ValidationError):
            PageDefinition.model_validate(
                {"name": "about", "component": "about.js", "children": [child, child]}
            )

    def test_same_name_in_different_scopes_is_allowed(self):
        page = PageDefinition.model_validate(
            {
                "name": "about",
                "component": "about.js",
                "children": [{"name": "about", "component": "about.js"}],
            }
        )
        assert page.children[0].name == "about"


class TestRouteDescriptor:
    def _route(self, **kwargs) -> RouteDescriptor:
        return RouteDescriptor(
            path="/en/about-us",
            component="about.js",
            context=RouteContext(
                lang="en",
                namespaces=["about"],
                alternate_links=[AlternateLink(path="/en/about-us", lang="en")],
                **kwargs,
            ),
        )

    def test_unset_properties_are_omitted(self):
        page = self._route().to_page()
        assert "metaRobots" not in page["context"]
        assert "matchPath" not in page

    def test_uses_framework_property_names(self):
        page = self._route(meta_robots="noindex").to_page()
        assert page["context"]["metaRobots"] == "noindex"
        assert page["context"]["alternateLinks"] == [{"path": "/en/about-us", "lang": "en"}]
