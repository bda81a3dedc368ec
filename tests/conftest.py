"""Shared site fixtures: two languages, a three-level page tree, and its slugs."""

import pytest

from sitegen.models.page import SiteConfig
from sitegen.models.translation import TranslationRecord

SITE_CONFIG = {
    "languages": ["en", "de"],
    "generateFirebaseHostingRules": True,
    "pages": [
        {
            "name": "home",
            "component": "src/templates/home.js",
            "namespaces": ["common", "home"],
        },
        {
            "name": "about",
            "component": "src/templates/about.js",
            "namespaces": ["common", "about"],
            "children": [
                {
                    "name": "team",
                    "component": "src/templates/team.js",
                    "namespaces": ["common", "team"],
                    "children": [
                        {
                            "name": "jobs",
                            "component": "src/templates/jobs.js",
                            "namespaces": ["common", "jobs"],
                        }
                    ],
                }
            ],
        },
        {
            "name": "imprint",
            "component": "src/templates/imprint.js",
            "namespaces": ["common", "imprint"],
            "metaRobots": "noindex, nofollow",
        },
        {
            "name": "404",
            "component": "src/templates/404.js",
            "namespaces": ["common", "404"],
            "metaRobots": "noindex",
        },
    ],
}

SLUGS = {
    "en": {
        "common": None,
        "home": None,
        "about": "about-us",
        "team": "team",
        "jobs": "jobs",
        "imprint": "imprint",
        "404": "404",
    },
    "de": {
        "common": None,
        "home": None,
        "about": "ueber-uns",
        "team": "mannschaft",
        "jobs": "stellen",
        "imprint": "impressum",
        "404": "404",
    },
}

BASELINE = {
    "hosting": {
        "public": "public",
        "ignore": ["firebase.json", "**/.*"],
        "redirects": [{"source": "/", "destination": "/en", "type": 301}],
        "rewrites": [{"source": "/api/**", "function": "api"}],
        "cleanUrls": True,
    }
}


def make_records(slugs=SLUGS):
    return [
        TranslationRecord(lang=lang, namespace=namespace, slug=slug)
        for lang, namespaces in slugs.items()
        for namespace, slug in namespaces.items()
    ]


@pytest.fixture
def site_config() -> SiteConfig:
    return SiteConfig.model_validate(SITE_CONFIG)


@pytest.fixture
def records():
    return make_records()


@pytest.fixture
def slug_table():
    return {lang: dict(namespaces) for lang, namespaces in SLUGS.items()}
