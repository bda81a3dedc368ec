"""Tests for the sitegen-build command."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from conftest import BASELINE, SITE_CONFIG, SLUGS, make_records
from sitegen.cli import main, resolve_mode
from sitegen.models.build_mode import BuildMode


@pytest.fixture
def project(tmp_path):
    (tmp_path / "site-config.json").write_text(json.dumps(SITE_CONFIG), encoding="utf-8")
    (tmp_path / "firebase-defaults.json").write_text(json.dumps(BASELINE), encoding="utf-8")
    nodes = [
        {"lang": lang, "namespace": namespace, "singleTranslations": {"slug": slug}}
        for lang, namespaces in SLUGS.items()
        for namespace, slug in namespaces.items()
    ]
    (tmp_path / "translations.json").write_text(json.dumps(nodes), encoding="utf-8")
    return tmp_path


def _argv(project, *extra):
    return [
        "--config", str(project / "site-config.json"),
        "--baseline", str(project / "firebase-defaults.json"),
        "--output", str(project / "firebase.json"),
        "--manifest", str(project / "pages.json"),
        *extra,
    ]


class TestMain:
    def test_builds_from_translation_export(self, project):
        code = main(_argv(project, "--translations", str(project / "translations.json")))
        assert code == 0
        pages = json.loads((project / "pages.json").read_text(encoding="utf-8"))
        assert len(pages) == 12
        hosting = json.loads((project / "firebase.json").read_text(encoding="utf-8"))
        assert hosting["hosting"]["redirects"][0] == {"source": "/", "destination": "/en", "type": 301}

    def test_builds_from_endpoint(self, project):
        with patch(
            "sitegen.cli.fetch_translation_records", new=AsyncMock(return_value=make_records())
        ) as fetch:
            code = main(_argv(project, "--endpoint", "https://content.example.com/graphql"))
        assert code == 0
        fetch.assert_awaited_once_with("https://content.example.com/graphql")

    def test_local_preview_mode(self, project):
        main(_argv(project, "--translations", str(project / "translations.json"), "--mode", "local_preview"))
        pages = json.loads((project / "pages.json").read_text(encoding="utf-8"))
        assert pages[5]["matchPath"] == "/*"

    def test_unready_translations_write_nothing(self, project):
        (project / "translations.json").write_text("[]", encoding="utf-8")
        code = main(_argv(project, "--translations", str(project / "translations.json")))
        assert code == 0
        assert not (project / "pages.json").exists()
        assert not (project / "firebase.json").exists()

    def test_missing_baseline_fails(self, project):
        (project / "firebase-defaults.json").unlink()
        code = main(_argv(project, "--translations", str(project / "translations.json")))
        assert code == 1

    def test_unwritable_output_fails(self, project):
        argv = _argv(project, "--translations", str(project / "translations.json"))
        argv[argv.index("--output") + 1] = str(project / "missing-dir" / "firebase.json")
        assert main(argv) == 1

    def test_unwritable_manifest_fails_before_rules_are_written(self, project):
        argv = _argv(project, "--translations", str(project / "translations.json"))
        argv[argv.index("--manifest") + 1] = str(project / "missing-dir" / "pages.json")
        assert main(argv) == 1
        assert not (project / "firebase.json").exists()

    def test_invalid_config_fails(self, project):
        (project / "site-config.json").write_text("{}", encoding="utf-8")
        code = main(_argv(project, "--translations", str(project / "translations.json")))
        assert code == 2


class TestResolveMode:
    def test_explicit_flag_wins(self, monkeypatch):
        monkeypatch.setenv("SITEGEN_ENV", "development")
        assert resolve_mode("production") is BuildMode.PRODUCTION

    def test_development_environment(self, monkeypatch):
        monkeypatch.setenv("SITEGEN_ENV", "development")
        assert resolve_mode(None) is BuildMode.LOCAL_PREVIEW

    def test_defaults_to_production(self, monkeypatch):
        monkeypatch.delenv("SITEGEN_ENV", raising=False)
        assert resolve_mode(None) is BuildMode.PRODUCTION
