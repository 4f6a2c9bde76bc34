"""Tests for resource loaders, load results, and load_resource_set."""

import json
import threading
from pathlib import Path

import pytest

from locresolve.diagnostics import DiagnosticCode, ResourceLoadError
from locresolve.enums import LoadStatus
from locresolve.localization.loading import (
    LoadSummary,
    PathResourceLoader,
    ResourceLoadResult,
    StaticResourceLoader,
    load_resource_set,
)


def _write(directory: Path, locale: str, document: object) -> None:
    (directory / f"{locale}.json").write_text(json.dumps(document), encoding="utf-8")


class TestPathResourceLoader:
    def test_requires_locale_placeholder(self) -> None:
        with pytest.raises(ValueError, match="placeholder"):
            PathResourceLoader("locales/en.json")

    def test_loads_file(self, tmp_path: Path) -> None:
        _write(tmp_path, "en", {"ui": {"ok": "OK"}})
        loader = PathResourceLoader(f"{tmp_path}/{{locale}}.json")
        assert json.loads(loader.load("en")) == {"ui": {"ok": "OK"}}

    def test_describe_path(self) -> None:
        loader = PathResourceLoader("locales/{locale}/strings.json")
        assert loader.describe_path("de") == "locales/de/strings.json"

    def test_missing_file(self, tmp_path: Path) -> None:
        loader = PathResourceLoader(f"{tmp_path}/{{locale}}.json")
        with pytest.raises(FileNotFoundError):
            loader.load("fr")

    @pytest.mark.parametrize("locale", ["../secret", "a/b", "a\\b", ""])
    def test_unsafe_locale_rejected(self, tmp_path: Path, locale: str) -> None:
        loader = PathResourceLoader(f"{tmp_path}/{{locale}}.json")
        with pytest.raises(ValueError):
            loader.load(locale)

    def test_explicit_root_blocks_escape(self, tmp_path: Path) -> None:
        inside = tmp_path / "inside"
        inside.mkdir()
        _write(tmp_path, "en", {})
        loader = PathResourceLoader(f"{tmp_path}/{{locale}}.json", root_dir=str(inside))
        with pytest.raises(ValueError, match="escapes root"):
            loader.load("en")


class TestStaticResourceLoader:
    def test_load_and_missing(self) -> None:
        loader = StaticResourceLoader({"en": "{}"})
        assert loader.load("en") == "{}"
        with pytest.raises(FileNotFoundError):
            loader.load("de")

    def test_sources_are_copied(self) -> None:
        sources = {"en": "{}"}
        loader = StaticResourceLoader(sources)
        sources["de"] = "{}"
        with pytest.raises(FileNotFoundError):
            loader.load("de")

    def test_describe_path(self) -> None:
        assert StaticResourceLoader({}).describe_path("en") == "<memory>/en"


class TestLoadResourceSet:
    def test_success(self, tmp_path: Path) -> None:
        _write(tmp_path, "en", {"ui": {"ok": "OK"}})
        _write(tmp_path, "de", {"ui": {"ok": "Okay"}})
        loader = PathResourceLoader(f"{tmp_path}/{{locale}}.json")

        store, summary = load_resource_set(["en", "de"], loader)

        assert store.locales == ("en", "de")
        assert store.get_value("de", "ui", "ok") == "Okay"
        assert summary.all_successful
        assert summary.total_attempted == 2
        assert [r.source_path for r in summary.get_successful()] == [
            f"{tmp_path}/en.json",
            f"{tmp_path}/de.json",
        ]

    def test_summary_documents_are_read_only(self) -> None:
        loader = StaticResourceLoader({"en": '{"ui": {"ok": "OK"}}'})
        store, summary = load_resource_set(["en"], loader)
        [result] = summary.get_successful()
        assert result.document is not None
        with pytest.raises(TypeError):
            result.document["ui"]["ok"] = "changed"  # type: ignore[index]
        assert store.get_value("en", "ui", "ok") == "OK"

    def test_failures_are_reported_not_raised(self) -> None:
        loader = StaticResourceLoader({
            "en": '{"ui": {"ok": "OK"}}',
            "de": "{broken",
            "it": '["not", "an", "object"]',
        })

        store, summary = load_resource_set(["en", "de", "it", "fr"], loader)

        assert store.locales == ("en",)
        assert (summary.successful, summary.errors, summary.not_found) == (1, 2, 1)
        assert summary.has_errors
        assert not summary.all_successful

        codes = {r.locale: r.error.diagnostic.code for r in summary.results if r.error}
        assert codes == {
            "de": DiagnosticCode.RESOURCE_DECODE_FAILED,
            "it": DiagnosticCode.RESOURCE_NOT_MAPPING,
            "fr": DiagnosticCode.RESOURCE_NOT_FOUND,
        }
        [missing] = summary.get_not_found()
        assert missing.locale == "fr"
        assert isinstance(missing.error, ResourceLoadError)
        assert missing.error.locale == "fr"

    def test_read_failure_is_error(self) -> None:
        class BrokenLoader:
            def load(self, locale: str) -> str:
                raise PermissionError(f"denied: {locale}")

            def describe_path(self, locale: str) -> str:
                return f"broken/{locale}"

        _, summary = load_resource_set(["en"], BrokenLoader())
        [result] = summary.get_errors()
        assert result.status == LoadStatus.ERROR
        assert result.error is not None
        assert result.error.diagnostic is not None
        assert result.error.diagnostic.code == DiagnosticCode.RESOURCE_READ_FAILED
        assert result.source_path == "broken/en"

    def test_unsafe_locale_is_error(self, tmp_path: Path) -> None:
        loader = PathResourceLoader(f"{tmp_path}/{{locale}}.json")
        store, summary = load_resource_set(["../etc"], loader)
        assert len(store) == 0
        assert summary.errors == 1

    def test_log_levels(self, caplog: pytest.LogCaptureFixture) -> None:
        loader = StaticResourceLoader({"de": "nope"})
        with caplog.at_level("DEBUG", logger="locresolve.localization.loading"):
            load_resource_set(["de", "fr"], loader)
        levels = {record.levelname for record in caplog.records if "Failed to load" in record.message}
        assert levels == {"ERROR", "WARNING"}
        assert any("Resource store built" in record.message for record in caplog.records)

    def test_duplicate_locales_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            load_resource_set(["en", "en"], StaticResourceLoader({"en": "{}"}))

    def test_max_workers_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="max_workers"):
            load_resource_set(["en"], StaticResourceLoader({"en": "{}"}), max_workers=0)

    def test_parallel_loading_preserves_order(self) -> None:
        locales = [f"l{index}" for index in range(12)]
        seen_threads: set[int] = set()
        barrier = threading.Barrier(2, timeout=5)

        class SlowLoader:
            def load(self, locale: str) -> str:
                seen_threads.add(threading.get_ident())
                if locale in ("l0", "l1"):
                    barrier.wait()
                return json.dumps({"ui": {"name": locale}})

            def describe_path(self, locale: str) -> str:
                return locale

        store, summary = load_resource_set(locales, SlowLoader(), max_workers=4)

        assert store.locales == tuple(locales)
        assert [r.locale for r in summary.results] == locales
        assert len(seen_threads) >= 2

    def test_empty_set(self) -> None:
        store, summary = load_resource_set([], StaticResourceLoader({}))
        assert len(store) == 0
        assert summary.total_attempted == 0
        assert summary.all_successful


class TestLoadSummary:
    def test_repr(self) -> None:
        summary = LoadSummary(
            results=(
                ResourceLoadResult(locale="en", status=LoadStatus.SUCCESS, document={}),
                ResourceLoadResult(locale="de", status=LoadStatus.NOT_FOUND),
            )
        )
        assert repr(summary) == "LoadSummary(total=2, ok=1, not_found=1, errors=0)"

    def test_result_flags(self) -> None:
        result = ResourceLoadResult(locale="en", status=LoadStatus.ERROR)
        assert (result.is_success, result.is_not_found, result.is_error) == (False, False, True)
