"""Tests for loading infrastructure records."""

from __future__ import annotations

import pytest

from locatext.enums import LoadStatus
from locatext.localization import (
    DataLoadResult,
    FallbackInfo,
    LoadSummary,
    MappingDataLoader,
)


class TestMappingDataLoader:
    """In-memory loader behaviour."""

    def test_load_and_describe(self) -> None:
        """Known locales load; describe names the source."""
        loader = MappingDataLoader({"en": {"ok": "OK"}}, name="app.sdl")
        assert loader.load("en") == {"ok": "OK"}
        assert loader.describe("en") == "app.sdl:en"

    def test_unknown_locale_raises_key_error(self) -> None:
        """Missing locales raise KeyError (recorded as not found by callers)."""
        with pytest.raises(KeyError):
            MappingDataLoader({}).load("en")

    def test_outer_mapping_snapshot(self) -> None:
        """Locales added to the source dict later are not visible."""
        source: dict[str, dict[str, str]] = {"en": {"ok": "OK"}}
        loader = MappingDataLoader(source)
        source["de"] = {"ok": "OK"}
        with pytest.raises(KeyError):
            loader.load("de")


class TestLoadSummary:
    """Aggregated load results."""

    @pytest.fixture
    def summary(self) -> LoadSummary:
        return LoadSummary(
            results=(
                DataLoadResult("ru", LoadStatus.SUCCESS, entry_count=3),
                DataLoadResult("de", LoadStatus.NOT_FOUND),
                DataLoadResult("fr", LoadStatus.ERROR, error=OSError("locked")),
            )
        )

    def test_counts(self, summary: LoadSummary) -> None:
        """Counts are derived from results."""
        assert summary.total_attempted == 3
        assert summary.successful == 1
        assert summary.not_found == 1
        assert summary.errors == 1
        assert summary.has_errors
        assert not summary.all_successful

    def test_filters(self, summary: LoadSummary) -> None:
        """Filters select by status and locale."""
        assert [r.locale for r in summary.get_errors()] == ["fr"]
        assert [r.locale for r in summary.get_not_found()] == ["de"]
        by_locale = summary.get_by_locale("ru")
        assert by_locale is not None
        assert by_locale.entry_count == 3
        assert summary.get_by_locale("ja") is None

    def test_repr(self, summary: LoadSummary) -> None:
        """repr shows the counts."""
        assert repr(summary) == "LoadSummary(total=3, ok=1, not_found=1, errors=1)"

    def test_empty(self) -> None:
        """An empty summary is trivially successful."""
        assert LoadSummary(results=()).all_successful


class TestFallbackInfo:
    """Fallback event records are immutable values."""

    def test_equality_and_frozen(self) -> None:
        """FallbackInfo compares by value and cannot be modified."""
        info = FallbackInfo("ru", "en", "ok", 1)
        assert info == FallbackInfo("ru", "en", "ok", 1)
        with pytest.raises(AttributeError):
            info.key = "other"  # type: ignore[misc]
