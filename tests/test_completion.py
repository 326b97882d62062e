"""Tests for completion statistics."""

from pathlib import Path

import pytest

from poprogress.catalog import Catalog, CatalogEntry
from poprogress.completion import (
    CompletionResult,
    TranslationStats,
    compute_completion,
    format_percent,
    is_untranslated,
)


@pytest.fixture
def reference() -> Catalog:
    return Catalog(messages={"a": "ref-a"}, locale="en_US")


class TestComputeCompletion:
    """Tests for classifying entries as translated or untranslated."""

    def test_empty_value_is_untranslated(self, reference: Catalog) -> None:
        catalog = Catalog(messages={"a": "translated-a", "b": ""}, locale="de_DE")

        result = compute_completion(catalog, reference)

        assert result.locale == "de_DE"
        assert result.total == 2
        assert result.untranslated == ["b"]
        assert result.translated == 1
        assert result.ratio == 0.5

    def test_value_matching_reference_identifier_is_untranslated(self) -> None:
        reference = Catalog(messages={"a": "A", "b": "B"})
        catalog = Catalog(messages={"x": "a", "y": "Ypsilon"})

        result = compute_completion(catalog, reference)

        assert result.untranslated == ["x"]

    def test_value_matching_reference_value_is_translated(self) -> None:
        reference = Catalog(messages={"a": "A"})
        catalog = Catalog(messages={"a": "A"})

        result = compute_completion(catalog, reference)

        assert result.untranslated == []
        assert result.ratio == 1.0

    def test_fully_translated(self, reference: Catalog) -> None:
        catalog = Catalog(messages={"a": "x", "b": "y"})

        result = compute_completion(catalog, reference)

        assert result.is_complete
        assert result.ratio == 1.0
        assert result.percent == "100.00"

    def test_empty_catalog_has_undefined_ratio(self, reference: Catalog) -> None:
        result = compute_completion(Catalog(locale="de_DE"), reference)

        assert result.total == 0
        assert result.ratio is None
        assert result.percent == "N/A"
        assert not result.is_complete

    def test_path_carried_over(self, reference: Catalog) -> None:
        path = Path("locale/de_DE.UTF-8/LC_MESSAGES/palma.po")
        catalog = Catalog(messages={"a": "b"}, locale="de_DE", path=path)

        assert compute_completion(catalog, reference).path == path

    @pytest.mark.parametrize(
        "messages",
        [
            {"a": ""},
            {"a": "x"},
            {"a": "x", "b": "", "c": "a"},
            {str(i): ("" if i % 3 else "t") for i in range(30)},
        ],
    )
    def test_ratio_bounds(self, reference: Catalog, messages: dict[str, str]) -> None:
        result = compute_completion(Catalog(messages=dict(messages)), reference)

        assert 0.0 <= result.ratio <= 1.0
        assert (result.ratio == 1.0) == (result.untranslated_count == 0)

    def test_is_untranslated(self, reference: Catalog) -> None:
        assert is_untranslated(CatalogEntry("x", ""), reference)
        assert is_untranslated(CatalogEntry("x", "a"), reference)
        assert not is_untranslated(CatalogEntry("x", "ref-a"), reference)


class TestFormatting:
    """Tests for percentage formatting and serialization."""

    def test_format_percent(self) -> None:
        assert format_percent(0.5) == "50.00"
        assert format_percent(19 / 20) == "95.00"
        assert format_percent(1 / 3) == "33.33"
        assert format_percent(None) == "N/A"

    def test_result_to_dict(self) -> None:
        result = CompletionResult(locale="de_DE", total=4, untranslated=["z", "b"])

        data = result.to_dict()

        assert data["translated"] == 2
        assert data["untranslated"] == ["b", "z"]
        assert data["ratio"] == 0.5

    def test_stats_lookup(self) -> None:
        stats = TranslationStats(
            reference_locale="en_US",
            results=[
                CompletionResult(locale="de_DE", total=1),
                CompletionResult(locale="fr_FR", total=2, untranslated=["x"]),
            ],
        )

        assert len(stats) == 2
        assert stats.locales == ["de_DE", "fr_FR"]
        assert stats.get("fr_FR").translated == 1
        assert stats.get("xx_XX") is None
        assert stats.to_dict()["reference_locale"] == "en_US"
