"""Completion statistics for translation catalogs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from poprogress.catalog import Catalog, CatalogEntry

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/A"


def format_percent(ratio: float | None) -> str:
    """Format a ratio as a percentage with two decimals.

    Returns ``"N/A"`` for an undefined ratio.
    """
    if ratio is None:
        return NOT_AVAILABLE
    return f"{100 * ratio:.2f}"


@dataclass
class CompletionResult:
    """Completion of one locale against the reference locale.

    Attributes:
        locale: Locale name.
        total: Number of entries in the locale's catalog.
        untranslated: Identifiers counted as untranslated, in catalog order.
        path: Catalog file the result was computed from.
    """

    locale: str
    total: int
    untranslated: list[str] = field(default_factory=list)
    path: Path | None = None

    @property
    def untranslated_count(self) -> int:
        return len(self.untranslated)

    @property
    def translated(self) -> int:
        return self.total - self.untranslated_count

    @property
    def ratio(self) -> float | None:
        """Translated share in [0, 1], or None for an empty catalog."""
        if self.total == 0:
            return None
        return self.translated / self.total

    @property
    def percent(self) -> str:
        return format_percent(self.ratio)

    @property
    def is_complete(self) -> bool:
        return self.total > 0 and not self.untranslated

    def to_dict(self) -> dict[str, Any]:
        return {
            "locale": self.locale,
            "path": str(self.path) if self.path else None,
            "total": self.total,
            "translated": self.translated,
            "untranslated": sorted(self.untranslated),
            "ratio": self.ratio,
        }


@dataclass
class TranslationStats:
    """Completion results for all reported locales.

    Attributes:
        reference_locale: Locale every result was compared against.
        results: One result per locale, sorted by locale, reference excluded.
    """

    reference_locale: str
    results: list[CompletionResult] = field(default_factory=list)

    def __iter__(self):
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    @property
    def locales(self) -> list[str]:
        return [r.locale for r in self.results]

    def get(self, locale: str) -> CompletionResult | None:
        for result in self.results:
            if result.locale == locale:
                return result
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "reference_locale": self.reference_locale,
            "locales": [r.to_dict() for r in self.results],
        }


def is_untranslated(entry: CatalogEntry, reference: Catalog) -> bool:
    """Check whether a translation counts as untranslated.

    A translation is untranslated when it is empty or when it is identical to
    an identifier of the reference catalog.
    """
    return entry.is_empty or entry.msgstr in reference


def compute_completion(catalog: Catalog, reference: Catalog) -> CompletionResult:
    """Compare a locale's catalog against the reference catalog.

    Args:
        catalog: Catalog of the locale being measured.
        reference: Catalog of the reference locale.

    Returns:
        Completion result for the catalog's locale.
    """
    untranslated = [
        entry.msgid
        for entry in catalog.entries()
        if is_untranslated(entry, reference)
    ]
    result = CompletionResult(
        locale=catalog.locale or "",
        total=len(catalog),
        untranslated=untranslated,
        path=catalog.path,
    )
    logger.debug(
        "%s: %d/%d translated (%s%%)",
        result.locale,
        result.translated,
        result.total,
        result.percent,
    )
    return result
