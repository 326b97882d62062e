"""Main API functions for poprogress."""

from __future__ import annotations

import logging
from typing import Iterable

from poprogress.catalog import load_catalog
from poprogress.completion import TranslationStats, compute_completion
from poprogress.config import StatsConfig
from poprogress.locator import discover_locales

logger = logging.getLogger(__name__)


def collect_statistics(
    config: StatsConfig | None = None,
    locales: Iterable[str] | None = None,
) -> TranslationStats:
    """Compute the completion of every locale against the reference locale.

    Args:
        config: Run configuration. Defaults to ``StatsConfig.from_env()``.
        locales: Locales to report on. If empty or None, every locale found in
                 ``config.locale_dir`` is used.

    Returns:
        Statistics sorted by locale, without the reference locale.

    Raises:
        DirectoryNotFoundError: If locales must be discovered and the locale
            directory does not exist.
        CatalogNotFoundError: If the reference catalog or the catalog of a
            requested locale does not exist.
    """
    config = config or StatsConfig.from_env()

    selected = list(locales or [])
    if not selected:
        selected = discover_locales(config.locale_dir)

    reference = load_catalog(
        config.catalog_path(config.reference_locale), config.reference_locale
    )

    stats = TranslationStats(reference_locale=config.reference_locale)
    for locale in sorted(set(selected)):
        if locale == config.reference_locale:
            continue
        catalog = load_catalog(config.catalog_path(locale), locale)
        stats.results.append(compute_completion(catalog, reference))

    logger.debug("Computed completion for %d locales", len(stats))
    return stats
