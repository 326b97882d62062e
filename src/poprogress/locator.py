"""Discovery of locale catalogs on disk.

Catalogs live in a gettext-style tree::

    {locale_dir}/{locale}.UTF-8/LC_MESSAGES/{domain}.po
"""

from __future__ import annotations

import logging
from pathlib import Path

from poprogress.errors import DirectoryNotFoundError

logger = logging.getLogger(__name__)

CATALOG_TEMPLATE = "{locale}.UTF-8/LC_MESSAGES/{domain}.po"


def catalog_path(locale_dir: str | Path, locale: str, domain: str) -> Path:
    """Build the conventional catalog path of a locale."""
    return Path(locale_dir) / CATALOG_TEMPLATE.format(locale=locale, domain=domain)


def discover_locales(locale_dir: str | Path) -> list[str]:
    """List the locales present in a locale directory.

    Hidden entries are skipped and every name is cut at its first ``.``, so
    ``de_DE.UTF-8`` yields ``de_DE``.

    Args:
        locale_dir: Base directory to scan.

    Returns:
        Sorted, de-duplicated locale names.

    Raises:
        DirectoryNotFoundError: If the directory does not exist.
    """
    base = Path(locale_dir)
    if not base.is_dir():
        raise DirectoryNotFoundError(base)

    locales = {
        entry.name.split(".", 1)[0]
        for entry in base.iterdir()
        if not entry.name.startswith(".")
    }
    logger.debug("Discovered %d locales in %s", len(locales), base)
    return sorted(locales)
