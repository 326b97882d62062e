"""poprogress - translation completion statistics for gettext catalogs."""

from poprogress.api import collect_statistics
from poprogress.catalog import Catalog, CatalogEntry, CatalogParser, load_catalog, parse_catalog
from poprogress.completion import CompletionResult, TranslationStats, compute_completion
from poprogress.config import StatsConfig
from poprogress.contributors import AuthorLookup, GitAuthorLookup, StaticAuthorLookup
from poprogress.errors import (
    CatalogNotFoundError,
    DirectoryNotFoundError,
    PoProgressError,
)
from poprogress.locator import catalog_path, discover_locales

# Version: Single source of truth from pyproject.toml
try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("poprogress")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"

__all__ = [
    # Pipeline
    "collect_statistics",
    "StatsConfig",
    # Catalogs
    "Catalog",
    "CatalogEntry",
    "CatalogParser",
    "load_catalog",
    "parse_catalog",
    "catalog_path",
    "discover_locales",
    # Completion
    "CompletionResult",
    "TranslationStats",
    "compute_completion",
    # Contributors
    "AuthorLookup",
    "GitAuthorLookup",
    "StaticAuthorLookup",
    # Errors
    "PoProgressError",
    "DirectoryNotFoundError",
    "CatalogNotFoundError",
    "__version__",
]
