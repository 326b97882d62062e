"""Configuration for a statistics run."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from poprogress.locator import catalog_path

LOCALEDIR_ENV = "LOCALEDIR"
DEFAULT_LOCALE_DIR = "locale"
DEFAULT_DOMAIN = "palma"
DEFAULT_REFERENCE_LOCALE = "en_US"


@dataclass
class StatsConfig:
    """Settings shared by every stage of the pipeline.

    Attributes:
        locale_dir: Base directory holding the locale catalogs.
        domain: Gettext domain, i.e. the catalog file name without ``.po``.
        reference_locale: Locale other locales are compared against.
        color: Colorize percentages in plain output.
        markdown: Produce the Markdown report instead of plain lines.
        output_path: Optional file to write the report to.
    """

    locale_dir: str | Path = DEFAULT_LOCALE_DIR
    domain: str = DEFAULT_DOMAIN
    reference_locale: str = DEFAULT_REFERENCE_LOCALE
    color: bool = False
    markdown: bool = False
    output_path: str | Path | None = None

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: object,
    ) -> "StatsConfig":
        """Create a configuration honouring the ``LOCALEDIR`` variable.

        Args:
            environ: Environment to read, defaults to ``os.environ``.
            **overrides: Field values taking precedence over the environment.
        """
        env = os.environ if environ is None else environ
        config = cls(locale_dir=env.get(LOCALEDIR_ENV) or DEFAULT_LOCALE_DIR)
        for key, value in overrides.items():
            if not hasattr(config, key):
                raise TypeError(f"Unknown configuration option: {key}")
            setattr(config, key, value)
        return config

    def catalog_path(self, locale: str) -> Path:
        """Path of the catalog file of ``locale``."""
        return catalog_path(self.locale_dir, locale, self.domain)

    def get_output_path(self) -> Path | None:
        if self.output_path is None:
            return None
        return Path(self.output_path)
