"""Markdown format reporter.

This module renders translation statistics as a Markdown document that can
be published on GitHub, GitLab or a static site generator. The document has
a fixed header, a completion table and one section per locale listing its
contributors and missing strings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from poprogress.contributors import AuthorLookup, GitAuthorLookup
from poprogress.reporters.base import BaseReporter, ReporterConfig

if TYPE_CHECKING:
    from poprogress.completion import CompletionResult, TranslationStats

HEADER_TEMPLATE = """\
# Translation Stats

> **DO NOT EDIT!**
>
> This file is generated by `{command}`
"""


@dataclass
class MarkdownReporterConfig(ReporterConfig):
    """Configuration for Markdown reporter.

    Attributes:
        command: Command line quoted in the "do not edit" header.
        author_lookup: Resolves the contributors of a catalog file.
    """

    command: str = "poprogress --markdown"
    author_lookup: AuthorLookup = field(default_factory=GitAuthorLookup)


class MarkdownReporter(BaseReporter[MarkdownReporterConfig]):
    """Markdown format reporter for translation statistics.

    Example:
        >>> reporter = MarkdownReporter(author_lookup=StaticAuthorLookup())
        >>> markdown = reporter.render(stats)
        >>> reporter.write(stats, "TRANSLATIONS.md")
    """

    name = "markdown"
    file_extension = ".md"

    @classmethod
    def _default_config(cls) -> MarkdownReporterConfig:
        """Create default configuration."""
        return MarkdownReporterConfig()

    def _header(self) -> str:
        return HEADER_TEMPLATE.format(command=self._config.command)

    def _table(self, stats: "TranslationStats") -> str:
        lines = ["|Locale|Completion|", "|---|---|"]
        for result in stats:
            lines.append(f"|[{result.locale}](#{result.locale.lower()})|{result.percent}%|")
        return "\n".join(lines)

    def _contributors(self, result: "CompletionResult") -> list[str]:
        if result.path is None:
            return []
        return self._config.author_lookup.lookup(result.path)

    def _section(self, result: "CompletionResult") -> str:
        """Render the section of one locale.

        Args:
            result: Completion result of the locale.

        Returns:
            Markdown for the locale, starting with an empty line.
        """
        parts = [
            f"\n## {result.locale}\n\n",
            f"Completion: **{result.percent}%** "
            f"({result.translated} / {result.total} strings)\n\n",
            "Contributors:\n\n",
        ]
        parts.extend(f"  * {name}\n" for name in self._contributors(result))

        if result.untranslated:
            parts.append("\nMissing:\n")
            parts.extend(f"  * `{msgid}`\n" for msgid in sorted(result.untranslated))

        return "".join(parts)

    def render(self, stats: "TranslationStats") -> str:
        """Render translation statistics as Markdown.

        Args:
            stats: The statistics to render.

        Returns:
            Markdown document.
        """
        body = "".join(self._section(result) for result in stats)
        return "\n".join([self._header(), self._table(stats), body])
