"""Plain text reporter.

One tab-separated line per locale, suitable for a shell or a git hook::

    de_DE	95.00%	(19 / 20)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.color import ColorSystem
from rich.style import Style

from poprogress.completion import NOT_AVAILABLE
from poprogress.reporters.base import BaseReporter, ReporterConfig

if TYPE_CHECKING:
    from poprogress.completion import CompletionResult, TranslationStats


def percent_style(percent: str) -> str | None:
    """Pick the style for a formatted percentage.

    Thresholds apply to the two-decimal value, so ``99.999`` rounds to
    ``100.00`` and is shown as complete.

    Returns:
        A Rich style definition, or None when the percentage is undefined.
    """
    if percent == NOT_AVAILABLE:
        return None
    value = float(percent)
    if value == 100:
        return "bold green"
    if value > 90:
        return "green"
    if value > 50:
        return "yellow"
    return "red"


def colorize(text: str, style: str | None) -> str:
    """Wrap text in the ANSI codes of a Rich style."""
    if style is None:
        return text
    return Style.parse(style).render(text, color_system=ColorSystem.STANDARD)


@dataclass
class PlainReporterConfig(ReporterConfig):
    """Configuration for the plain reporter.

    Attributes:
        color: Whether to colorize percentages.
    """

    color: bool = False


class PlainReporter(BaseReporter[PlainReporterConfig]):
    """Plain text reporter.

    Example:
        >>> reporter = PlainReporter(color=True)
        >>> print(reporter.render(stats))
    """

    name = "plain"
    file_extension = ".txt"

    @classmethod
    def _default_config(cls) -> PlainReporterConfig:
        return PlainReporterConfig()

    def format_percent(self, result: "CompletionResult") -> str:
        percent = result.percent
        if not self._config.color:
            return percent
        return colorize(percent, percent_style(percent))

    def format_line(self, result: "CompletionResult") -> str:
        return (
            f"{result.locale}\t{self.format_percent(result)}%\t"
            f"({result.translated} / {result.total})"
        )

    def render(self, stats: "TranslationStats") -> str:
        return "\n".join(self.format_line(result) for result in stats)
