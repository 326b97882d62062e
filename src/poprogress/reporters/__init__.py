"""Reporters module for rendering translation statistics.

Example:
    >>> from poprogress.reporters import get_reporter
    >>>
    >>> reporter = get_reporter("plain", color=True)
    >>> print(reporter.render(stats))
    >>>
    >>> reporter = get_reporter("markdown")
    >>> reporter.write(stats, "TRANSLATIONS.md")
"""

from poprogress.reporters.base import (
    BaseReporter,
    ReporterConfig,
    ReporterError,
)
from poprogress.reporters.factory import get_reporter, list_available_formats, register_reporter

__all__ = [
    # Base classes
    "BaseReporter",
    "ReporterConfig",
    "ReporterError",
    # Factory functions
    "get_reporter",
    "list_available_formats",
    "register_reporter",
]
