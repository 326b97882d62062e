"""Factory functions for creating reporters.

Reporters are looked up by name in a registry. New reporter types can be
registered at runtime.
"""

from __future__ import annotations

from typing import Any, Callable

from poprogress.reporters.base import BaseReporter, ReporterError

# Type for reporter constructor functions
ReporterConstructor = Callable[..., BaseReporter[Any]]

# Registry of reporter constructors
_reporter_registry: dict[str, ReporterConstructor] = {}


def register_reporter(name: str) -> Callable[[ReporterConstructor], ReporterConstructor]:
    """Decorator to register a reporter type.

    Args:
        name: Name to register the reporter under.

    Returns:
        Decorator function.

    Example:
        >>> @register_reporter("csv")
        ... class CSVReporter(BaseReporter):
        ...     pass
    """

    def decorator(cls: ReporterConstructor) -> ReporterConstructor:
        _reporter_registry[name] = cls
        return cls

    return decorator


def get_reporter(format: str, **kwargs: Any) -> BaseReporter[Any]:
    """Create a reporter instance for the specified format.

    Args:
        format: Name of the report format. Built in:
            - "plain": one tab-separated line per locale
            - "markdown": full Markdown report
        **kwargs: Format-specific configuration options.

    Returns:
        Configured reporter instance.

    Raises:
        ReporterError: If the format is unknown.
    """
    name = format.lower()

    if name in _reporter_registry:
        return _reporter_registry[name](**kwargs)

    if name in ("plain", "text", "txt"):
        from poprogress.reporters.plain_reporter import PlainReporter

        return PlainReporter(**kwargs)

    if name in ("markdown", "md"):
        from poprogress.reporters.markdown_reporter import MarkdownReporter

        return MarkdownReporter(**kwargs)

    available = sorted({"plain", "markdown", *_reporter_registry})
    raise ReporterError(
        f"Unknown report format: {format}. Available formats: {', '.join(available)}"
    )


def list_available_formats() -> list[str]:
    """List all available report formats."""
    return sorted({"plain", "markdown", *_reporter_registry})
