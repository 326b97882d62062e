"""Base classes for reporters.

Reporters turn :class:`~poprogress.completion.TranslationStats` into text.
They can render to strings or write directly to files.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from poprogress.errors import PoProgressError, ReportWriteError

if TYPE_CHECKING:
    from poprogress.completion import TranslationStats


# =============================================================================
# Exceptions
# =============================================================================


class ReporterError(PoProgressError):
    """Base exception for all reporter-related errors."""

    pass


# =============================================================================
# Configuration
# =============================================================================


@dataclass
class ReporterConfig:
    """Base configuration for all reporters.

    Attributes:
        output_path: Optional path to write the report to.
    """

    output_path: str | Path | None = None

    def get_output_path(self) -> Path | None:
        """Get the output path as a Path object."""
        if self.output_path is None:
            return None
        return Path(self.output_path)


ConfigT = TypeVar("ConfigT", bound=ReporterConfig)


# =============================================================================
# Abstract Base Reporter
# =============================================================================


class BaseReporter(ABC, Generic[ConfigT]):
    """Abstract base class for all reporters.

    Example:
        >>> class CountReporter(BaseReporter[ReporterConfig]):
        ...     def render(self, stats: TranslationStats) -> str:
        ...         return str(len(stats))
    """

    name: str = "base"
    file_extension: str = ".txt"

    def __init__(self, config: ConfigT | None = None, **kwargs: Any) -> None:
        """Initialize the reporter with optional configuration.

        Args:
            config: Reporter configuration. If None, uses default configuration.
            **kwargs: Configuration options to override.

        Raises:
            ReporterError: If an option is not a field of the configuration.
        """
        self._config = config or self._default_config()

        for key, value in kwargs.items():
            if not hasattr(self._config, key):
                raise ReporterError(f"Unknown option for {self.name} reporter: {key}")
            setattr(self._config, key, value)

    @classmethod
    @abstractmethod
    def _default_config(cls) -> ConfigT:
        """Create default configuration for this reporter type."""
        pass

    @property
    def config(self) -> ConfigT:
        """Get the reporter configuration."""
        return self._config

    @abstractmethod
    def render(self, stats: "TranslationStats") -> str:
        """Render statistics to a string."""
        pass

    def write(self, stats: "TranslationStats", path: str | Path | None = None) -> Path:
        """Write the rendered report to a file.

        Args:
            stats: The statistics to render.
            path: Optional path to write to. Uses config.output_path if not specified.

        Returns:
            The path where the report was written.

        Raises:
            ReporterError: If no path is specified and config.output_path is None.
            ReportWriteError: If writing fails.
        """
        output_path = Path(path) if path else self._config.get_output_path()

        if output_path is None:
            raise ReporterError(
                "No output path specified. Either pass a path argument "
                "or set output_path in the reporter configuration."
            )

        content = self.render(stats)
        if content and not content.endswith("\n"):
            content += "\n"
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise ReportWriteError(output_path, str(e))

        return output_path
