"""Contributor lookup for catalog files.

The Markdown report lists who contributed to each catalog. Reporters only
depend on the :class:`AuthorLookup` protocol; :class:`GitAuthorLookup` is the
implementation backed by ``git log``.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Mapping, Protocol, runtime_checkable

from poprogress.errors import ExternalCommandError

logger = logging.getLogger(__name__)


@runtime_checkable
class AuthorLookup(Protocol):
    """Resolve the authors of a file."""

    def lookup(self, path: Path) -> list[str]:
        """Return the ordered, de-duplicated author names of ``path``."""
        ...


class GitAuthorLookup:
    """Author lookup based on the commit history of a git repository.

    Authors are the ``%aN`` names of every commit touching the file, sorted
    and de-duplicated. Failures never propagate: a missing ``git`` binary, a
    path outside a repository or any other non-zero exit yields an empty
    list and a warning.

    Example:
        >>> GitAuthorLookup().lookup(Path("locale/de_DE.UTF-8/LC_MESSAGES/palma.po"))
        ['Jane Doe', 'John Roe']
    """

    def __init__(self, git: str = "git", cwd: str | Path | None = None) -> None:
        self.git = git
        self.cwd = cwd

    def _command(self, path: Path) -> list[str]:
        return [self.git, "log", "--format=format:%aN", "--", str(path)]

    def _run(self, command: list[str]) -> str:
        try:
            result = subprocess.run(
                command,
                cwd=self.cwd,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise ExternalCommandError(command, str(e))

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise ExternalCommandError(
                command, stderr or f"exit code {result.returncode}"
            )
        return result.stdout or ""

    def lookup(self, path: Path) -> list[str]:
        try:
            output = self._run(self._command(path))
        except ExternalCommandError as e:
            logger.warning("Could not determine contributors of %s: %s", path, e.message)
            return []

        return sorted({line.strip() for line in output.splitlines() if line.strip()})


class StaticAuthorLookup:
    """Author lookup backed by a fixed mapping of paths to names."""

    def __init__(self, authors: Mapping[str | Path, list[str]] | None = None) -> None:
        self._authors = {str(k): list(v) for k, v in (authors or {}).items()}

    def lookup(self, path: Path) -> list[str]:
        return sorted(set(self._authors.get(str(path), [])))
