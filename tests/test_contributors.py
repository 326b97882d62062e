"""Tests for contributor lookups."""

import subprocess
from pathlib import Path
from unittest.mock import patch

from poprogress.contributors import AuthorLookup, GitAuthorLookup, StaticAuthorLookup


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


class TestGitAuthorLookup:
    """Tests for the git-backed lookup."""

    def test_sorted_unique_authors(self) -> None:
        output = "Zoe Zed\nAnna Alpha\nZoe Zed\n\nBert Beta"
        with patch("poprogress.contributors.subprocess.run", return_value=_completed(stdout=output)) as run:
            authors = GitAuthorLookup().lookup(Path("de.po"))

        assert authors == ["Anna Alpha", "Bert Beta", "Zoe Zed"]
        command = run.call_args.args[0]
        assert command == ["git", "log", "--format=format:%aN", "--", "de.po"]

    def test_non_zero_exit_yields_empty_list(self, caplog) -> None:
        result = _completed(returncode=128, stderr="fatal: not a git repository")
        with patch("poprogress.contributors.subprocess.run", return_value=result):
            authors = GitAuthorLookup().lookup(Path("de.po"))

        assert authors == []
        assert "not a git repository" in caplog.text

    def test_missing_git_yields_empty_list(self) -> None:
        lookup = GitAuthorLookup(git="definitely-not-an-installed-git-binary")

        assert lookup.lookup(Path("de.po")) == []

    def test_os_error_yields_empty_list(self) -> None:
        with patch("poprogress.contributors.subprocess.run", side_effect=PermissionError("denied")):
            assert GitAuthorLookup().lookup(Path("de.po")) == []

    def test_implements_protocol(self) -> None:
        assert isinstance(GitAuthorLookup(), AuthorLookup)


class TestStaticAuthorLookup:
    """Tests for the mapping-backed lookup."""

    def test_lookup(self) -> None:
        path = Path("locale/de_DE.UTF-8/LC_MESSAGES/palma.po")
        lookup = StaticAuthorLookup({path: ["Bob", "Alice", "Bob"]})

        assert lookup.lookup(path) == ["Alice", "Bob"]
        assert lookup.lookup(Path("other.po")) == []

    def test_implements_protocol(self) -> None:
        assert isinstance(StaticAuthorLookup(), AuthorLookup)
