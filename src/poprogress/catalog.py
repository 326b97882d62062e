"""Gettext catalog parsing.

A catalog maps each message identifier (``msgid``) of a ``.po`` file to its
translation (``msgstr``). Parsing is a small line-driven state machine: the
parser is either accumulating an identifier or accumulating its translation,
and quoted continuation lines extend whichever of the two is current.

Only the constructs needed for completion statistics are recognised. Plural
forms (``msgid_plural``, ``msgstr[N]``), contexts, flags, comments and
obsolete entries are skipped.

Example:
    >>> catalog = parse_catalog([
    ...     'msgid "Hello"',
    ...     'msgstr "Hallo"',
    ... ])
    >>> catalog["Hello"]
    'Hallo'
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator

from poprogress.errors import CatalogNotFoundError, CatalogReadError

logger = logging.getLogger(__name__)

MSGID_RE = re.compile(r'^msgid\s+"(.*)"')
MSGSTR_RE = re.compile(r'^msgstr\s+"(.*)"')
CONTINUATION_RE = re.compile(r'^"(.*)"')


@dataclass(frozen=True)
class CatalogEntry:
    """A single identifier and its translation."""

    msgid: str
    msgstr: str = ""

    @property
    def is_empty(self) -> bool:
        return self.msgstr == ""


@dataclass
class Catalog:
    """Identifier to translation mapping for one locale.

    The header block of a ``.po`` file (empty identifier) is never part of a
    catalog.

    Attributes:
        messages: Mapping of msgid to msgstr.
        locale: Locale the catalog belongs to, if known.
        path: File the catalog was read from, if any.
    """

    messages: dict[str, str] = field(default_factory=dict)
    locale: str | None = None
    path: Path | None = None

    def __post_init__(self) -> None:
        self.messages = {k: v for k, v in self.messages.items() if k != ""}

    def __len__(self) -> int:
        return len(self.messages)

    def __contains__(self, msgid: object) -> bool:
        return msgid in self.messages

    def __getitem__(self, msgid: str) -> str:
        return self.messages[msgid]

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def get(self, msgid: str, default: str | None = None) -> str | None:
        return self.messages.get(msgid, default)

    def entries(self) -> Iterator[CatalogEntry]:
        """Iterate over the catalog as immutable entries."""
        for msgid, msgstr in self.messages.items():
            yield CatalogEntry(msgid, msgstr)


class ParserState(str, Enum):
    """What the parser is currently accumulating."""

    MSGID = "msgid"
    MSGSTR = "msgstr"


class CatalogParser:
    """Line-oriented ``.po`` parser.

    The parser keeps a cursor on the identifier being built and a state
    telling whether quoted continuation lines belong to that identifier or to
    its translation:

    - ``msgid "..."`` starts a new identifier and resets its translation.
    - ``msgstr "..."`` switches to the translation and appends to it.
    - ``"..."`` extends the identifier or the translation.
    - anything else is ignored.

    A parser instance can be reused; each call to :meth:`parse` starts from a
    clean state.
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self._state = ParserState.MSGID
        self._current = ""
        self._messages: dict[str, str] = {}

    @property
    def state(self) -> ParserState:
        return self._state

    def feed(self, line: str) -> None:
        """Process a single physical line."""
        match = MSGID_RE.match(line)
        if match:
            self._state = ParserState.MSGID
            self._current = match.group(1)
            self._messages[self._current] = ""
            return

        match = MSGSTR_RE.match(line)
        if match:
            self._state = ParserState.MSGSTR
            self._append_translation(match.group(1))
            return

        match = CONTINUATION_RE.match(line)
        if match:
            if self._state is ParserState.MSGID:
                self._current += match.group(1)
            else:
                self._append_translation(match.group(1))

    def _append_translation(self, text: str) -> None:
        self._messages[self._current] = self._messages.get(self._current, "") + text

    def parse(
        self,
        lines: Iterable[str],
        locale: str | None = None,
        path: Path | None = None,
    ) -> Catalog:
        """Parse catalog lines into a :class:`Catalog`.

        Args:
            lines: Lines of the catalog file, with or without line endings.
            locale: Locale to attach to the catalog.
            path: Source path to attach to the catalog.

        Returns:
            The parsed catalog, without the header entry.
        """
        self._reset()
        for line in lines:
            self.feed(line)
        messages = self._messages
        self._reset()
        return Catalog(messages=messages, locale=locale, path=path)


def parse_catalog(
    text: str | Iterable[str],
    locale: str | None = None,
    path: Path | None = None,
) -> Catalog:
    """Parse catalog text (a string or an iterable of lines)."""
    lines = text.split("\n") if isinstance(text, str) else text
    return CatalogParser().parse(lines, locale=locale, path=path)


def load_catalog(path: str | Path, locale: str | None = None) -> Catalog:
    """Read and parse a catalog file.

    Args:
        path: Path to the ``.po`` file.
        locale: Locale the file belongs to.

    Returns:
        The parsed catalog.

    Raises:
        CatalogNotFoundError: If the file does not exist.
        CatalogReadError: If the file cannot be read or is not valid UTF-8.
    """
    path = Path(path)
    if not path.is_file():
        raise CatalogNotFoundError(path, locale)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogReadError(path, str(e))

    catalog = parse_catalog(text, locale=locale, path=path)
    logger.debug("Parsed %d entries from %s", len(catalog), path)
    return catalog
