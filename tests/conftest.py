"""Shared fixtures for poprogress tests."""

from pathlib import Path

import pytest

PO_HEADER = '''\
# Translations for palma.
# Copyright (C) 2016 Mannheim University Library
#
msgid ""
msgstr ""
"Project-Id-Version: palma\\n"
"Content-Type: text/plain; charset=UTF-8\\n"

'''


def render_po(messages: dict[str, str]) -> str:
    """Render a minimal .po file with a header block."""
    parts = [PO_HEADER]
    for msgid, msgstr in messages.items():
        parts.append(f'msgid "{msgid}"\nmsgstr "{msgstr}"\n\n')
    return "".join(parts)


def write_po(locale_dir: Path, locale: str, messages: dict[str, str], domain: str = "palma") -> Path:
    """Write a catalog at the conventional location and return its path."""
    path = locale_dir / f"{locale}.UTF-8" / "LC_MESSAGES" / f"{domain}.po"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_po(messages), encoding="utf-8")
    return path


@pytest.fixture
def locale_dir(tmp_path: Path) -> Path:
    """Locale tree with a reference catalog and three translations.

    - de_DE: 19 of 20 translated (95.00%)
    - fr_FR: 9 of 20 translated (45.00%)
    - it_IT: fully translated (100.00%)
    """
    base = tmp_path / "locale"
    reference = {f"Message {i}": f"Message {i}" for i in range(20)}
    write_po(base, "en_US", reference)

    german = {f"Message {i}": f"Nachricht {i}" for i in range(20)}
    german["Message 19"] = ""
    write_po(base, "de_DE", german)

    french = {f"Message {i}": f"Message {i}" for i in range(20)}
    for i in range(9):
        french[f"Message {i}"] = f"Texte {i}"
    write_po(base, "fr_FR", french)

    write_po(base, "it_IT", {f"Message {i}": f"Messaggio {i}" for i in range(20)})

    (base / ".git-keep").write_text("")
    return base


@pytest.fixture
def write_catalog():
    """Return the catalog writer helper."""
    return write_po
