"""Parsing of wikilink-style note references (``Note#Section|Label``)."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

from vault_export.errors import MalformedNoteReference

_REFERENCE_RE = re.compile(r"^(?P<target>[^#|]+)?(?:#(?P<section>[^|]+))?(?:\|(?P<label>.+))?$", re.DOTALL)
_HYPHENS_RE = re.compile(r"-{2,}")


def _part(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class NoteReference:
    """Structured form of a link target: note, optional section, optional label."""

    target: str | None = None
    section: str | None = None
    label: str | None = None

    @classmethod
    def parse(cls, text: str) -> NoteReference:
        """Parse ``target#section|label``; raises MalformedNoteReference."""
        m = _REFERENCE_RE.match(text)
        if m is None:
            raise MalformedNoteReference(text)
        ref = cls(
            target=_part(m.group("target")),
            section=_part(m.group("section")),
            label=_part(m.group("label")),
        )
        if ref.target is None and ref.section is None:
            raise MalformedNoteReference(text)
        return ref

    def display(self) -> str:
        """Label if set, else 'target > section', target or section."""
        if self.label:
            return self.label
        if self.target and self.section:
            return f"{self.target} > {self.section}"
        return self.target or self.section or ""

    def __str__(self) -> str:
        return self.display()


def slugify(text: str) -> str:
    """'My Section!' -> 'my-section', 'Café' -> 'cafe'; non-Latin letters are kept."""
    chars: list[str] = []
    base = ""
    for c in unicodedata.normalize("NFKD", text):
        if unicodedata.category(c) == "Mn":
            # accents on ASCII letters are dropped; other scripts keep their marks
            if base.isascii():
                continue
        else:
            base = c
        chars.append(c)
    text = unicodedata.normalize("NFC", "".join(chars)).lower()
    kept = "".join(c if c.isalnum() or unicodedata.category(c).startswith("M") else "-" for c in text)
    return _HYPHENS_RE.sub("-", kept).strip("-")
