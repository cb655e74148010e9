"""Officially maintained postprocessors.

Every postprocessor is a callable ``(context, events) -> PostprocessorResult``.
It may mutate the note's frontmatter, destination and event stream in place.

Frontmatter control keys and their consumers:

- ``embed_link`` / ``id``: consumed and removed by ``add_embed_info``.
- ``destination``: consumed and removed by ``flat_hierarchy``.
"""

from __future__ import annotations

import html
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePath
from typing import Protocol, runtime_checkable

from vault_export.context import Context
from vault_export.errors import InvalidDestinationRoot, MalformedNoteReference
from vault_export.events import HARD_BREAK, Event, EventKind, MarkdownEvents
from vault_export.references import NoteReference, slugify

logger = logging.getLogger(__name__)

DEFAULT_AUTHOR = "Aadam"


class PostprocessorResult(Enum):
    """Tells the pipeline whether to keep going with the current note."""

    CONTINUE = "continue"
    STOP_AND_SKIP_NOTE = "stop_and_skip_note"


@runtime_checkable
class Postprocessor(Protocol):
    def __call__(self, context: Context, events: MarkdownEvents) -> PostprocessorResult: ...


# ---------------------------------------------------------------------------
# Frontmatter mutators
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AddAuthor:
    """Sets ``author`` in the frontmatter, overwriting any previous value."""

    author: str = DEFAULT_AUTHOR

    def __call__(self, context: Context, events: MarkdownEvents) -> PostprocessorResult:
        context.frontmatter["author"] = self.author
        return PostprocessorResult.CONTINUE


add_author = AddAuthor()


def remove_empty_aliases(context: Context, events: MarkdownEvents) -> PostprocessorResult:
    """Drop ``aliases`` when it is empty or not a list at all."""
    if "aliases" in context.frontmatter:
        aliases = context.frontmatter.get_sequence("aliases")
        if not aliases:
            del context.frontmatter["aliases"]
            logger.info(f"Removed empty aliases from {context.current_file}")
    return PostprocessorResult.CONTINUE


# ---------------------------------------------------------------------------
# Event stream rewriters
# ---------------------------------------------------------------------------


def softbreaks_to_hardbreaks(context: Context, events: MarkdownEvents) -> PostprocessorResult:
    """Convert every soft line break into a hard one (strict line breaks)."""
    for i, event in enumerate(events):
        if event.kind is EventKind.soft_break:
            events[i] = HARD_BREAK
    return PostprocessorResult.CONTINUE


_EMBED_OPEN = (
    '\n<div class="markdown-embed">\n'
    '<div class="markdown-embed-title" style="display:none;">{title}</div>\n'
    '<div class="markdown-embed-content">\n\n\n'
)

_LINK_ICON = (
    '<svg viewBox="0 0 100 100" class="link" width="20" height="20">'
    '<path fill="currentColor" stroke="currentColor" d="M74,8c-4.8,0-9.3,1.9-12.7,5.3l-10,10'
    "c-2.9,2.9-4.7,6.6-5.1,10.6C46,34.6,46,35.3,46,36c0,2.7,0.6,5.4,1.8,7.8l3.1-3.1 C50.3,39.2,50,37.6,50,36"
    "c0-3.7,1.5-7.3,4.1-9.9l10-10c2.6-2.6,6.2-4.1,9.9-4.1s7.3,1.5,9.9,4.1c2.6,2.6,4.1,6.2,4.1,9.9 s-1.5,7.3-4.1,9.9"
    "l-10,10C71.3,48.5,67.7,50,64,50c-1.6,0-3.2-0.3-4.7-0.8l-3.1,3.1c2.4,1.1,5,1.8,7.8,1.8c4.8,0,9.3-1.9,12.7-5.3 l10-10"
    "C90.1,35.3,92,30.8,92,26s-1.9-9.3-5.3-12.7C83.3,9.9,78.8,8,74,8L74,8z M62,36c-0.5,0-1,0.2-1.4,0.6l-24,24 "
    "c-0.5,0.5-0.7,1.2-0.6,1.9c0.2,0.7,0.7,1.2,1.4,1.4c0.7,0.2,1.4,0,1.9-0.6l24-24c0.6-0.6,0.8-1.5,0.4-2.2"
    "C63.5,36.4,62.8,36,62,36 z M36,46c-4.8,0-9.3,1.9-12.7,5.3l-10,10c-3.1,3.1-5,7.2-5.2,11.6c0,0.4,0,0.8,0,1.2"
    "c0,4.8,1.9,9.3,5.3,12.7 C16.7,90.1,21.2,92,26,92s9.3-1.9,12.7-5.3l10-10C52.1,73.3,54,68.8,54,64"
    "c0-2.7-0.6-5.4-1.8-7.8l-3.1,3.1 c0.5,1.5,0.8,3.1,0.8,4.7c0,3.7-1.5,7.3-4.1,9.9l-10,10C33.3,86.5,29.7,88,26,88"
    "s-7.3-1.5-9.9-4.1S12,77.7,12,74 c0-3.7,1.5-7.3,4.1-9.9l10-10c2.6-2.6,6.2-4.1,9.9-4.1c1.6,0,3.2,0.3,4.7,0.8"
    'l3.1-3.1C41.4,46.6,38.7,46,36,46L36,46z"></path></svg>'
)

_EMBED_CLOSE = (
    "\n</div>\n"
    '<div class="markdown-embed-link" style="display:none;">\n\n'
    '<a href="{link}" title="Open Link">\n'
    f"{_LINK_ICON} \n\n"
    "  </a></div>\n"
    "</div>\n"
)


def add_embed_info(context: Context, events: MarkdownEvents) -> PostprocessorResult:
    """Wrap an embedded note in ``markdown-embed`` divs carrying title and back-link.

    Only valid on embedded notes: ``embed_link`` holds the raw reference the
    note was embedded with and ``id`` the resolved target of the note itself.
    """
    fm = context.frontmatter
    link_text = fm.require_str("embed_link", context.current_file)
    link = fm.require_str("id", context.current_file)

    try:
        note_ref = NoteReference.parse(link_text)
    except MalformedNoteReference as exc:
        raise MalformedNoteReference(link_text, context.current_file) from exc

    if note_ref.section:
        link = f"{link}#{slugify(note_ref.section)}"
    title = note_ref.display()

    events.insert(0, Event.text(_EMBED_OPEN.format(title=title)))
    events.append(Event.text(_EMBED_CLOSE.format(link=html.escape(link))))

    del fm["embed_link"]
    del fm["id"]
    return PostprocessorResult.CONTINUE


# ---------------------------------------------------------------------------
# Destination rewriting
# ---------------------------------------------------------------------------


def _flatten(relative: PurePath) -> str:
    """a/b.c (without extension) -> a-b-c"""
    return "-".join(relative.parts).replace(".", "-")


def flat_hierarchy(context: Context, events: MarkdownEvents) -> PostprocessorResult:
    """Collapse the destination's folders into a single file name under the root.

    ``/out/a/b.c.md`` with root ``/out`` becomes ``/out/a-b-c.md``.
    """
    root = Path(context.frontmatter.require_str("destination", context.current_file))

    try:
        relative = context.destination.relative_to(root)
    except ValueError:
        raise InvalidDestinationRoot(context.destination, root, context.current_file) from None
    if not relative.parts:
        raise InvalidDestinationRoot(context.destination, root, context.current_file)

    ext = relative.suffix
    stem = relative.with_suffix("") if ext else relative
    context.destination = root / f"{_flatten(stem)}{ext}"

    del context.frontmatter["destination"]
    return PostprocessorResult.CONTINUE


# ---------------------------------------------------------------------------
# Filtering
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FilterByTags:
    """Skip notes by tag. Exclusion wins over inclusion; empty ``only_tags`` allows all."""

    skip_tags: frozenset[str] = field(default_factory=frozenset)
    only_tags: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "skip_tags", frozenset(self.skip_tags))
        object.__setattr__(self, "only_tags", frozenset(self.only_tags))

    def decide(self, tags: Iterable[object]) -> PostprocessorResult:
        note_tags = {t for t in tags if isinstance(t, str)}
        if self.skip_tags & note_tags:
            return PostprocessorResult.STOP_AND_SKIP_NOTE
        if not self.only_tags or self.only_tags & note_tags:
            return PostprocessorResult.CONTINUE
        return PostprocessorResult.STOP_AND_SKIP_NOTE

    def __call__(self, context: Context, events: MarkdownEvents) -> PostprocessorResult:
        tags = context.frontmatter.get_sequence("tags") or []
        result = self.decide(tags)
        if result is PostprocessorResult.STOP_AND_SKIP_NOTE:
            logger.debug(f"Skipping {context.current_file}: filtered by tags {tags}")
        return result


def filter_by_tags(skip_tags: Iterable[str] = (), only_tags: Iterable[str] = ()) -> FilterByTags:
    return FilterByTags(frozenset(skip_tags), frozenset(only_tags))
