"""Markdown event stream model shared by all postprocessors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EventKind(str, Enum):
    """Kinds of markdown events. Only text and breaks are interpreted here."""

    text = "text"
    soft_break = "soft_break"
    hard_break = "hard_break"
    html = "html"
    code = "code"
    start = "start"
    end = "end"
    rule = "rule"


@dataclass(frozen=True)
class Event:
    """A single parsed markdown event."""

    kind: EventKind
    content: str = ""

    @classmethod
    def text(cls, content: str) -> Event:
        return cls(EventKind.text, content)

    @classmethod
    def html(cls, content: str) -> Event:
        return cls(EventKind.html, content)

    @property
    def is_break(self) -> bool:
        return self.kind in (EventKind.soft_break, EventKind.hard_break)


SOFT_BREAK = Event(EventKind.soft_break)
HARD_BREAK = Event(EventKind.hard_break)

# Ordered, mutable stream for one note.
MarkdownEvents = list[Event]
