"""Session — one planned or logged unit of training."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import date

from triathlon_engine.models.enums import Intensity, Sport, Tag, Weekday


def append_note(notes: str, text: str) -> str:
    """Append *text* on a new line; notes are never replaced."""
    return f"{notes}\n{text}".strip()


@dataclass(frozen=True)
class Session:
    """A single dated training session.

    Rules never mutate a Session; they build copies through
    ``dataclasses.replace`` or the helpers below.
    """

    date: date
    sport: Sport
    title: str
    duration_min: int
    intensity: Intensity
    notes: str = ""
    tags: frozenset[Tag] = field(default_factory=frozenset)

    @property
    def weekday(self) -> Weekday:
        return Weekday(self.date.weekday())

    @property
    def is_rest(self) -> bool:
        return self.sport == Sport.REST

    def has_tag(self, tag: Tag) -> bool:
        return tag in self.tags

    def with_note(self, text: str) -> Session:
        """Return a copy with *text* appended to the notes."""
        return dataclasses.replace(self, notes=append_note(self.notes, text))
