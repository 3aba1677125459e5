"""Session classification: what counts as hard, and how a hard session is eased."""

from __future__ import annotations

import dataclasses

from triathlon_engine.models.enums import (
    DOWNGRADE_INTENSITY,
    DOWNGRADE_TITLE_SUFFIX,
    HARD_INTENSITIES,
    HARD_TAGS,
)
from triathlon_engine.models.session import Session


def is_hard(session: Session) -> bool:
    """True if the session is Z4/Z5 or tagged vo2/threshold."""
    if session.intensity in HARD_INTENSITIES:
        return True
    return any(tag in HARD_TAGS for tag in session.tags)


def downgrade(session: Session, reason: str) -> Session:
    """Ease a session to Z2 and record *reason* in its notes.

    Hard tags are stripped so the copy no longer classifies as hard.
    """
    return dataclasses.replace(
        session.with_note(f"Downgraded: {reason}"),
        intensity=DOWNGRADE_INTENSITY,
        title=f"{session.title}{DOWNGRADE_TITLE_SUFFIX}",
        tags=frozenset(tag for tag in session.tags if tag not in HARD_TAGS),
    )
