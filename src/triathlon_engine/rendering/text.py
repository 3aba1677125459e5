"""Plain-text rendering of an adjusted WeekPlan for chat delivery."""

from __future__ import annotations

from itertools import groupby

from triathlon_engine.models.enums import Sport, Tag
from triathlon_engine.models.session import Session
from triathlon_engine.models.week_plan import WeekPlan

_SPORT_ICONS: dict[Sport, str] = {
    Sport.SWIM: "🏊",
    Sport.BIKE: "🚴",
    Sport.RUN: "🏃",
    Sport.STRENGTH: "💪",
    Sport.REST: "😴",
}


def format_duration(minutes: int) -> str:
    """Convert minutes to a short human string. e.g. 90 -> '1h 30m'."""
    if minutes <= 0:
        return "0m"
    h, m = divmod(int(minutes), 60)
    if h > 0 and m > 0:
        return f"{h}h {m}m"
    if h > 0:
        return f"{h}h"
    return f"{m}m"


def render_session(session: Session) -> list[str]:
    icon = _SPORT_ICONS.get(session.sport, "🏋️")
    optional = " (optional)" if session.has_tag(Tag.OPTIONAL) else ""
    lines = [
        f"  {icon} {session.title}{optional}",
        f"     {session.duration_min}min • {session.intensity.name}",
    ]
    for note in session.notes.splitlines():
        lines.append(f"     💡 {note}")
    return lines


def render_plan_text(plan: WeekPlan) -> str:
    """Render the plan grouped by date, followed by adjustments.

    Example:
        7-Day Training Plan (starting Mon Feb 09 2026)

        Mon Feb 9:
          🚴 Bike Endurance
             60min • Z2
             💡 Easy spin, focus on cadence
    """
    lines = [f"7-Day Training Plan (starting {plan.start_date.strftime('%a %b %d %Y')})"]

    ordered = sorted(plan.sessions, key=lambda s: s.date)
    for day, sessions in groupby(ordered, key=lambda s: s.date):
        lines.append("")
        lines.append(f"{day.strftime('%a %b')} {day.day}:")
        for session in sessions:
            lines.extend(render_session(session))

    if plan.warnings:
        lines.append("")
        lines.append("⚠️ Adjustments:")
        lines.extend(plan.warnings)

    if plan.applied_rules:
        lines.append("")
        lines.append(f"📋 Applied rules: {len(plan.applied_rules)}")

    lines.append("")
    lines.append(f"Total: {format_duration(plan.total_minutes)}")
    return "\n".join(lines)
