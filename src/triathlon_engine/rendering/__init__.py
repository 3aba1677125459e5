"""Rendering module — human-readable plan output."""

from triathlon_engine.rendering.text import format_duration, render_plan_text

__all__ = ["format_duration", "render_plan_text"]
