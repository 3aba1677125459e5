"""Command-line runner for the triathlon plan engine."""
