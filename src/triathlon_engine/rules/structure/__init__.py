"""Structural rules that fix session identity."""
