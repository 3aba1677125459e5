"""Safety and volume rules."""
