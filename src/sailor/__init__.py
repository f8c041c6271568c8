"""Sailor: a tilt-driven sea scene rendered with pygame."""
