"""Typed, invariant-checked values describing robot motion."""
