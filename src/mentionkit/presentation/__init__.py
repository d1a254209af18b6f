"""Presentation layer: completion strategies, rendering and textual widgets."""
