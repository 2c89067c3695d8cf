"""Adapters around the core (file parsing)."""
