"""Adapters – framework integrations (installed via extras)."""
