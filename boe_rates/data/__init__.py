"""Data collection and management."""
