"""Core analytics, configuration, and data helpers."""
