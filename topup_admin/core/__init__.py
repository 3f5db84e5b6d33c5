"""Core infrastructure for the top-up admin dashboard."""
