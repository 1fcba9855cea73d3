"""Internal helpers for comply."""
