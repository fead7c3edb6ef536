"""Core utilities shared across claude-gh commands."""
