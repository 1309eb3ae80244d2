"""Process-level configuration and logging policy."""
