"""Game-agnostic runtime primitives: scheduling, AI contracts and logging."""
