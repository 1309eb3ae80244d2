"""Two-player grid battle game engine."""
