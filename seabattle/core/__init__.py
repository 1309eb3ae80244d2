"""Board model, fleet placement, shot resolution and turn rules."""
