"""Serialization helpers shared by logging and state exports."""

from engine.diagnostics.json_codec import dumps_bytes, dumps_text, loads

__all__ = ["dumps_bytes", "dumps_text", "loads"]
