"""Engine runtime implementations behind the public API."""
