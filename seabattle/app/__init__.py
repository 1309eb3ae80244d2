"""Session ownership, command handling and state read-out."""
