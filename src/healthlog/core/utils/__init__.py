"""Small shared helpers (logging setup, file writes)."""
