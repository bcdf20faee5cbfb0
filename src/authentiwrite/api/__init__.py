"""HTTP API for AuthentiWrite."""
