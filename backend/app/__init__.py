"""HTTP API for the domain registry."""
