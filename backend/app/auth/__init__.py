"""Bearer-token authentication for mutation endpoints."""
