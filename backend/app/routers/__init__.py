"""API routers, mounted under {api_prefix}/v1."""

from . import accounts, domains

__all__ = ["accounts", "domains"]
