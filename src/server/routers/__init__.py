"""Routers for the wiki server."""
