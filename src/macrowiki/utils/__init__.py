"""Shared utilities for macrowiki."""
