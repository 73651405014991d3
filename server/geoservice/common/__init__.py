"""Shared building blocks: exception hierarchy and logging setup."""
