"""Kernel – errors and small shared types."""
