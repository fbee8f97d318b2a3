"""Shared pytest configuration."""

pytest_plugins = ["mp_datagen.testing.fixtures"]
