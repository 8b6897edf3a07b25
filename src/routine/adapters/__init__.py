"""Adapters – store-specific implementations of the application ports."""
