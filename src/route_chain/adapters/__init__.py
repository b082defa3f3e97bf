"""Adapters: in-memory router collaborators."""
