"""Concrete catalog source/sink clients (HTTP and local)."""
