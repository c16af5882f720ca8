"""Boundary adapters: object storage, model providers, metadata database."""
