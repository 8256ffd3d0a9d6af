"""Catalog search relevance service."""
