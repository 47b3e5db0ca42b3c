"""Dependency Inversion Principle snippets."""
