"""Liskov Substitution Principle snippets."""
