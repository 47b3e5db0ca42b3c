"""Open/Closed Principle snippets."""
