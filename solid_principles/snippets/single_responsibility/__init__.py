"""Single Responsibility Principle snippets."""
