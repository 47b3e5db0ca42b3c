"""Interface Segregation Principle snippets."""
