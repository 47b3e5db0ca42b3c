"""Infrastructure layer - snippet source, README rendering and logging."""
