"""Infrastructure layer - logging, dependency injection and singleton access."""
