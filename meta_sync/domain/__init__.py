"""Domain layer: ports and errors."""
