"""Application layer: configuration catalog, resolution and use cases."""
