"""Infrastructure layer: extractor strategies and property loaders."""
