"""Infrastructure layer - storage, importers and exporters."""
