"""Infrastructure layer: adapters for external collaborators."""
