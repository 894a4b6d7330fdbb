"""Infrastructure layer: reading field descriptors from disk."""
