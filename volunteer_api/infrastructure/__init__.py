"""Infrastructure layer: persistence and security."""
