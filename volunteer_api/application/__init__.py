"""Application layer: use cases orchestrating repositories."""
