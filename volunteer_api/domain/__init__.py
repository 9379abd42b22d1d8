"""Domain layer: entities, vocabularies and exceptions."""
