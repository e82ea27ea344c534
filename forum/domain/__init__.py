"""Domain layer: entities and expected failures."""
