"""Domain layer: entities, protocols and validation rules."""
