"""Domain layer: entities, error types and pure policies."""
