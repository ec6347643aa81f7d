"""Domain layer: models and views."""
