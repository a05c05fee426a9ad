"""Core package: models, errors and scene serialization."""
