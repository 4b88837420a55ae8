"""Domain package: entities, repository interfaces and services."""
