"""External collaborators consumed by the registry."""
