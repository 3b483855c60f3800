"""Identity infrastructure layer."""
