"""Infrastructure integrations."""
