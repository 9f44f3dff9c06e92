"""Book store service."""
