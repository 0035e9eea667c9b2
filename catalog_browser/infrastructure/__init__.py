"""Infrastructure layer: HTTP access to the catalogue service and wire formats."""
