"""Movie reviews API."""
