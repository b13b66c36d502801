"""Query objects over the ORM models."""
