"""Request-scoped processing pipelines."""
