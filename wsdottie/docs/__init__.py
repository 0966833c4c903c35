"""OpenAPI generation and sample data capture."""
