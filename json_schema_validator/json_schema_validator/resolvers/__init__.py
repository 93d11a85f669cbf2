"""$ref resolution."""
