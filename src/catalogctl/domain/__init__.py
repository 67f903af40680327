"""Domain layer: the Book record, violations, and validation rules.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
