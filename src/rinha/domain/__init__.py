"""Domain layer — bounded value types, the Person aggregate, and its codec.

This layer depends only on stdlib and pydantic.
It must never import from infrastructure, commands, or config.
"""
