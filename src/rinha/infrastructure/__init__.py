"""Infrastructure layer — database engine, schema, and repositories.

This layer depends on stdlib, SQLAlchemy, and the domain layer.
It must never import from commands, config, or output.
"""
