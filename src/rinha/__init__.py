"""rinha — validation and persistence core for Person records."""

__version__ = "0.1.0"
