"""Output layer — rendering repository results for the CLI."""
