"""Command-line management tools."""
