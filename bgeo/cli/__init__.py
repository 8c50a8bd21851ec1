"""Command-line entry points for bgeo."""
