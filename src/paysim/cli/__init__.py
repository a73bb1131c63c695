"""Command-line interface for paysim."""
