"""Command-line interface for treee."""
