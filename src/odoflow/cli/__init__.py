"""Command-line interface for odoflow."""
