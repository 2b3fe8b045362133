"""odoflow CLI command groups."""
