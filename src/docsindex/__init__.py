"""Hierarchical DocSearch records for documentation sites."""
