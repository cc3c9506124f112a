"""Command-line interface for Show Runner."""
