"""Command line interface for booklists."""
