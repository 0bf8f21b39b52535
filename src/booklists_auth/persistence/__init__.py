"""Persistence implementations for booklists_auth, grouped by technology."""
