"""Booklists: curated book lists with likes and comments."""
