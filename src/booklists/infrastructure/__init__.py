"""Infrastructure adapters: persistence and identity."""
