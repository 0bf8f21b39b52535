"""Application layer: commands, queries and services over the domain."""
