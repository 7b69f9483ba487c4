"""Command line interface for cq-lineup."""
