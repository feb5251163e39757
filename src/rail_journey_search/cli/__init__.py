"""Command line interface for railway journey search."""
