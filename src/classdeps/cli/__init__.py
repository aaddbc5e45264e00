"""Command line interface for classdeps."""
