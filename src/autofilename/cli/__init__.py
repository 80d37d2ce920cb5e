"""Command line interface for autofilename."""
