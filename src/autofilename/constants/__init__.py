"""Module-level constants for autofilename."""
