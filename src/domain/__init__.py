"""Domain models for the strings consistency check."""
