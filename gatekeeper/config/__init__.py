"""Application-specific configuration tables."""
