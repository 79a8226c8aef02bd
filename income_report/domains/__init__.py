"""Report domains."""
