"""Data models for asdb-taxa."""
