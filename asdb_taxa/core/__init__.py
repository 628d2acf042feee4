"""Core cache-building functionality."""
