"""Readers and writers for dump files and cache tables."""
