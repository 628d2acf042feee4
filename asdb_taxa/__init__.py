"""Taxon cache builder for ASDB."""

__version__ = "0.1.0"
