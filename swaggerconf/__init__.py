"""Assemble API documentation descriptors from declarative settings."""

__version__ = "0.1.0"
