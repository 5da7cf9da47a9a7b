"""Partition value extraction and sync configuration resolution."""

__version__ = "0.1.0"
