"""Core skill discovery, editor and installation helpers."""
