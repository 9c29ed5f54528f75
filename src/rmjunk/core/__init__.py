"""Junk classification and directory traversal."""
