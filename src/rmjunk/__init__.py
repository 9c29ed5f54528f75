"""Remove junk files such as .DS_Store and Thumbs.db from directories."""

__version__ = "0.1.0"
