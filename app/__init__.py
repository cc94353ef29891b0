"""Server-rendered blog post creation form backed by the Posts API."""

__version__ = "0.1.0"
