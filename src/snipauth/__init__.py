"""snipauth - permission decisions and grant lifecycle for user-owned snippets."""

__version__ = "0.1.0"
