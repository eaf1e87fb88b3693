"""Chart rendering for the blog."""

__version__ = "1.0.0"
