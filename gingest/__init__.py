"""Convert local directories and Git repositories into Markdown digests."""

__version__ = "0.1.0"