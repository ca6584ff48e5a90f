"""rmds - recursively remove .DS_Store and AppleDouble files."""

__version__ = "0.3.0"
