"""Import a local tree of Markdown files into an Outline collection."""

__version__ = "0.1.0"
