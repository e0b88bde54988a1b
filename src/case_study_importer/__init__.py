"""Case study Markdown importer."""

__version__ = "0.1.0"
