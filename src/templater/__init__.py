"""templater - interactive file templates and clipboard snippets."""

__version__ = "0.1.0"
