"""Error report builder: renders failure context as JSON and Markdown."""

__version__ = "0.1.0"
