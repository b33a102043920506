"""hero-refactor: rebuild game hero assets into a per-hero folder layout."""

__version__ = "0.1.0"
