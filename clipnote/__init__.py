"""ClipNote: AI-powered article summarization."""

__version__ = "0.1.0"
