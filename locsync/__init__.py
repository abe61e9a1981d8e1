"""Keep localization files in step with their source-of-truth language."""

__version__ = "1.0.0"
