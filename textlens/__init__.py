"""Image-to-text extraction pipeline with tabular export."""

__version__ = "0.1.0"
