"""Batch image descriptions from multimodal models."""

__version__ = "0.1.0"
